"""SuggestChord actions and queries. Preferences are created by sync, not by a route."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chordcraft.api.responses import to_response
from chordcraft.models.requests import (
    ProgressionRequest,
    SetComplexityRequest,
    SetGenreRequest,
    SetKeyRequest,
    SuggestChordRequest,
    SuggestProgressionRequest,
)
from chordcraft.services.container import Services, get_services

router = APIRouter()


@router.post("/setGenre")
async def set_genre(
    request: SetGenreRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.suggestions.set_genre(request.progression_id, request.genre))


@router.post("/setComplexity")
async def set_complexity(
    request: SetComplexityRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.suggestions.set_complexity(request.progression_id, request.complexity)
    return to_response(result)


@router.post("/setKey")
async def set_key(
    request: SetKeyRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.suggestions.set_key(request.progression_id, request.key))


@router.post("/deletePreferences")
async def delete_preferences(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.suggestions.delete_preferences(request.progression_id))


@router.post("/getSuggestionPreferences")
async def get_suggestion_preferences(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.suggestions.get_suggestion_preferences(request.progression_id)
    return to_response(result, "preferences")


@router.post("/suggestChord")
async def suggest_chord(
    request: SuggestChordRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.suggestions.suggest_chord(
        request.progression_id, request.chords, request.position
    )
    return to_response(result, "suggestedChords")


@router.post("/suggestProgression")
async def suggest_progression(
    request: SuggestProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.suggestions.suggest_progression(request.progression_id, request.length)
    return to_response(result, "suggestedProgressions")
