"""PlayBack actions and queries. Settings are created by sync, not by a route."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chordcraft.api.responses import to_response
from chordcraft.models.requests import (
    ChordNotesRequest,
    ProgressionNotesRequest,
    ProgressionRequest,
    SetInstrumentRequest,
    SetSecondsPerChordRequest,
)
from chordcraft.services.container import Services, get_services

router = APIRouter()


@router.post("/setInstrument")
async def set_instrument(
    request: SetInstrumentRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.playback.set_instrument(request.progression_id, request.instrument)
    return to_response(result)


@router.post("/setSecondsPerChord")
async def set_seconds_per_chord(
    request: SetSecondsPerChordRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.playback.set_seconds_per_chord(
        request.progression_id, request.seconds_per_chord
    )
    return to_response(result)


@router.post("/deleteSettings")
async def delete_settings(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.playback.delete_settings(request.progression_id))


@router.post("/getPlayBackSettings")
async def get_playback_settings(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.playback.get_playback_settings(request.progression_id)
    return to_response(result, "settings")


@router.post("/getChordNotes")
async def get_chord_notes(
    request: ChordNotesRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.playback.get_chord_notes(request.chord), "notes")


@router.post("/getProgressionNotes")
async def get_progression_notes(
    request: ProgressionNotesRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.playback.get_progression_notes(request.progression)
    return to_response(result, "notes")
