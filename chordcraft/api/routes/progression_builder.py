"""ProgressionBuilder actions and queries."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chordcraft.api.responses import to_response
from chordcraft.models.requests import (
    CreateProgressionRequest,
    PositionRequest,
    ProgressionRequest,
    RenameProgressionRequest,
    ReorderSlotsRequest,
    SetChordRequest,
)
from chordcraft.services.container import Services, get_services
from chordcraft.sync.syncs import CREATE_PROGRESSION, DELETE_PROGRESSION

router = APIRouter()


@router.post("/createProgression")
async def create_progression(
    request: CreateProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    """Create a progression; syncs give it default playback settings and preferences."""
    result = await services.syncs.perform(
        CREATE_PROGRESSION,
        services.progressions.create_progression,
        name=request.name,
    )
    return to_response(result, "progression")


@router.post("/addSlot")
async def add_slot(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    return to_response(await services.progressions.add_slot(request.progression_id))


@router.post("/setChord")
async def set_chord(
    request: SetChordRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.set_chord(
        request.progression_id, request.position, request.chord
    )
    return to_response(result)


@router.post("/deleteChord")
async def delete_chord(
    request: PositionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.delete_chord(request.progression_id, request.position)
    return to_response(result)


@router.post("/deleteSlot")
async def delete_slot(
    request: PositionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.delete_slot(request.progression_id, request.position)
    return to_response(result)


@router.post("/reorderSlots")
async def reorder_slots(
    request: ReorderSlotsRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.reorder_slots(
        request.progression_id, request.old_position, request.new_position
    )
    return to_response(result)


@router.post("/renameProgression")
async def rename_progression(
    request: RenameProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.rename_progression(request.progression_id, request.name)
    return to_response(result)


@router.post("/deleteProgression")
async def delete_progression(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    """Delete a progression; syncs remove its playback settings and preferences."""
    result = await services.syncs.perform(
        DELETE_PROGRESSION,
        services.progressions.delete_progression,
        progression_id=request.progression_id,
    )
    return to_response(result)


@router.post("/validateProgressionAndPosition")
async def validate_progression_and_position(
    request: PositionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.validate_progression_and_position(
        request.progression_id, request.position
    )
    return to_response(result)


@router.post("/getProgression")
async def get_progression(
    request: ProgressionRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = await services.progressions.get_progression(request.progression_id)
    return to_response(result, "progression")


@router.post("/listProgressions")
async def list_progressions(services: Services = Depends(get_services)) -> JSONResponse:
    return to_response(await services.progressions.list_progressions(), "progressionIdentifiers")
