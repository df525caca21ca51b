"""Turning tagged results into HTTP responses."""
from __future__ import annotations

from typing import Any, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from chordcraft.core.result import Err, ErrorKind, Result
from chordcraft.models.base import CamelModel

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.OUT_OF_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CHORD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UPSTREAM_FAILURE: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.EMPTY_RESULT: status.HTTP_502_BAD_GATEWAY,
}


def _wire(value: Any) -> Any:
    if isinstance(value, CamelModel):
        return value.to_wire()
    if isinstance(value, list):
        return [_wire(item) for item in value]
    return value


def to_response(result: Result[Any], key: Optional[str] = None) -> JSONResponse:
    """``Ok`` becomes ``{key: value}`` (or ``{}``); ``Err`` becomes ``{"error": message}``."""
    if isinstance(result, Err):
        return JSONResponse(status_code=ERROR_STATUS[result.kind], content=result.to_payload())
    content = {} if key is None else {key: _wire(result.value)}
    return JSONResponse(status_code=status.HTTP_200_OK, content=content)
