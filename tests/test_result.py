"""Tests for tagged results (chordcraft/core/result.py)."""
from __future__ import annotations

from chordcraft.core.result import Err, ErrorKind, Ok, invalid_argument, not_found, out_of_range


def test_ok_and_err_flags():
    assert Ok(0).ok is True
    assert Err(ErrorKind.NOT_FOUND, "x").ok is False


def test_ok_holds_falsy_values():
    assert Ok(None) == Ok(None)
    assert Ok([]).value == []


def test_err_payload_is_single_error_field():
    assert Err(ErrorKind.EMPTY_RESULT, "nothing").to_payload() == {"error": "nothing"}


def test_helpers_set_kind():
    assert not_found("a").kind == ErrorKind.NOT_FOUND
    assert out_of_range("b").kind == ErrorKind.OUT_OF_RANGE
    assert invalid_argument("c").kind == ErrorKind.INVALID_ARGUMENT
