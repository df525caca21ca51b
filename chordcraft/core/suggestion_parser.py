"""
Parsers for free-text LLM suggestion responses.

Pure functions: text in, ``Ok`` structured data or ``Err(EMPTY_RESULT)`` out.
Tokens are not checked against the theory adapter; a suggestion only has to
be a non-empty token.
"""
from __future__ import annotations

from chordcraft.core.result import Err, ErrorKind, Ok, Result

NO_CHORD_SUGGESTIONS = "LLM did not return valid chord suggestions."
NO_PROGRESSION_SUGGESTIONS = "LLM did not return a valid chord progression."


def parse_chord_suggestions(text: str) -> Result[list[str]]:
    """Split a comma-separated reply into chord symbols, dropping empty tokens."""
    chords = [token.strip() for token in text.split(",")]
    chords = [chord for chord in chords if chord]
    if not chords:
        return Err(ErrorKind.EMPTY_RESULT, NO_CHORD_SUGGESTIONS)
    return Ok(chords)


def parse_progression_suggestions(text: str) -> Result[list[list[str]]]:
    """One progression per line, chords separated by whitespace; blank lines dropped.

    Progression lengths are not checked against the requested length.
    """
    progressions = [line.split() for line in text.splitlines()]
    progressions = [tokens for tokens in progressions if tokens]
    if not progressions:
        return Err(ErrorKind.EMPTY_RESULT, NO_PROGRESSION_SUGGESTIONS)
    return Ok(progressions)
