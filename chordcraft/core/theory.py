"""
Chord/theory adapter.

Maps chord symbols ("Cmaj7", "Dmin7", "Eb/G") to pitch names with a fixed
octave, using music21's ``harmony.ChordSymbol`` as the theory engine.
Unparseable symbols come back as ``Err(INVALID_CHORD)`` citing the exact
symbol; nothing here raises for bad input.
"""
from __future__ import annotations

import logging
import re

from music21 import exceptions21, harmony

from chordcraft.core.result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

DEFAULT_OCTAVE = 4

_SYMBOL_RE = re.compile(
    r"^(?P<root>[A-G])(?P<accidental>[#b]?)(?P<quality>[^/]*)(?:/(?P<bass>[A-G][#b]?))?$"
)

# Spellings music21 does not read the way players write them.
_QUALITY_ALIASES: dict[str, str] = {
    "maj": "",
    "major": "",
    "min": "m",
    "minor": "m",
    "min7": "m7",
    "min9": "m9",
    "min11": "m11",
    "min6": "m6",
    "maj6": "6",
    "maj9": "M9",
    "maj11": "M11",
    "maj13": "M13",
}


def invalid_chord(symbol: str) -> Err:
    return Err(ErrorKind.INVALID_CHORD, f"Invalid chord specified: '{symbol}'.")


def _to_music21_figure(symbol: str) -> str | None:
    """Rewrite a chord symbol into music21's figure syntax, or None if malformed."""
    match = _SYMBOL_RE.match(symbol.strip())
    if match is None:
        return None

    root = match.group("root") + match.group("accidental").replace("b", "-")
    quality = match.group("quality").replace("(", "").replace(")", "")
    quality = _QUALITY_ALIASES.get(quality, quality)
    figure = root + quality

    bass = match.group("bass")
    if bass:
        figure += "/" + bass[0] + bass[1:].replace("b", "-")
    return figure


def notes_for_chord(symbol: str, octave: int = DEFAULT_OCTAVE) -> Result[list[str]]:
    """Return the pitch names of ``symbol`` (e.g. ``["C4", "E4", "G4", "B4"]``)."""
    figure = _to_music21_figure(symbol)
    if figure is None:
        logger.debug(f"Rejected chord symbol {symbol!r}: not a chord symbol")
        return invalid_chord(symbol)

    try:
        chord_symbol = harmony.ChordSymbol(figure)
        names = [p.name for p in chord_symbol.pitches]
    except (exceptions21.Music21Exception, ValueError, KeyError, IndexError) as e:
        logger.debug(f"music21 could not parse {symbol!r} (figure {figure!r}): {e}")
        return invalid_chord(symbol)

    if not names:
        return invalid_chord(symbol)

    # music21 spells flats with "-"
    return Ok([f"{name.replace('-', 'b')}{octave}" for name in names])


def notes_for_progression(
    symbols: list[str],
    octave: int = DEFAULT_OCTAVE,
) -> Result[list[list[str]]]:
    """Map every symbol to its notes; the first invalid symbol fails the whole call."""
    notes: list[list[str]] = []
    for symbol in symbols:
        result = notes_for_chord(symbol, octave)
        if isinstance(result, Err):
            return result
        notes.append(result.value)
    return Ok(notes)
