"""
Prompt templates for the suggestion pipeline.

The model is asked for plain text in a fixed shape (a comma-separated list
of chords, or one space-separated progression per line) so the parsers in
``chordcraft.core.suggestion_parser`` can stay strict and simple.
"""
from __future__ import annotations

from typing import Optional

from chordcraft.models.preferences import SuggestionPreferences

EMPTY_SLOT_PLACEHOLDER = "_"
TARGET_SLOT_MARKER = "[?]"

CHORD_SUGGESTION_PROMPT = """You are a music theory assistant helping a songwriter fill in a chord progression.

Progression so far, in order ("{empty}" is an empty slot, "{target}" is the slot to fill):
{context}

Target slot: position {position} (counting from 0) of {length}.
Genre: {genre}
Complexity: {complexity}
Key: {key}

Suggest {count} musically appropriate chords for the target slot, ordered from most to least fitting.
Respond with ONLY a comma-separated list of chord symbols (for example: Cmaj7, Am7, Dm9, G7) and nothing else."""

PROGRESSION_SUGGESTION_PROMPT = """You are a music theory assistant helping a songwriter start a new piece.

Genre: {genre}
Complexity: {complexity}
Key: {key}

Generate {count} distinct, musically coherent chord progressions of exactly {length} chords each.
Respond with one progression per line, chord symbols separated by single spaces (for example: C Am F G).
Do not number the lines and do not add any other text."""


def render_chord_context(chords: list[Optional[str]], position: int) -> str:
    """Render the slots with placeholders; the target slot is always marked."""
    tokens = []
    for index, chord in enumerate(chords):
        if index == position:
            tokens.append(TARGET_SLOT_MARKER)
        else:
            tokens.append(chord if chord else EMPTY_SLOT_PLACEHOLDER)
    return " ".join(tokens)


def build_chord_prompt(
    preferences: SuggestionPreferences,
    chords: list[Optional[str]],
    position: int,
    count: int,
) -> str:
    return CHORD_SUGGESTION_PROMPT.format(
        empty=EMPTY_SLOT_PLACEHOLDER,
        target=TARGET_SLOT_MARKER,
        context=render_chord_context(chords, position),
        position=position,
        length=len(chords),
        genre=preferences.genre,
        complexity=preferences.complexity,
        key=preferences.key,
        count=count,
    )


def build_progression_prompt(
    preferences: SuggestionPreferences,
    length: int,
    count: int,
) -> str:
    return PROGRESSION_SUGGESTION_PROMPT.format(
        genre=preferences.genre,
        complexity=preferences.complexity,
        key=preferences.key,
        length=length,
        count=count,
    )
