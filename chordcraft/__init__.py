"""
Chordcraft.

Chord progression editing, per-progression playback settings and
LLM-backed chord/progression suggestions.
"""
