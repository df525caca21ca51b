"""
HTTP route tests for /api/<Component>/<action>.

Uses the in-memory services from conftest and the scripted FakeLLM.
"""
from __future__ import annotations

import pytest


async def _create(client, name: str = "Song") -> str:
    response = await client.post("/api/ProgressionBuilder/createProgression", json={"name": name})
    assert response.status_code == 200
    return response.json()["progression"]["id"]


# =============================================================================
# ProgressionBuilder
# =============================================================================


class TestProgressionRoutes:

    async def test_create_returns_progression(self, client) -> None:
        response = await client.post("/api/ProgressionBuilder/createProgression", json={"name": "Song"})
        body = response.json()
        assert body["progression"]["name"] == "Song"
        assert body["progression"]["chordSequence"] == []

    async def test_create_initializes_settings_and_preferences(self, client) -> None:
        progression_id = await _create(client)

        settings = await client.post(
            "/api/PlayBack/getPlayBackSettings", json={"progressionId": progression_id}
        )
        assert settings.status_code == 200
        assert settings.json()["settings"] == {
            "id": progression_id,
            "instrument": "Piano",
            "secondsPerChord": 1.0,
        }

        prefs = await client.post(
            "/api/SuggestChord/getSuggestionPreferences", json={"progressionId": progression_id}
        )
        assert prefs.json()["preferences"]["genre"] == "Pop"

    async def test_editing_flow(self, client) -> None:
        progression_id = await _create(client)
        for _ in range(3):
            response = await client.post(
                "/api/ProgressionBuilder/addSlot", json={"progressionId": progression_id}
            )
            assert response.status_code == 200
            assert response.json() == {}

        await client.post(
            "/api/ProgressionBuilder/setChord",
            json={"progressionId": progression_id, "position": 0, "chord": "Cmaj7"},
        )
        await client.post(
            "/api/ProgressionBuilder/setChord",
            json={"progressionId": progression_id, "position": 2, "chord": "G7"},
        )
        await client.post(
            "/api/ProgressionBuilder/reorderSlots",
            json={"progressionId": progression_id, "oldPosition": 0, "newPosition": 1},
        )

        response = await client.post(
            "/api/ProgressionBuilder/getProgression", json={"progressionId": progression_id}
        )
        slots = response.json()["progression"]["chordSequence"]
        assert [slot["chord"] for slot in slots] == [None, "Cmaj7", "G7"]

        await client.post(
            "/api/ProgressionBuilder/deleteSlot",
            json={"progressionId": progression_id, "position": 0},
        )
        await client.post(
            "/api/ProgressionBuilder/deleteChord",
            json={"progressionId": progression_id, "position": 0},
        )
        await client.post(
            "/api/ProgressionBuilder/renameProgression",
            json={"progressionId": progression_id, "name": "Renamed"},
        )
        response = await client.post(
            "/api/ProgressionBuilder/getProgression", json={"progressionId": progression_id}
        )
        progression = response.json()["progression"]
        assert progression["name"] == "Renamed"
        assert [slot["chord"] for slot in progression["chordSequence"]] == [None, "G7"]

    async def test_list(self, client) -> None:
        progression_id = await _create(client, "Listed")
        response = await client.post("/api/ProgressionBuilder/listProgressions")
        assert response.json() == {"progressionIdentifiers": [{"id": progression_id, "name": "Listed"}]}

    async def test_out_of_range_is_400(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/ProgressionBuilder/setChord",
            json={"progressionId": progression_id, "position": 0, "chord": "C"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position: 0. Index out of bounds."}

    async def test_unknown_progression_is_404(self, client) -> None:
        response = await client.post(
            "/api/ProgressionBuilder/addSlot", json={"progressionId": "missing"}
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Progression with ID missing not found."}

    async def test_validate_progression_and_position(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/ProgressionBuilder/validateProgressionAndPosition",
            json={"progressionId": progression_id, "position": 0},
        )
        assert response.status_code == 400

    async def test_delete_cascades(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/ProgressionBuilder/deleteProgression", json={"progressionId": progression_id}
        )
        assert response.status_code == 200
        settings = await client.post(
            "/api/PlayBack/getPlayBackSettings", json={"progressionId": progression_id}
        )
        assert settings.status_code == 404

    async def test_missing_field_is_422(self, client) -> None:
        response = await client.post("/api/ProgressionBuilder/addSlot", json={})
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "path",
        ["/api/PlayBack/initializeSettings", "/api/SuggestChord/initializePreferences"],
    )
    async def test_initializers_not_exposed(self, client, path: str) -> None:
        response = await client.post(path, json={"progressionId": "x"})
        assert response.status_code == 404


# =============================================================================
# PlayBack
# =============================================================================


class TestPlayBackRoutes:

    async def test_set_instrument_and_seconds(self, client) -> None:
        progression_id = await _create(client)
        await client.post(
            "/api/PlayBack/setInstrument",
            json={"progressionId": progression_id, "instrument": "Synthesizer"},
        )
        await client.post(
            "/api/PlayBack/setSecondsPerChord",
            json={"progressionId": progression_id, "secondsPerChord": 5.5},
        )
        response = await client.post(
            "/api/PlayBack/getPlayBackSettings", json={"progressionId": progression_id}
        )
        assert response.json()["settings"]["instrument"] == "Synthesizer"
        assert response.json()["settings"]["secondsPerChord"] == 5.5

    async def test_invalid_seconds(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/PlayBack/setSecondsPerChord",
            json={"progressionId": progression_id, "secondsPerChord": 11},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "secondsPerChord must be between 1 and 10."}

    async def test_chord_notes(self, client) -> None:
        response = await client.post("/api/PlayBack/getChordNotes", json={"chord": "G7"})
        assert sorted(response.json()["notes"]) == ["B4", "D4", "F4", "G4"]

    async def test_invalid_chord(self, client) -> None:
        response = await client.post("/api/PlayBack/getChordNotes", json={"chord": "InvalidChordXYZ"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid chord specified: 'InvalidChordXYZ'."}

    async def test_progression_notes(self, client) -> None:
        response = await client.post(
            "/api/PlayBack/getProgressionNotes", json={"progression": ["Cmaj", "Am"]}
        )
        notes = response.json()["notes"]
        assert [sorted(n) for n in notes] == [["C4", "E4", "G4"], ["A4", "C4", "E4"]]

    async def test_delete_settings(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/PlayBack/deleteSettings", json={"progressionId": progression_id}
        )
        assert response.status_code == 200
        again = await client.post(
            "/api/PlayBack/deleteSettings", json={"progressionId": progression_id}
        )
        assert again.status_code == 404


# =============================================================================
# SuggestChord
# =============================================================================


class TestSuggestChordRoutes:

    async def test_preferences(self, client) -> None:
        progression_id = await _create(client)
        for path, field, value in [
            ("setGenre", "genre", "Jazz"),
            ("setComplexity", "complexity", "Intermediate"),
            ("setKey", "key", "Bb"),
        ]:
            response = await client.post(
                f"/api/SuggestChord/{path}", json={"progressionId": progression_id, field: value}
            )
            assert response.status_code == 200

        response = await client.post(
            "/api/SuggestChord/getSuggestionPreferences", json={"progressionId": progression_id}
        )
        assert response.json()["preferences"] == {
            "id": progression_id,
            "genre": "Jazz",
            "complexity": "Intermediate",
            "key": "Bb",
        }

    async def test_suggest_chord(self, client, fake_llm) -> None:
        progression_id = await _create(client)
        fake_llm.reply = "Am, F, G"
        response = await client.post(
            "/api/SuggestChord/suggestChord",
            json={"progressionId": progression_id, "chords": ["C", None], "position": 1},
        )
        assert response.status_code == 200
        assert response.json() == {"suggestedChords": ["Am", "F", "G"]}

    async def test_suggest_chord_out_of_range(self, client, fake_llm) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/SuggestChord/suggestChord",
            json={"progressionId": progression_id, "chords": ["C", "F", "G", "C"], "position": -1},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid position: -1. Must be within 0 and 3."}
        assert fake_llm.prompts == []

    async def test_suggest_progression(self, client, fake_llm) -> None:
        progression_id = await _create(client)
        fake_llm.reply = "C G Am F\nF G C C"
        response = await client.post(
            "/api/SuggestChord/suggestProgression",
            json={"progressionId": progression_id, "length": 4},
        )
        assert response.json() == {
            "suggestedProgressions": [["C", "G", "Am", "F"], ["F", "G", "C", "C"]]
        }

    async def test_upstream_failure_is_502(self, client, fake_llm) -> None:
        progression_id = await _create(client)
        fake_llm.error = RuntimeError("service down")
        response = await client.post(
            "/api/SuggestChord/suggestProgression",
            json={"progressionId": progression_id, "length": 4},
        )
        assert response.status_code == 502
        assert response.json() == {"error": "Failed to get progression suggestion: service down"}

    async def test_delete_preferences(self, client) -> None:
        progression_id = await _create(client)
        response = await client.post(
            "/api/SuggestChord/deletePreferences", json={"progressionId": progression_id}
        )
        assert response.status_code == 200
        missing = await client.post(
            "/api/SuggestChord/getSuggestionPreferences", json={"progressionId": progression_id}
        )
        assert missing.status_code == 404
        assert missing.json() == {"error": f"Preferences for progression {progression_id} not found."}
