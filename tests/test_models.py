"""
Tests for pydantic spelling models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_spelling.core import interval_between, parse, prepare_note_set, transpose_detailed
from chuk_mcp_spelling.models import (
    IntervalModel,
    NoteSetModel,
    NoteSetRequest,
    ParsedNoteModel,
    TranspositionModel,
)


class TestParsedNoteModel:
    """Tests for ParsedNoteModel."""

    def test_from_note(self) -> None:
        """Build from a parsed note."""
        model = ParsedNoteModel.from_note(parse("Bbb"))
        assert model.spelling == "Bbb"
        assert model.letter == "B"
        assert model.letter_index == 6
        assert model.accidental == "bb"
        assert model.accidental_delta == -2

    def test_frozen(self) -> None:
        """Models are immutable."""
        model = ParsedNoteModel.from_note(parse("C"))
        with pytest.raises(ValidationError):
            model.spelling = "D"


class TestIntervalModel:
    """Tests for IntervalModel."""

    def test_quality_names(self) -> None:
        """Quality names are readable."""
        assert IntervalModel.from_interval(interval_between("C", "G")).quality_name == "perfect"
        model = IntervalModel.from_interval(interval_between("C", "C##"))
        assert model.quality == "AA"
        assert model.quality_name == "doubly-augmented"
        assert model.label == "AA1"

    def test_clamped_flag(self) -> None:
        """Clamped intervals keep the flag."""
        model = IntervalModel.from_interval(interval_between("C##", "Dbb"))
        assert model.clamped is True


class TestTranspositionModel:
    """Tests for TranspositionModel."""

    def test_from_transposition(self) -> None:
        """Build from a transposition."""
        root = parse("C")
        model = TranspositionModel.from_transposition(root, "d4", transpose_detailed(root, "d4"))
        assert model.root == "C"
        assert model.interval == "d4"
        assert model.note == "Fb"
        assert model.requested_delta == -1
        assert model.clamped is False


class TestNoteSetModels:
    """Tests for NoteSetRequest and NoteSetModel."""

    def test_request_requires_notes(self) -> None:
        """Empty or blank note lists are rejected."""
        with pytest.raises(ValidationError):
            NoteSetRequest(notes=[])
        with pytest.raises(ValidationError):
            NoteSetRequest(notes=["  ", ""])

    def test_request_defaults(self) -> None:
        """Hints default to None."""
        request = NoteSetRequest(notes=["C"])
        assert request.root_hint is None
        assert request.bass_hint is None

    def test_from_note_set(self) -> None:
        """Serialize a note set."""
        model = NoteSetModel.from_note_set(prepare_note_set(["A", "C#", "E", "Db"]))
        data = model.model_dump()
        assert data["notes"] == ["C#", "Db", "E", "A"]
        assert data["status"] == "ready"
        assert data["reference"] == "C#"
        assert set(data["intervals"]) == {"C#", "Db", "E", "A"}
        assert data["intervals"]["C#"]["label"] == "P1"
