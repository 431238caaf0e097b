"""
Spelling models - serializable records for tool requests and responses.

The core works with frozen dataclasses and enums; these pydantic models
are the JSON-facing shape of the same values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_spelling.constants import ErrorMessages, NoteSetStatus
from chuk_mcp_spelling.core.interval import Interval, Transposition
from chuk_mcp_spelling.core.note_set import NoteSet
from chuk_mcp_spelling.core.spelling import ParsedNote


class ParsedNoteModel(BaseModel):
    """A parsed spelling."""

    spelling: str = Field(..., description="Canonical spelling (e.g., 'Fb', 'C##')")
    letter: str = Field(..., description="Letter name A-G")
    letter_index: int = Field(..., ge=0, le=6, description="Letter ordinal (C=0 ... B=6)")
    accidental: str = Field(..., description="Accidental symbol ('', 'b', 'bb', '#', '##')")
    accidental_delta: int = Field(..., ge=-2, le=2, description="Semitone offset of the accidental")

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, note: ParsedNote) -> ParsedNoteModel:
        return cls(
            spelling=note.spelling,
            letter=note.letter.name,
            letter_index=note.letter.value,
            accidental=note.accidental.symbol,
            accidental_delta=note.accidental_delta,
        )


class IntervalModel(BaseModel):
    """
    A measured interval, root to target.

    clamped is set when the quality had to be pinned to AA or dd.
    """

    number: int = Field(..., ge=1, le=7, description="Diatonic number (1-7)")
    quality: str = Field(..., description="Quality abbreviation (P, M, m, A, AA, d, dd)")
    quality_name: str = Field(..., description="Quality name (e.g., 'diminished')")
    semitones: int = Field(..., ge=0, le=11, description="Semitone distance (0-11)")
    label: str = Field(..., description="Quality + number (e.g., 'd4')")
    clamped: bool = Field(False, description="Quality was clamped to a doubled form")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalModel:
        return cls(
            number=interval.number,
            quality=interval.quality.symbol,
            quality_name=interval.quality.name.lower().replace("_", "-"),
            semitones=interval.semitones,
            label=interval.label,
            clamped=interval.clamped,
        )


class TranspositionModel(BaseModel):
    """A spelled transposition result."""

    root: str = Field(..., description="Root spelling")
    interval: str = Field(..., description="Requested interval label")
    note: str = Field(..., description="Resulting spelling")
    requested_delta: int = Field(..., description="Accidental delta the interval called for")
    clamped: bool = Field(False, description="Accidental was clamped to bb/##")

    model_config = {"frozen": True}

    @classmethod
    def from_transposition(
        cls, root: ParsedNote, interval: str, result: Transposition
    ) -> TranspositionModel:
        return cls(
            root=root.spelling,
            interval=interval,
            note=result.spelling,
            requested_delta=result.requested_delta,
            clamped=result.clamped,
        )


class NoteSetRequest(BaseModel):
    """Raw note input as it arrives from a client."""

    notes: list[str] = Field(..., description="Note spellings in any order")
    root_hint: str | None = Field(None, description="Note marked as the root")
    bass_hint: str | None = Field(None, description="Note marked as the bass")

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: list[str]) -> list[str]:
        """Require at least one non-blank token."""
        if not any(token.strip() for token in v):
            raise ValueError(ErrorMessages.NOTES_REQUIRED)
        return v


class NoteSetModel(BaseModel):
    """A canonicalized note set with its interval profile."""

    notes: list[str] = Field(default_factory=list, description="Canonical, deduplicated notes")
    status: NoteSetStatus = Field(..., description="'ready' or 'insufficient'")
    rejected: list[str] = Field(default_factory=list, description="Tokens that did not parse")
    root_hint: str | None = Field(None, description="Normalized root hint")
    bass_hint: str | None = Field(None, description="Normalized bass hint")
    reference: str | None = Field(None, description="Note the intervals are measured from")
    intervals: dict[str, IntervalModel] = Field(
        default_factory=dict, description="Interval from the reference to each note"
    )

    @classmethod
    def from_note_set(cls, note_set: NoteSet) -> NoteSetModel:
        return cls(
            notes=list(note_set.notes),
            status=note_set.status,
            rejected=list(note_set.rejected),
            root_hint=note_set.root_hint,
            bass_hint=note_set.bass_hint,
            reference=note_set.reference,
            intervals={
                note: IntervalModel.from_interval(interval)
                for note, interval in note_set.intervals.items()
            },
        )
