"""
Note set preparation - the request-side pipeline for chord questions.

Takes whatever the user tapped or typed, keeps the valid spellings in
canonical order, and measures each one from a reference note (the bass
if one was marked, else the root, else the lowest canonical note).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_mcp_spelling.constants import MIN_CHORD_NOTES, NoteSetStatus

from .interval import Interval, interval_between
from .ordering import canonicalize
from .spelling import is_valid_spelling, normalize_accidentals, parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoteSet:
    """
    A canonicalized set of spellings with its interval profile.

    intervals maps each note to its interval above the reference note.
    """

    notes: tuple[str, ...]
    status: NoteSetStatus
    rejected: tuple[str, ...] = ()
    root_hint: str | None = None
    bass_hint: str | None = None
    reference: str | None = None
    intervals: dict[str, Interval] = field(default_factory=dict, hash=False)

    @property
    def is_sufficient(self) -> bool:
        return self.status == "ready"


def _normalize_hint(hint: str | None) -> str | None:
    if hint is None or not normalize_accidentals(hint):
        return None
    return parse(hint).spelling


def prepare_note_set(
    tokens: Iterable[str],
    root_hint: str | None = None,
    bass_hint: str | None = None,
) -> NoteSet:
    """
    Build a NoteSet from raw user tokens.

    Tokens that do not parse are dropped and listed in rejected. Fewer
    than MIN_CHORD_NOTES distinct spellings gives status 'insufficient'.

    Raises:
        InvalidSpelling: if a non-empty root or bass hint fails to parse.
    """
    root = _normalize_hint(root_hint)
    bass = _normalize_hint(bass_hint)

    valid: list[str] = []
    rejected: list[str] = []
    for token in tokens:
        normalized = normalize_accidentals(token)
        if not normalized:
            continue
        if is_valid_spelling(normalized):
            valid.append(normalized)
        else:
            rejected.append(token)

    if rejected:
        logger.debug("Dropped unparseable tokens: %s", rejected)

    notes = tuple(canonicalize(valid))
    status: NoteSetStatus = "ready" if len(notes) >= MIN_CHORD_NOTES else "insufficient"

    reference = bass or root or (notes[0] if notes else None)
    intervals: dict[str, Interval] = {}
    if reference is not None:
        intervals = {note: interval_between(reference, note) for note in notes}

    return NoteSet(
        notes=notes,
        status=status,
        rejected=tuple(rejected),
        root_hint=root,
        bass_hint=bass,
        reference=reference,
        intervals=intervals,
    )
