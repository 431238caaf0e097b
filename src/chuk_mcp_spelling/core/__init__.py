"""
Core spelling primitives.

These are the invariants everything else composes on:
- Letter: The 7 letter names with their cyclic ordinal (C=0 ... B=6)
- Accidental: bb, b, natural, #, ## with semitone deltas
- ParsedNote: A letter plus accidental - enharmonics stay distinct
- Quality: P, M, m, A, AA, d, dd
- IntervalSpec: Diatonic number + quality, without notes
- Interval: Measured interval from a root to a target
- Transposition: Spelled result of moving a root by an IntervalSpec
- NoteSet: Canonicalized user input with its interval profile
"""

from chuk_mcp_spelling.core.interval import (
    DegreeClass,
    Interval,
    IntervalSpec,
    InvalidIntervalSpec,
    Quality,
    Transposition,
    interval_between,
    simple_number,
    transpose,
    transpose_detailed,
)
from chuk_mcp_spelling.core.note_set import NoteSet, prepare_note_set
from chuk_mcp_spelling.core.ordering import canonicalize, compare_spellings, spelling_sort_key
from chuk_mcp_spelling.core.spelling import (
    Accidental,
    InvalidSpelling,
    Letter,
    ParsedNote,
    is_valid_spelling,
    normalize_accidentals,
    parse,
)

__all__ = [
    # Spelling
    "Letter",
    "Accidental",
    "ParsedNote",
    "InvalidSpelling",
    "normalize_accidentals",
    "parse",
    "is_valid_spelling",
    # Interval
    "DegreeClass",
    "Quality",
    "IntervalSpec",
    "Interval",
    "Transposition",
    "InvalidIntervalSpec",
    "interval_between",
    "simple_number",
    "transpose",
    "transpose_detailed",
    # Ordering
    "canonicalize",
    "compare_spellings",
    "spelling_sort_key",
    # Note sets
    "NoteSet",
    "prepare_note_set",
]
