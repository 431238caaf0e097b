"""
Canonical ordering and dedup for sets of spellings.

Users pick notes in any order; downstream prompts and caches want one
stable key per note set. Ordering is by letter, then accidental
(bb < b < natural < # < ##). Dedup is by exact spelling, so C# and Db
both survive.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .spelling import InvalidSpelling, normalize_accidentals, parse


def _fold(token: str) -> str:
    """Normalize a token and, when it parses, use its canonical spelling."""
    normalized = normalize_accidentals(token)
    try:
        return parse(normalized).spelling
    except InvalidSpelling:
        return normalized


def compare_spellings(a: str, b: str) -> int:
    """
    Three-way comparison of two spellings (-1, 0, 1).

    Malformed tokens fall back to plain string comparison so the order
    stays total over any input.
    """
    try:
        key_a = parse(a).sort_key
        key_b = parse(b).sort_key
    except InvalidSpelling:
        return (a > b) - (a < b)
    if key_a != key_b:
        return -1 if key_a < key_b else 1
    return (a > b) - (a < b)


spelling_sort_key = cmp_to_key(compare_spellings)


def canonicalize(tokens: Iterable[str]) -> list[str]:
    """
    Order and dedup note spellings.

    Examples:
        canonicalize(["G", "C#", "Bb", "E"]) -> ["C#", "E", "G", "Bb"]
        canonicalize(["C#", "Db"])           -> ["C#", "Db"]
        canonicalize(["C", "c", "C♮"])       -> ["C"]

    Empty tokens are dropped; malformed ones are kept and sorted by
    string comparison. Use prepare_note_set() to filter them out.
    """
    unique = {_fold(token) for token in tokens}
    unique.discard("")
    # Malformed tokens can make the comparison cyclic; starting from a
    # fixed order keeps the result independent of set iteration order.
    return sorted(sorted(unique), key=spelling_sort_key)
