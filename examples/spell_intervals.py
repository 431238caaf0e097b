#!/usr/bin/env python3
"""
Example: Spell and measure intervals without losing enharmonics.

This demonstrates the core engine - parsing, measuring, transposing and
canonicalizing spellings - and the note set pipeline that feeds chord
questions.

Usage:
    python examples/spell_intervals.py
"""

from chuk_mcp_spelling.core import (
    IntervalSpec,
    Quality,
    canonicalize,
    interval_between,
    prepare_note_set,
    transpose,
    transpose_detailed,
)


def main() -> None:
    """Walk through the spelling engine."""
    # Example 1: Same pitch, different spelling, different interval
    print("Intervals above C:")
    for target in ["E", "Fb", "F#", "Gb", "C##"]:
        interval = interval_between("C", target)
        print(f"  C -> {target:<3} {interval.label:<4} ({interval.semitones} semitones)")

    # Example 2: Build spellings from intervals
    print("\nTransposing C:")
    for spec in [
        IntervalSpec(4, Quality.DIMINISHED),
        IntervalSpec(3, Quality.MINOR),
        IntervalSpec(7, Quality.DIMINISHED),
    ]:
        print(f"  C + {spec.label:<3} = {transpose('C', spec)}")

    # Example 3: Clamping is reported, not hidden
    result = transpose_detailed("C##", "AA1")
    print(f"\nC## + AA1 = {result.spelling} (clamped={result.clamped}, wanted {result.requested_delta:+d})")

    # Example 4: Click order does not matter, enharmonics survive
    clicked = ["G", "c#", "Bb", "E", "Db", "C#"]
    print(f"\nCanonical: {canonicalize(clicked)}")

    # Example 5: Prepare a note set for a chord question
    note_set = prepare_note_set(["Bb", "E", "G", "C", "H"], bass_hint="C")
    print(f"\nNote set ({note_set.status}): {list(note_set.notes)}")
    print(f"  Rejected: {list(note_set.rejected)}")
    for note, interval in note_set.intervals.items():
        print(f"  {note_set.reference} -> {note:<3} {interval.label}")


if __name__ == "__main__":
    main()
