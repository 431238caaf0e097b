"""
Diatonic interval primitives - Quality, IntervalSpec, Interval.

Intervals here are spelled, not chromatic. The number comes from counting
letter names (C to Fb is a fourth, whatever the accidentals), and the
quality comes from how far the accidentals push the letters away from
their natural distance. That is what keeps C-Fb a diminished fourth
instead of a major third.

The baseline is the distance between the natural letters, so qualities
match textbook names for roots on C. From other roots the natural
letters already carry their own spacing (D-F reads as M3, B-F as P5);
only the accidentals move the quality.

Two operations share the same tables:
- interval_between(root, target): spelled notes -> Interval
- transpose(root, spec): root + IntervalSpec -> spelled target
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .spelling import (
    Accidental,
    Letter,
    ParsedNote,
    clamp_delta,
    coerce_note,
    fold_semitones,
)

logger = logging.getLogger(__name__)


class InvalidIntervalSpec(ValueError):
    """Raised when an interval label such as 'M3' or 'd4' cannot be read."""


class DegreeClass(str, Enum):
    """
    Which family of qualities a diatonic number takes.

    Unisons, fourths and fifths are perfect; seconds, thirds, sixths and
    sevenths are major/minor.
    """

    PERFECT = "perfect"
    IMPERFECT = "imperfect"

    @classmethod
    def of(cls, number: int) -> DegreeClass:
        """Degree class of a diatonic number (octave equivalents included)."""
        if simple_number(number) in (1, 4, 5):
            return cls.PERFECT
        return cls.IMPERFECT


class Quality(str, Enum):
    """Interval qualities. Value is the label abbreviation."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DOUBLY_AUGMENTED = "AA"
    DIMINISHED = "d"
    DOUBLY_DIMINISHED = "dd"

    @property
    def symbol(self) -> str:
        return self.value

    def belongs_to(self, degree_class: DegreeClass) -> bool:
        return self in _QUALITY_OFFSETS[degree_class]

    def offset(self, degree_class: DegreeClass) -> int:
        """
        Semitones away from the class baseline (Perfect or Major).

        A quality foreign to the class (Major on a fifth, Perfect on a
        third) has no offset and reads as the baseline.
        """
        return _QUALITY_OFFSETS[degree_class].get(self, 0)

    @classmethod
    def from_offset(cls, degree_class: DegreeClass, diff: int) -> tuple[Quality, bool]:
        """
        Quality for a folded semitone difference.

        Returns:
            (quality, clamped) - differences past the doubled forms clamp
            to doubly-augmented / doubly-diminished with clamped=True.
        """
        table = _OFFSET_QUALITIES[degree_class]
        if diff in table:
            return table[diff], False
        if diff > 0:
            return cls.DOUBLY_AUGMENTED, True
        return cls.DOUBLY_DIMINISHED, True

    @classmethod
    def parse(cls, symbol: str) -> Quality:
        """Parse a quality abbreviation ('P', 'M', 'm', 'A', 'AA', 'd', 'dd')."""
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidIntervalSpec(f"Unknown interval quality: {symbol!r}") from None


_QUALITY_OFFSETS: dict[DegreeClass, dict[Quality, int]] = {
    DegreeClass.PERFECT: {
        Quality.PERFECT: 0,
        Quality.AUGMENTED: 1,
        Quality.DOUBLY_AUGMENTED: 2,
        Quality.DIMINISHED: -1,
        Quality.DOUBLY_DIMINISHED: -2,
    },
    DegreeClass.IMPERFECT: {
        Quality.MAJOR: 0,
        Quality.MINOR: -1,
        Quality.AUGMENTED: 1,
        Quality.DOUBLY_AUGMENTED: 2,
        Quality.DIMINISHED: -2,
        Quality.DOUBLY_DIMINISHED: -3,
    },
}
_OFFSET_QUALITIES: dict[DegreeClass, dict[int, Quality]] = {
    degree_class: {offset: quality for quality, offset in table.items()}
    for degree_class, table in _QUALITY_OFFSETS.items()
}

_LABEL_RE = re.compile(r"^(AA|dd|P|M|m|A|d)(-?\d+)$")


def simple_number(number: int) -> int:
    """Reduce a diatonic number to 1-7 (1-indexed wraparound: 8 -> 1, 10 -> 3)."""
    return (number - 1) % 7 + 1


def natural_distance(root: Letter, target: Letter) -> int:
    """Semitones between two natural letters, ascending (0-11). C->F is 5."""
    return (target.natural_semitone - root.natural_semitone) % 12


@dataclass(frozen=True)
class IntervalSpec:
    """
    An interval without notes: diatonic number plus quality.

    Examples:
        IntervalSpec(4, Quality.DIMINISHED)  # d4
        IntervalSpec.parse("m7")
    """

    number: int
    quality: Quality

    @property
    def degree_class(self) -> DegreeClass:
        return DegreeClass.of(self.number)

    @property
    def label(self) -> str:
        return f"{self.quality.symbol}{self.number}"

    @property
    def offset(self) -> int:
        """Semitones away from the Perfect/Major baseline."""
        return self.quality.offset(self.degree_class)

    def simple(self) -> IntervalSpec:
        """Same quality with the number reduced to 1-7."""
        return IntervalSpec(simple_number(self.number), self.quality)

    @classmethod
    def parse(cls, label: str) -> IntervalSpec:
        """
        Parse an interval label like 'P5', 'd4', 'AA6' or 'M10'.

        Raises:
            InvalidIntervalSpec: if the label is malformed, the number is
                below 1, or the quality does not fit the number.
        """
        match = _LABEL_RE.match((label or "").strip())
        if match is None:
            raise InvalidIntervalSpec(f"Invalid interval label: {label!r}")
        quality = Quality.parse(match.group(1))
        number = int(match.group(2))
        if number < 1:
            raise InvalidIntervalSpec(f"Interval number must be at least 1: {label!r}")
        if not quality.belongs_to(DegreeClass.of(number)):
            raise InvalidIntervalSpec(
                f"Quality {quality.symbol!r} does not apply to a {number}: {label!r}"
            )
        return cls(number, quality)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Interval:
    """
    A measured interval from a root to a target.

    Directional: the interval from A to B is not the inversion of B to A
    unless you compute both.

    clamped is True when the accidentals were too far apart for a doubled
    quality and the result was pinned to AA/dd.
    """

    number: int  # 1-7
    quality: Quality
    semitones: int  # 0-11
    clamped: bool = False

    @property
    def label(self) -> str:
        return f"{self.quality.symbol}{self.number}"

    @property
    def spec(self) -> IntervalSpec:
        return IntervalSpec(self.number, self.quality)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Transposition:
    """
    Result of transpose_detailed().

    requested_delta is the accidental the interval called for; when it is
    outside [-2, +2] the spelling carries the nearest representable
    accidental instead and clamped is True.
    """

    note: ParsedNote
    requested_delta: int
    clamped: bool = False

    @property
    def spelling(self) -> str:
        return self.note.spelling

    def __str__(self) -> str:
        return self.spelling


def interval_between(root: str | ParsedNote, target: str | ParsedNote) -> Interval:
    """
    Interval from root up to target, by spelling.

    Directional: root comes first. Call again with the arguments swapped
    for the other direction; the result is not derived automatically.

    Examples:
        interval_between("C", "G")  -> P5
        interval_between("C", "Fb") -> d4
        interval_between("C", "E")  -> M3

    Raises:
        InvalidSpelling: if either note fails to parse.
    """
    r = coerce_note(root)
    t = coerce_note(target)

    number = r.letter.steps_to(t.letter) + 1
    expected = natural_distance(r.letter, t.letter)
    actual = (expected + t.accidental_delta - r.accidental_delta) % 12
    diff = fold_semitones(actual - expected)

    quality, clamped = Quality.from_offset(DegreeClass.of(number), diff)
    if clamped:
        logger.debug(
            "Interval %s->%s clamped to %s%d (offset %d)",
            r.spelling,
            t.spelling,
            quality.symbol,
            number,
            diff,
        )
    return Interval(
        number=number,
        quality=quality,
        semitones=(expected + diff) % 12,
        clamped=clamped,
    )


def transpose_detailed(root: str | ParsedNote, spec: IntervalSpec | str) -> Transposition:
    """
    Spell the note a given interval above root, reporting any clamping.

    Accidentals past double-flat/double-sharp are not representable; the
    nearest one is used and the result is flagged clamped.

    Raises:
        InvalidSpelling: if root fails to parse.
        InvalidIntervalSpec: if spec is a label that fails to parse.
    """
    r = coerce_note(root)
    if isinstance(spec, str):
        spec = IntervalSpec.parse(spec)

    target_letter = r.letter.step(spec.number - 1)
    expected = natural_distance(r.letter, target_letter)
    desired = (expected + spec.offset) % 12

    requested = fold_semitones(desired - expected + r.accidental_delta)
    delta = clamp_delta(requested)
    clamped = delta != requested
    if clamped:
        logger.debug(
            "Transposing %s by %s needs accidental %+d; clamped to %+d",
            r.spelling,
            spec.label,
            requested,
            delta,
        )
    note = ParsedNote(target_letter, Accidental.from_delta(delta))
    return Transposition(note=note, requested_delta=requested, clamped=clamped)


def transpose(root: str | ParsedNote, spec: IntervalSpec | str) -> str:
    """
    Spell the note a given interval above root.

    Examples:
        transpose("C", IntervalSpec(4, Quality.DIMINISHED)) -> "Fb"
        transpose("C#", "m3") -> "E"

    Extreme intervals clamp silently; use transpose_detailed() to check.
    """
    return transpose_detailed(root, spec).spelling
