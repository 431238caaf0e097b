"""
Spelling primitives - Letter, Accidental, ParsedNote.

A spelling is a letter name plus an explicit accidental. Unlike a pitch
class, spellings never collapse enharmonic equivalents: C# and Db are
different values, and so are E# and F.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum

# Unicode glyphs users paste in, mapped to their ASCII spelling
_GLYPH_MAP: dict[str, str] = {
    "\U0001d12b": "bb",  # 𝄫
    "\U0001d12a": "##",  # 𝄪
    "♭": "b",
    "♯": "#",
    "♮": "",
    "–": "-",  # en dash
    "—": "-",  # em dash
    "−": "-",  # minus sign
}

# bb and ## must be tried before b and #
_SPELLING_RE = re.compile(r"^([A-Ga-g])(bb|b|##|#)?$")


class InvalidSpelling(ValueError):
    """Raised when a token is not a letter A-G with an optional accidental."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid note spelling: {token!r}")


class Letter(IntEnum):
    """
    The seven letter names, valued by their cyclic ordinal (C=0 ... B=6).

    Degree counting uses only this ordinal.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def natural_semitone(self) -> int:
        """Semitone position of the natural letter above C."""
        return _NATURAL_SEMITONES[self]

    def step(self, steps: int) -> Letter:
        """Move a number of letter steps (positive or negative), wrapping at B."""
        return Letter((self.value + steps) % 7)

    def steps_to(self, other: Letter) -> int:
        """Ascending letter steps from this letter to another (0-6)."""
        return (other.value - self.value) % 7


_NATURAL_SEMITONES: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 2,
    Letter.E: 4,
    Letter.F: 5,
    Letter.G: 7,
    Letter.A: 9,
    Letter.B: 11,
}


class Accidental(Enum):
    """
    The five representable accidentals.

    Value is the ASCII symbol. Members are declared in their sort order,
    from double-flat up to double-sharp.
    """

    DOUBLE_FLAT = "bb"
    FLAT = "b"
    NATURAL = ""
    SHARP = "#"
    DOUBLE_SHARP = "##"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def delta(self) -> int:
        """Semitone offset from the natural letter (-2 to +2)."""
        return _ACCIDENTAL_DELTAS[self]

    @property
    def ordinal(self) -> int:
        """Position in the total order double-flat < ... < double-sharp."""
        return self.delta + 2

    @classmethod
    def from_symbol(cls, symbol: str) -> Accidental:
        """Look up an accidental by its ASCII symbol."""
        return cls(symbol)

    @classmethod
    def from_delta(cls, delta: int) -> Accidental:
        """
        Accidental for a semitone delta.

        Deltas beyond +/-2 clamp to double-sharp / double-flat.
        Use clamp_delta() first if you need to know whether that happened.
        """
        return _DELTA_ACCIDENTALS[clamp_delta(delta)]


_ACCIDENTAL_DELTAS: dict[Accidental, int] = {
    Accidental.DOUBLE_FLAT: -2,
    Accidental.FLAT: -1,
    Accidental.NATURAL: 0,
    Accidental.SHARP: 1,
    Accidental.DOUBLE_SHARP: 2,
}
_DELTA_ACCIDENTALS: dict[int, Accidental] = {d: a for a, d in _ACCIDENTAL_DELTAS.items()}

MIN_ACCIDENTAL_DELTA = -2
MAX_ACCIDENTAL_DELTA = 2


def clamp_delta(delta: int) -> int:
    """Clamp a semitone delta to the representable range [-2, +2]."""
    return max(MIN_ACCIDENTAL_DELTA, min(MAX_ACCIDENTAL_DELTA, delta))


def fold_semitones(diff: int) -> int:
    """Fold a modular semitone difference into [-6, +6]."""
    if diff > 6:
        diff -= 12
    if diff < -6:
        diff += 12
    return diff


@dataclass(frozen=True)
class ParsedNote:
    """
    A structured note spelling.

    Only produced by parse(). The canonical spelling re-parses to an
    identical ParsedNote.

    Examples:
        parse("f♭") = ParsedNote(Letter.F, Accidental.FLAT)
        parse("C##").spelling = "C##"
    """

    letter: Letter
    accidental: Accidental = Accidental.NATURAL

    @property
    def accidental_delta(self) -> int:
        return self.accidental.delta

    @property
    def spelling(self) -> str:
        """Canonical string form, e.g. 'Fb'."""
        return f"{self.letter.name}{self.accidental.symbol}"

    @property
    def sort_key(self) -> tuple[int, int]:
        """(letter ordinal, accidental ordinal)."""
        return (self.letter.value, self.accidental.ordinal)

    def __str__(self) -> str:
        return self.spelling

    def __repr__(self) -> str:
        return f"ParsedNote({self.spelling!r})"


def normalize_accidentals(token: str | None) -> str:
    """
    Map Unicode accidental glyphs to ASCII and strip whitespace.

    This is the single place user input is converted; everything
    downstream only sees b, bb, # and ##.
    """
    text = (token or "").strip()
    for glyph, ascii_form in _GLYPH_MAP.items():
        text = text.replace(glyph, ascii_form)
    return text


def parse(token: str) -> ParsedNote:
    """
    Parse a note spelling like 'C', 'f#', 'Bbb' or 'E♭'.

    Raises:
        InvalidSpelling: if the normalized token is not a letter A-G
            followed by an optional bb, b, ## or #.
    """
    normalized = normalize_accidentals(token)
    match = _SPELLING_RE.match(normalized)
    if match is None:
        raise InvalidSpelling(token)
    letter = Letter[match.group(1).upper()]
    accidental = Accidental.from_symbol(match.group(2) or "")
    return ParsedNote(letter, accidental)


def is_valid_spelling(token: str) -> bool:
    """Check whether a token parses, without raising."""
    return _SPELLING_RE.match(normalize_accidentals(token)) is not None


def coerce_note(note: str | ParsedNote) -> ParsedNote:
    """Accept either a raw token or an already parsed note."""
    if isinstance(note, ParsedNote):
        return note
    return parse(note)
