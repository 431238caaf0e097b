"""
Constants for the spelling engine.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

# A chord needs at least three distinct spellings before it is worth asking about
MIN_CHORD_NOTES = 3

# Note set readiness
NoteSetStatus = Literal["ready", "insufficient"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_SPELLING = "Invalid note spelling: '{note}'. Expected a letter A-G with optional b, bb, # or ##."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected a label like 'P5', 'm3' or 'd4'."
    NOTES_REQUIRED = "At least one note is required."


class SuccessMessages:
    """Standardized success messages."""

    INSUFFICIENT_NOTES = "Only {count} distinct note(s); at least {minimum} are needed for a chord."
    TRANSPOSE_CLAMPED = (
        "'{interval}' above '{root}' needs accidental {delta:+d}; spelled as '{note}' instead."
    )
