"""
Pydantic models for the spelling engine.

This module provides:
- ParsedNoteModel: A parsed spelling
- IntervalModel: A measured interval
- TranspositionModel: A spelled transposition
- NoteSetRequest: Raw note input
- NoteSetModel: Canonicalized note set with interval profile
"""

from chuk_mcp_spelling.models.spelling import (
    IntervalModel,
    NoteSetModel,
    NoteSetRequest,
    ParsedNoteModel,
    TranspositionModel,
)

__all__ = [
    "IntervalModel",
    "NoteSetModel",
    "NoteSetRequest",
    "ParsedNoteModel",
    "TranspositionModel",
]
