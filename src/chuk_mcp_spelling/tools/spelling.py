"""
Spelling tools - MCP tools for parsing, measuring and transposing spellings.

Every tool takes plain note strings, keeps enharmonic spellings distinct,
and returns a JSON string with a 'status' of 'success' or 'error'.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_spelling.constants import MIN_CHORD_NOTES, ErrorMessages, SuccessMessages
from chuk_mcp_spelling.core import (
    IntervalSpec,
    InvalidIntervalSpec,
    InvalidSpelling,
    canonicalize,
    interval_between,
    parse,
    prepare_note_set,
    transpose_detailed,
)
from chuk_mcp_spelling.models import (
    IntervalModel,
    NoteSetModel,
    NoteSetRequest,
    ParsedNoteModel,
    TranspositionModel,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid_spelling(e: InvalidSpelling) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.INVALID_SPELLING.format(note=e.token)}
    )


def _invalid_interval(interval: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval)}
    )


def register_spelling_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def spelling_parse(note: str) -> str:
        """
        Parse a note spelling.

        Accepts ASCII or Unicode accidentals (b, bb, #, ##, ♭, ♯, 𝄫, 𝄪).
        Enharmonic spellings are never merged: 'C#' and 'Db' parse to
        different notes.

        Args:
            note: Note spelling (e.g., 'F#', 'Bbb', 'E♭')

        Returns:
            JSON string with letter, accidental and canonical spelling

        Example:
            spelling_parse(note="f♯")
        """
        try:
            parsed = parse(note)
            return json.dumps(
                {"status": "success", "note": ParsedNoteModel.from_note(parsed).model_dump()}
            )
        except InvalidSpelling as e:
            return _invalid_spelling(e)
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spelling_parse"] = spelling_parse

    @mcp.tool  # type: ignore[arg-type]
    async def spelling_interval(root: str, target: str) -> str:
        """
        Measure the interval from root up to target, by spelling.

        The number counts letter names, so C to Fb is a diminished fourth,
        not a major third. The result is directional: root comes first.

        Args:
            root: Lower note spelling (e.g., 'C')
            target: Upper note spelling (e.g., 'Fb')

        Returns:
            JSON string with number, quality, semitones and label

        Example:
            spelling_interval(root="C", target="Fb")
        """
        try:
            interval = interval_between(root, target)
            return json.dumps(
                {
                    "status": "success",
                    "root": parse(root).spelling,
                    "target": parse(target).spelling,
                    "interval": IntervalModel.from_interval(interval).model_dump(),
                }
            )
        except InvalidSpelling as e:
            return _invalid_spelling(e)
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spelling_interval"] = spelling_interval

    @mcp.tool  # type: ignore[arg-type]
    async def spelling_transpose(root: str, interval: str) -> str:
        """
        Spell the note an interval above root.

        Intervals that would need more than a double accidental are
        spelled with the nearest one and reported as clamped.

        Args:
            root: Root spelling (e.g., 'C')
            interval: Interval label: quality + number (e.g., 'd4', 'M3', 'AA6', 'm10')

        Returns:
            JSON string with the resulting spelling and clamp flag

        Example:
            spelling_transpose(root="C", interval="d4")
        """
        try:
            parsed_root = parse(root)
            spec = IntervalSpec.parse(interval)
            result = transpose_detailed(parsed_root, spec)
            response: dict[str, Any] = {
                "status": "success",
                "transposition": TranspositionModel.from_transposition(
                    parsed_root, spec.label, result
                ).model_dump(),
            }
            if result.clamped:
                response["message"] = SuccessMessages.TRANSPOSE_CLAMPED.format(
                    interval=spec.label,
                    root=parsed_root.spelling,
                    delta=result.requested_delta,
                    note=result.spelling,
                )
            return json.dumps(response)
        except InvalidSpelling as e:
            return _invalid_spelling(e)
        except InvalidIntervalSpec:
            return _invalid_interval(interval)
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spelling_transpose"] = spelling_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def spelling_canonicalize(notes: list[str]) -> str:
        """
        Order and deduplicate note spellings.

        Order is by letter (C D E F G A B), then accidental
        (bb b natural # ##). Exact duplicates are merged; enharmonic
        spellings such as 'C#' and 'Db' are both kept.

        Args:
            notes: Note spellings in any order

        Returns:
            JSON string with the canonical note list

        Example:
            spelling_canonicalize(notes=["G", "C#", "Bb", "E"])
        """
        try:
            canonical = canonicalize(notes)
            return json.dumps({"status": "success", "notes": canonical, "count": len(canonical)})
        except Exception as e:
            logger.exception("Failed to canonicalize notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spelling_canonicalize"] = spelling_canonicalize

    @mcp.tool  # type: ignore[arg-type]
    async def spelling_note_set(
        notes: list[str],
        root_hint: str | None = None,
        bass_hint: str | None = None,
    ) -> str:
        """
        Prepare a set of selected notes for chord analysis.

        Drops tokens that are not note spellings, canonicalizes the rest,
        and measures each note from the bass hint (or root hint, or the
        first canonical note). Fewer than three distinct notes gives
        status 'insufficient'.

        Args:
            notes: Selected note spellings in any order
            root_hint: Optional note marked as the chord root
            bass_hint: Optional note marked as the bass

        Returns:
            JSON string with the note set and its interval profile

        Example:
            spelling_note_set(notes=["E", "C", "G", "Bb"], bass_hint="E")
        """
        try:
            request = NoteSetRequest(notes=notes, root_hint=root_hint, bass_hint=bass_hint)
            note_set = prepare_note_set(
                request.notes,
                root_hint=request.root_hint,
                bass_hint=request.bass_hint,
            )
            response: dict[str, Any] = {
                "status": "success",
                "note_set": NoteSetModel.from_note_set(note_set).model_dump(),
            }
            if not note_set.is_sufficient:
                response["message"] = SuccessMessages.INSUFFICIENT_NOTES.format(
                    count=len(note_set.notes), minimum=MIN_CHORD_NOTES
                )
            return json.dumps(response)
        except InvalidSpelling as e:
            return _invalid_spelling(e)
        except ValidationError as e:
            return json.dumps({"status": "error", "message": e.errors()[0]["msg"]})
        except Exception as e:
            logger.exception("Failed to prepare note set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["spelling_note_set"] = spelling_note_set

    return tools
