"""Unicode line break opportunities (UAX #14) for a paragraph.

`uniseg` decides where a line may end; this module reports those positions
as UTF-8 byte offsets and tells mandatory breaks from allowed ones.
"""

from __future__ import annotations

from uniseg.linebreak import line_break, line_break_breakables

from .constants import CARRIAGE_RETURN_CLASS, MANDATORY_BREAK_CLASSES
from .models import BreakKind, BreakOpportunity


def line_break_class(character: str) -> str:
    """Return the UAX #14 class name of `character`, e.g. ``"AL"`` or ``"BK"``.

    Newer `uniseg` releases return enum members while older ones return plain
    strings; both are reduced to the class name.
    """
    value = line_break(character)
    return getattr(value, "name", value)


def _break_kind(previous: str, current: str) -> BreakKind:
    previous_class = line_break_class(previous)
    if previous_class in MANDATORY_BREAK_CLASSES:
        return BreakKind.MANDATORY
    if previous_class == CARRIAGE_RETURN_CLASS and current != "\n":
        return BreakKind.MANDATORY
    return BreakKind.ALLOWED


def find_break_opportunities(text: str) -> list[BreakOpportunity]:
    """Enumerate the line break opportunities of `text`.

    The break before the first character is never reported. The end of text
    is always reported as a mandatory break, so the result is never empty.

    Args:
        text: Paragraph text.

    Returns:
        list[BreakOpportunity]: Opportunities in ascending byte offset order,
            the last one at ``len(text.encode("utf-8"))``.

    Examples:
        find_break_opportunities("aa bb")
        # [BreakOpportunity(3, ALLOWED), BreakOpportunity(5, MANDATORY)]
    """
    if not text:
        return [BreakOpportunity(0, BreakKind.MANDATORY)]

    opportunities = []
    byte_offset = 0
    previous = ""
    for index, (character, breakable) in enumerate(zip(text, line_break_breakables(text))):
        if index > 0 and breakable:
            opportunities.append(BreakOpportunity(byte_offset, _break_kind(previous, character)))
        byte_offset += len(character.encode("utf-8"))
        previous = character

    opportunities.append(BreakOpportunity(byte_offset, BreakKind.MANDATORY))
    return opportunities
