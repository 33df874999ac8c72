"""Paragraph wrapping entry points."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from .assembler import LineAssembler
from .exceptions import BreakOracleError, InvalidWidthError
from .models import BreakKind, BreakOpportunity, CharPosition, WrappedLine
from .oracle import find_break_opportunities
from .scanner import InlineScanner

BreakOracle = Callable[[str], Sequence[BreakOpportunity]]


def build_character_table(text: str) -> tuple[CharPosition, ...]:
    """Index every character of `text` by position and UTF-8 byte offset.

    Args:
        text: Paragraph text.

    Returns:
        tuple[CharPosition, ...]: One entry per character, in order.

    Examples:
        build_character_table("aé b")
        # (CharPosition(0, 0, "a"), CharPosition(1, 1, "é"), CharPosition(2, 3, " "), ...)
    """
    table = []
    byte_offset = 0
    for index, character in enumerate(text):
        table.append(CharPosition(index=index, byte_offset=byte_offset, character=character))
        byte_offset += len(character.encode("utf-8"))
    return tuple(table)


def _build_character_index(characters: Sequence[CharPosition]) -> dict[int, int]:
    character_index = {position.byte_offset: position.index for position in characters}
    text_length = _byte_length(characters)
    character_index[text_length] = len(characters)
    return character_index


def _byte_length(characters: Sequence[CharPosition]) -> int:
    if not characters:
        return 0
    last = characters[-1]
    return last.byte_offset + len(last.character.encode("utf-8"))


def validate_opportunities(
    opportunities: Sequence[BreakOpportunity],
    character_index: dict[int, int],
    text_length: int,
) -> None:
    """Check that break opportunities can be mapped onto the character table.

    Args:
        opportunities: Oracle output to check.
        character_index: Byte offset to character index mapping, including the
            end of text.
        text_length: Length of the UTF-8 encoded text in bytes.

    Returns:
        None.

    Raises:
        BreakOracleError: If an offset is out of range, falls inside a
            multi-byte character, is not strictly ascending, or if the last
            opportunity is not a mandatory break at the end of text.

    Examples:
        validate_opportunities([BreakOpportunity(2, BreakKind.MANDATORY)], {0: 0, 1: 1, 2: 2}, 2)
    """
    if not opportunities:
        raise BreakOracleError(text_length, text_length, "no mandatory break at the end of text")

    previous = 0
    for opportunity in opportunities:
        offset = opportunity.byte_offset
        if offset < 0 or offset > text_length:
            raise BreakOracleError(offset, text_length, "offset outside of the text")
        if offset not in character_index:
            raise BreakOracleError(offset, text_length, "offset inside a multi-byte character")
        if text_length > 0 and offset <= previous:
            raise BreakOracleError(offset, text_length, "offsets are not strictly ascending")
        previous = offset

    last = opportunities[-1]
    if last.byte_offset != text_length or last.kind is not BreakKind.MANDATORY:
        raise BreakOracleError(last.byte_offset, text_length, "no mandatory break at the end of text")


def _ensure_width(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidWidthError(name, value)


def iter_wrapped_lines(
    text: str,
    width: int,
    first_line_width: int | None = None,
    *,
    break_oracle: BreakOracle | None = None,
) -> Iterator[WrappedLine]:
    """Wrap a paragraph and yield its lines one by one.

    Args:
        text: Raw text of exactly one Markdown paragraph.
        width: Column budget for every line after the first.
        first_line_width: Column budget for the first line, e.g. the width
            left after a list marker. Defaults to `width`.
        break_oracle: Function returning the line break opportunities of a
            text. Defaults to the UAX #14 oracle.

    Returns:
        Iterator[WrappedLine]: Lines in order; their texts concatenate to the
            wrapped paragraph.

    Raises:
        InvalidWidthError: If a width is negative or not an integer.
        BreakOracleError: If the oracle output does not match the text.

    Examples:
        [line.text for line in iter_wrapped_lines("aa bb cc", 2)]  # ["aa\\n", "bb\\n", "cc"]
    """
    if first_line_width is None:
        first_line_width = width
    _ensure_width("width", width)
    _ensure_width("first_line_width", first_line_width)

    characters = build_character_table(text)
    character_index = _build_character_index(characters)
    opportunities = list((break_oracle or find_break_opportunities)(text))
    validate_opportunities(opportunities, character_index, _byte_length(characters))

    assembler = LineAssembler(
        characters,
        opportunities,
        character_index,
        width=first_line_width,
        scanner=InlineScanner(),
    )
    return _drive(assembler, width)


def _drive(assembler: LineAssembler, width: int) -> Iterator[WrappedLine]:
    # The text always yields at least one line, possibly empty
    yield next(assembler)
    assembler.width = width
    yield from assembler


def wrap_paragraph(
    text: str,
    width: int,
    first_line_width: int | None = None,
    *,
    break_oracle: BreakOracle | None = None,
) -> str:
    """Reflow one Markdown paragraph to fit a column width.

    Lines are broken at Unicode line break opportunities, never inside code
    spans, after hyphens, or inside image and link markers. Hard breaks in
    the input are kept verbatim. Width counts code points, so wide and
    combining characters are not measured by their display width.

    Args:
        text: Raw text of exactly one Markdown paragraph.
        width: Column budget for every line after the first.
        first_line_width: Column budget for the first line. Defaults to `width`.
        break_oracle: Function returning the line break opportunities of a
            text. Defaults to the UAX #14 oracle.

    Returns:
        str: Wrapped paragraph, lines joined by ``"\\n"``.

    Raises:
        InvalidWidthError: If a width is negative or not an integer.
        BreakOracleError: If the oracle output does not match the text.

    Examples:
        wrap_paragraph("aa bb cc", 5)  # "aa bb\\ncc"
        wrap_paragraph("- aa bb cc", 5, first_line_width=3)
    """
    lines = iter_wrapped_lines(text, width, first_line_width, break_oracle=break_oracle)
    return "".join(line.text for line in lines)
