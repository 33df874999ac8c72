"""Greedy line assembly over Markdown-aware break opportunities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .constants import (
    HYPHEN,
    IMAGE_MARKER,
    LINE_TERMINATOR,
    LINK_TARGET_OPENERS,
    LINK_TEXT_CLOSE,
    LINK_TEXT_OPEN,
)
from .models import BreakKind, BreakOpportunity, CharPosition, WrappedLine
from .scanner import InlineScanner


def is_vetoed_break(before: str, after: str) -> bool:
    """Determine whether an allowed break would split Markdown syntax.

    Args:
        before: Character ending the line.
        after: Character starting the next line.

    Returns:
        bool: True for breaks after a hyphen, inside an image marker (``![``),
            or between link text and its destination or label (``](``, ``][``).

    Examples:
        is_vetoed_break("-", "u")  # True
        is_vetoed_break("]", "(")  # True
        is_vetoed_break(" ", "t")  # False
    """
    if before == HYPHEN:
        return True
    if before == IMAGE_MARKER and after == LINK_TEXT_OPEN:
        return True
    if before == LINK_TEXT_CLOSE and after in LINK_TARGET_OPENERS:
        return True
    return False


class LineAssembler:
    """Iterator producing the wrapped lines of one paragraph.

    Break opportunities are visited in order. Each one is first checked
    against the inline scanner and the veto rules; of the accepted ones, the
    farthest that still fits `width` ends the line. Mandatory breaks end the
    line as soon as they are reached.

    `width` may be reassigned between lines; it applies to the next line
    selected.

    Attributes:
        characters: Character table of the paragraph.
        opportunities: Break opportunities in ascending byte offset order,
            ending with a mandatory break at the end of text.
        character_index: Maps every opportunity's byte offset to a character
            index (the end of text maps to ``len(characters)``).
        width: Column budget for the next line.
        scanner: Inline scanner, ahead of or level with the emitted text.

    Examples:
        assembler = LineAssembler(characters, opportunities, character_index, width=20)
        lines = [line.text for line in assembler]
    """

    def __init__(
        self,
        characters: Sequence[CharPosition],
        opportunities: Sequence[BreakOpportunity],
        character_index: Mapping[int, int],
        width: int,
        scanner: InlineScanner | None = None,
    ) -> None:
        self.characters = characters
        self.opportunities = opportunities
        self.character_index = character_index
        self.width = width
        self.scanner = scanner or InlineScanner()

        self._next_opportunity = 0
        self._line_start = 0
        self._cursor = 0
        self._line: list[str] = []
        self._done = False

    def __iter__(self) -> LineAssembler:
        return self

    def __next__(self) -> WrappedLine:
        if self._done:
            raise StopIteration

        end, kind = self._choose_break()

        while self._cursor < end:
            self._line.append(self.characters[self._cursor].character)
            self._cursor += 1

        text = "".join(self._line)
        if end == len(self.characters):
            # The last line keeps whatever the paragraph ends with
            self._done = True
            kind = BreakKind.MANDATORY
        elif kind is BreakKind.ALLOWED:
            text = text.rstrip() + LINE_TERMINATOR

        self._line = []
        self._line_start = end
        return WrappedLine(text=text, kind=kind)

    def _choose_break(self) -> tuple[int, BreakKind]:
        chosen = self._find_next_possible()
        if chosen is None:
            raise RuntimeError("Break opportunities ended before the end of text")
        if chosen[1] is BreakKind.MANDATORY:
            return chosen

        # Probe farther breaks; each probe is undone unless it fits
        while True:
            snapshot = self.scanner.snapshot()
            probe_start = self._next_opportunity

            candidate = self._find_next_possible()
            if candidate is None or self._line_length(candidate[0]) > self.width:
                self.scanner.restore(snapshot)
                self._next_opportunity = probe_start
                return chosen

            chosen = candidate
            if chosen[1] is BreakKind.MANDATORY:
                return chosen

    def _find_next_possible(self) -> tuple[int, BreakKind] | None:
        while self._next_opportunity < len(self.opportunities):
            opportunity = self.opportunities[self._next_opportunity]
            self._next_opportunity += 1

            index = self.character_index[opportunity.byte_offset]
            if self._is_possible(index, opportunity.kind):
                return index, opportunity.kind
        return None

    def _is_possible(self, index: int, kind: BreakKind) -> bool:
        self._scan_to(index)

        if index == len(self.characters):
            return True
        if not self.scanner.is_inside_text():
            return False
        if kind is BreakKind.MANDATORY:
            return True
        return not is_vetoed_break(
            self.characters[index - 1].character, self.characters[index].character
        )

    def _scan_to(self, index: int) -> None:
        while self.scanner.cursor < index:
            self.scanner.advance(self.characters[self.scanner.cursor].character)

    def _line_length(self, end: int) -> int:
        """Count the characters of the current line if it ended at `end`.

        Trailing whitespace, newlines included, does not count.
        """
        length = end - self._line_start
        while length > 0 and self.characters[self._line_start + length - 1].character.isspace():
            length -= 1
        return length
