"""Data models for md-pwrap."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class BreakKind(Enum):
    """Kinds of line break opportunities reported by the break oracle.

    Attributes:
        MANDATORY: The line must end here (after a newline or the end of text).
        ALLOWED: The line may end here if it helps to fit the width.
    """

    MANDATORY = auto()
    ALLOWED = auto()


class ScannerState(Enum):
    """Inline scanner states used while walking a paragraph.

    Distinguishes plain text from the three phases of a code span.

    Attributes:
        IN_TEXT: Regular text; the only state in which breaking is permitted.
        ENTERING_CODE_SPAN: Inside the opening backtick run.
        INSIDE_CODE_SPAN: Inside code span content.
        EXITING_CODE_SPAN: Inside a backtick run that may close the span.
    """

    IN_TEXT = auto()
    ENTERING_CODE_SPAN = auto()
    INSIDE_CODE_SPAN = auto()
    EXITING_CODE_SPAN = auto()


@dataclass(frozen=True)
class CharPosition:
    """One entry of the character table.

    Attributes:
        index: Zero-based character (code point) index.
        byte_offset: Offset of the character in the UTF-8 encoded text.
        character: The character itself.
    """

    index: int
    byte_offset: int
    character: str


@dataclass(frozen=True)
class BreakOpportunity:
    """A position where a line may or must end.

    Attributes:
        byte_offset: UTF-8 offset of the first byte after the break.
        kind: Whether the break is mandatory or merely allowed.
    """

    byte_offset: int
    kind: BreakKind


@dataclass(frozen=True)
class ScannerSnapshot:
    """Frozen copy of the inline scanner used to undo a lookahead.

    Attributes:
        state: Scanner state at the time of the snapshot.
        opening_run: Length of the backtick run that opened the current span.
        closing_run: Length of the backtick run that may close it.
        cursor: Number of characters consumed so far.
    """

    state: ScannerState
    opening_run: int
    closing_run: int
    cursor: int


@dataclass(frozen=True)
class WrappedLine:
    """A line produced by the line assembler.

    Attributes:
        text: Line content, including its terminator when it has one.
        kind: Kind of the break that ended the line.
    """

    text: str
    kind: BreakKind
