"""Inline code span tracking.

The scanner is fed one character at a time and knows whether the position
after the last consumed character is plain text or part of a code span.
Backtick runs are matched CommonMark style: a span closes only at a run of
the same length as the one that opened it.
"""

from __future__ import annotations

from .constants import BACKTICK
from .models import ScannerSnapshot, ScannerState

# (state, is_backtick) -> next state, before run length bookkeeping
_TRANSITIONS = {
    (ScannerState.IN_TEXT, True): ScannerState.ENTERING_CODE_SPAN,
    (ScannerState.IN_TEXT, False): ScannerState.IN_TEXT,
    (ScannerState.ENTERING_CODE_SPAN, True): ScannerState.ENTERING_CODE_SPAN,
    (ScannerState.ENTERING_CODE_SPAN, False): ScannerState.INSIDE_CODE_SPAN,
    (ScannerState.INSIDE_CODE_SPAN, True): ScannerState.EXITING_CODE_SPAN,
    (ScannerState.INSIDE_CODE_SPAN, False): ScannerState.INSIDE_CODE_SPAN,
    (ScannerState.EXITING_CODE_SPAN, True): ScannerState.EXITING_CODE_SPAN,
    # Resolved by comparing run lengths, see `_resolve_closing_run`
    (ScannerState.EXITING_CODE_SPAN, False): None,
}


class InlineScanner:
    """Character-driven state machine tracking Markdown code spans.

    Attributes:
        state: Current scanner state.
        opening_run: Length of the backtick run that opened the current span.
        closing_run: Length of the backtick run being read as a possible closer.
        cursor: Number of characters consumed so far.

    Examples:
        scanner = InlineScanner()
        for character in "`a` b":
            scanner.advance(character)
        scanner.is_inside_text()  # True
    """

    def __init__(self) -> None:
        self.state = ScannerState.IN_TEXT
        self.opening_run = 0
        self.closing_run = 0
        self.cursor = 0

    def advance(self, character: str) -> None:
        """Consume one character and update the state."""
        is_backtick = character == BACKTICK
        next_state = _TRANSITIONS[(self.state, is_backtick)]

        if next_state is None:
            next_state = self._resolve_closing_run()
        elif is_backtick:
            if self.state is ScannerState.IN_TEXT:
                self.opening_run = 1
            elif self.state is ScannerState.ENTERING_CODE_SPAN:
                self.opening_run += 1
            elif self.state is ScannerState.INSIDE_CODE_SPAN:
                self.closing_run = 1
            else:
                self.closing_run += 1

        self.state = next_state
        self.cursor += 1

    def _resolve_closing_run(self) -> ScannerState:
        if self.closing_run == self.opening_run:
            self.opening_run = 0
            self.closing_run = 0
            return ScannerState.IN_TEXT
        # A run of another length is span content
        self.closing_run = 0
        return ScannerState.INSIDE_CODE_SPAN

    def is_inside_text(self) -> bool:
        """Return True when a line may be broken at the current position."""
        return self.state is ScannerState.IN_TEXT

    def snapshot(self) -> ScannerSnapshot:
        return ScannerSnapshot(
            state=self.state,
            opening_run=self.opening_run,
            closing_run=self.closing_run,
            cursor=self.cursor,
        )

    def restore(self, snapshot: ScannerSnapshot) -> None:
        """Return to a previously captured snapshot."""
        self.state = snapshot.state
        self.opening_run = snapshot.opening_run
        self.closing_run = snapshot.closing_run
        self.cursor = snapshot.cursor
