"""Package-specific exception types."""

from __future__ import annotations


class WrapError(ValueError):
    """Base class for wrapping-related errors.

    Represents errors encountered while wrapping a paragraph.
    """


class InvalidWidthError(WrapError):
    """Raised when a width budget is not a non-negative integer.

    Args:
        name: Name of the offending argument.
        value: Value that was supplied.
    """

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"`{self.name}` must be a non-negative integer, got {self.value!r}")


class BreakOracleError(WrapError):
    """Raised when the break oracle reports offsets that do not fit the text.

    Args:
        byte_offset: Offending offset reported by the oracle.
        text_length: Length of the UTF-8 encoded text in bytes.
        reason: Short description of the violated contract.
    """

    def __init__(self, byte_offset: int, text_length: int, reason: str):
        self.byte_offset = byte_offset
        self.text_length = text_length
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Break oracle reported offset {self.byte_offset} "
            f"for a text of {self.text_length} bytes: {self.reason}"
        )
