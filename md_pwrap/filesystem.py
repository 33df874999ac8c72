"""Reading paragraphs from files and stdin."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import BinaryIO

from .constants import DEFAULT_MAX_FILE_SIZE

MAX_FILE_SIZE_ENV_VAR = "MD_PWRAP_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the input size limit, preferring `MD_PWRAP_MAX_FILE_SIZE` over `default`.

    Raises:
        ValueError: If the environment value is not a positive integer.
    """
    env_value = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError:
        max_size = 0
    if max_size <= 0:
        raise ValueError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {env_value!r} (expected positive integer)"
        )
    return max_size


def decode_paragraph(data: bytes, max_size: int, source: str) -> str:
    """Decode raw paragraph bytes as UTF-8.

    Line endings are left exactly as they arrived, so a `\\r\\n` hard break
    reaches the wrapper intact.

    Args:
        data: Raw input.
        max_size: Maximum allowed size in bytes.
        source: Name used in error messages, a path or `stdin`.

    Raises:
        IOError: If `data` is larger than `max_size` or is not valid UTF-8.
    """
    if len(data) > max_size:
        raise IOError(f"{source} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise IOError(f"{source} is not valid UTF-8: {error}") from error


def read_paragraph(filepath: Path, max_size: int) -> str:
    """Read a paragraph from a regular file.

    The file is checked with `lstat` first, so symlinks, directories and
    oversized files are refused before any content is read.

    Args:
        filepath: Path to the file holding the paragraph.
        max_size: Maximum allowed size in bytes.

    Returns:
        str: File content with its original line endings.

    Raises:
        IOError: If the file cannot be accessed, is not a regular file, is too
            large, or is not valid UTF-8.

    Examples:
        text = read_paragraph(Path("paragraph.md"), 102400)
    """
    try:
        stat_result = os.lstat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(stat_result.st_mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    if stat_result.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        data = filepath.read_bytes()
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    return decode_paragraph(data, max_size, str(filepath))


def read_stream(stream: BinaryIO, max_size: int) -> str:
    """Read a paragraph from a binary stream such as stdin.

    At most `max_size + 1` bytes are read, which is enough to tell that the
    input is over the limit.
    """
    return decode_paragraph(stream.read(max_size + 1), max_size, "stdin")
