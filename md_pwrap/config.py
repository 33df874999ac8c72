"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

TABLE_NAME = "md-pwrap"
PYPROJECT_FILE = "pyproject.toml"
DOTFILE = ".md-pwrap.toml"


@dataclass
class WrapConfig:
    """Configuration for wrapping Markdown paragraphs.

    Attributes:
        width: Column budget for every line after the first.
        first_line_width: Column budget for the first line; falls back to
            `width` when None.
        max_file_size: Maximum input size in bytes that will be processed.

    Examples:
        WrapConfig(width=72, first_line_width=68)
    """

    # Widths
    width: int = 80
    first_line_width: int | None = None

    # Limits
    max_file_size: int = 10 * 1024 * 1024

    @property
    def effective_first_line_width(self) -> int:
        if self.first_line_width is None:
            return self.width
        return self.first_line_width


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid."""


def load_config(search_path: Path) -> WrapConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root. In each
    directory `pyproject.toml` is consulted first for a ``[tool.md-pwrap]``
    table, then `.md-pwrap.toml` for ``[md-pwrap]`` or ``[tool.md-pwrap]``.
    The first table found wins, even when empty. Files that cannot be read or
    decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        WrapConfig: Loaded configuration, or defaults when no table is found.

    Raises:
        ConfigError: If the table is not a mapping or contains unknown keys.

    Examples:
        load_config(Path("docs"))
    """
    for directory in (search_path.resolve(), *search_path.resolve().parents):
        for filename in (PYPROJECT_FILE, DOTFILE):
            config_file = directory / filename
            table = _read_table(config_file)
            if table is not None:
                return _parse_table(table, config_file)

    return WrapConfig()


def _read_table(config_file: Path) -> object | None:
    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    tool = data.get("tool")
    table = tool.get(TABLE_NAME) if isinstance(tool, dict) else None
    if table is None and config_file.name == DOTFILE:
        table = data.get(TABLE_NAME)
    return table


def _parse_table(table: object, config_file: Path) -> WrapConfig:
    if not isinstance(table, dict):
        raise ConfigError(f"Invalid `[tool.{TABLE_NAME}]` settings in {config_file}: not a table")

    # keys may be spelled like the CLI options
    options = {key.replace("-", "_"): value for key, value in table.items()}
    known = {field.name for field in fields(WrapConfig)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise ConfigError(
            f"Invalid `[tool.{TABLE_NAME}]` settings in {config_file}: "
            f"unknown keys {', '.join(unknown)}"
        )
    return WrapConfig(**options)


def validate_config(config: WrapConfig) -> None:
    """Raise `ConfigError` unless both widths are non-negative integers and
    `max_file_size` is a positive integer. `bool` values are rejected."""
    widths = {"width": config.width}
    if config.first_line_width is not None:
        widths["first_line_width"] = config.first_line_width

    for name, value in widths.items():
        if not _is_integer(value) or value < 0:
            raise ConfigError(f"`{name}` must be a non-negative integer, got {value!r}")

    if not _is_integer(config.max_file_size) or config.max_file_size <= 0:
        raise ConfigError(
            f"`max_file_size` must be a positive integer, got {config.max_file_size!r}"
        )


def build_config(
    search_path: Path,
    width: int | None = None,
    first_line_width: int | None = None,
) -> WrapConfig:
    """Load configuration, apply command-line widths, and validate.

    Args:
        search_path: Directory where configuration files are resolved.
        width: Overrides the configured `width` unless None.
        first_line_width: Overrides the configured `first_line_width` unless None.

    Returns:
        WrapConfig: Validated configuration ready for wrapping.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), width=72)
    """
    config = load_config(search_path)
    if width is not None:
        config = replace(config, width=width)
    if first_line_width is not None:
        config = replace(config, first_line_width=first_line_width)
    validate_config(config)
    return config


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
