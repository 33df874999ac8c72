from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from md_pwrap.config import ConfigError, WrapConfig, build_config, load_config, validate_config


def _write(base: Path, filename: str, body: str) -> Path:
    path = base / filename
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_first_line_width_falls_back_to_width():
    assert WrapConfig(width=72).effective_first_line_width == 72
    assert WrapConfig(width=72, first_line_width=0).effective_first_line_width == 0


def test_reads_dashed_keys_from_pyproject(tmp_path: Path):
    _write(
        tmp_path,
        "pyproject.toml",
        """
        [tool.md-pwrap]
        width = 72
        first-line-width = 68
        max-file-size = 1024
        """,
    )

    assert load_config(tmp_path) == WrapConfig(width=72, first_line_width=68, max_file_size=1024)


@pytest.mark.parametrize("header", ["[md-pwrap]", "[tool.md-pwrap]"])
def test_reads_dotfile_from_parent_directory(tmp_path: Path, header: str):
    _write(tmp_path, ".md-pwrap.toml", f"{header}\nfirst_line_width = 10\n")
    nested = tmp_path / "docs" / "chapter"
    nested.mkdir(parents=True)

    config = load_config(nested)

    assert config.width == 80
    assert config.effective_first_line_width == 10


def test_pyproject_wins_over_dotfile_in_same_directory(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool.md-pwrap]\nwidth = 50\n")
    _write(tmp_path, ".md-pwrap.toml", "[md-pwrap]\nwidth = 60\n")

    assert load_config(tmp_path).width == 50


def test_nearest_table_wins_even_when_empty(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool.md-pwrap]\nwidth = 50\n")
    child = tmp_path / "child"
    child.mkdir()
    _write(child, ".md-pwrap.toml", "[md-pwrap]\n")

    assert load_config(child) == WrapConfig()


@pytest.mark.parametrize(
    "body",
    [
        '[project]\nname = "unrelated"\n',
        "width = {broken",
        "tool = 3\n",
    ],
)
def test_files_without_a_usable_table_are_skipped(tmp_path: Path, body: str):
    _write(tmp_path, ".md-pwrap.toml", "[md-pwrap]\nwidth = 33\n")
    child = tmp_path / "child"
    child.mkdir()
    _write(child, "pyproject.toml", body)

    assert load_config(child).width == 33


def test_unknown_keys_are_named(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool.md-pwrap]\nwidth = 72\nindent = 4\n")

    with pytest.raises(ConfigError, match="unknown keys indent"):
        load_config(tmp_path)


def test_table_must_be_a_mapping(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool]\nmd-pwrap = 3\n")

    with pytest.raises(ConfigError, match="not a table"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "config",
    [
        WrapConfig(width=-1),
        WrapConfig(first_line_width=-2),
        WrapConfig(width=True),  # type: ignore[arg-type]
        WrapConfig(first_line_width=1.5),  # type: ignore[arg-type]
        WrapConfig(max_file_size=0),
    ],
)
def test_validate_config_rejects_invalid_values(config: WrapConfig):
    with pytest.raises(ConfigError, match="must be a"):
        validate_config(config)


def test_zero_width_from_file_is_accepted(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool.md-pwrap]\nwidth = 0\n")

    config = build_config(tmp_path)

    assert config.width == 0
    assert config.effective_first_line_width == 0


def test_command_line_widths_override_file(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", "[tool.md-pwrap]\nwidth = 72\nfirst-line-width = 70\n")

    assert build_config(tmp_path, width=40) == WrapConfig(width=40, first_line_width=70)
    assert build_config(tmp_path, first_line_width=5).effective_first_line_width == 5


def test_build_config_rejects_width_from_file(tmp_path: Path):
    _write(tmp_path, "pyproject.toml", '[tool.md-pwrap]\nwidth = "wide"\n')

    with pytest.raises(ConfigError, match="`width` must be a non-negative integer, got 'wide'"):
        build_config(tmp_path)
