from __future__ import annotations

import string

from hypothesis import given
from hypothesis import strategies as st
from md_pwrap.models import BreakKind
from md_pwrap.scanner import InlineScanner
from md_pwrap.wrapper import iter_wrapped_lines, wrap_paragraph

word_strategy = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8)
code_span_strategy = st.text(alphabet=string.ascii_lowercase + " ", min_size=1, max_size=12).map(
    lambda content: f"`{content}`"
)
width_strategy = st.integers(min_value=0, max_value=30)


@given(st.lists(word_strategy, min_size=1, max_size=30), width_strategy)
def test_wrapping_words_only_replaces_spaces(words: list[str], width: int):
    text = " ".join(words)

    lines = wrap_paragraph(text, width).split("\n")

    assert " ".join(lines) == text


@given(st.lists(word_strategy, min_size=1, max_size=30), width_strategy)
def test_lines_fit_unless_they_hold_a_single_word(words: list[str], width: int):
    lines = wrap_paragraph(" ".join(words), width).split("\n")

    for line in lines:
        assert len(line) <= width or " " not in line


@given(st.lists(word_strategy, min_size=2, max_size=30), width_strategy, width_strategy)
def test_first_line_width_only_affects_first_line(
    words: list[str], width: int, first_line_width: int
):
    lines = wrap_paragraph(" ".join(words), width, first_line_width).split("\n")

    assert len(lines[0]) <= first_line_width or " " not in lines[0]
    for line in lines[1:]:
        assert len(line) <= width or " " not in line


@given(st.lists(st.one_of(word_strategy, code_span_strategy), min_size=1, max_size=20), width_strategy)
def test_closed_code_spans_stay_on_one_line(tokens: list[str], width: int):
    lines = wrap_paragraph(" ".join(tokens), width).split("\n")

    for token in tokens:
        if token.startswith("`"):
            assert any(token in line for line in lines)


@given(st.lists(word_strategy, min_size=1, max_size=10), width_strategy)
def test_hyphenated_words_are_never_split(words: list[str], width: int):
    text = "-".join(words)

    assert wrap_paragraph(text, width) == text


@given(st.text(max_size=200), width_strategy)
def test_wrapping_only_touches_whitespace(text: str, width: int):
    wrapped = wrap_paragraph(text, width)

    assert "".join(wrapped.split()) == "".join(text.split())


@given(st.text(max_size=200), width_strategy)
def test_allowed_breaks_end_with_single_terminator(text: str, width: int):
    for line in iter_wrapped_lines(text, width):
        if line.kind is BreakKind.ALLOWED:
            assert line.text.endswith("\n")
            assert not line.text[:-1].endswith((" ", "\t"))


@given(st.text(max_size=200), width_strategy)
def test_wrap_is_deterministic(text: str, width: int):
    assert wrap_paragraph(text, width) == wrap_paragraph(text, width)


@given(st.text(max_size=200).map(lambda text: text.replace("`", "")))
def test_scanner_stays_in_text_without_backticks(text: str):
    scanner = InlineScanner()

    for character in text:
        scanner.advance(character)
        assert scanner.is_inside_text()


@given(st.text(max_size=50), st.text(max_size=50))
def test_restore_returns_to_snapshot(prefix: str, probe: str):
    scanner = InlineScanner()
    for character in prefix:
        scanner.advance(character)
    snapshot = scanner.snapshot()

    for character in probe:
        scanner.advance(character)
    scanner.restore(snapshot)

    assert scanner.snapshot() == snapshot
