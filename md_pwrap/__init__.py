"""
md-pwrap: Markdown-aware paragraph wrapping.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-pwrap paragraph.md --width 72

Library Usage:
    from md_pwrap import wrap_paragraph

    wrapped = wrap_paragraph("Some `inline code` and a [link](https://example.com).", 20)

    # Reserve room for a list marker on the first line
    wrapped = wrap_paragraph(item_text, 78, first_line_width=76)
"""

from .exceptions import BreakOracleError, InvalidWidthError, WrapError
from .models import BreakKind, BreakOpportunity, WrappedLine
from .oracle import find_break_opportunities
from .wrapper import iter_wrapped_lines, wrap_paragraph

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "wrap_paragraph",
    "iter_wrapped_lines",
    "find_break_opportunities",
    # Data models
    "BreakKind",
    "BreakOpportunity",
    "WrappedLine",
    # Exceptions
    "BreakOracleError",
    "InvalidWidthError",
    "WrapError",
    # Version
    "__version__",
]
