# gitguy/ui/diff_viewer/highlight.py
# Syntax highlighting lookup via pygments; a lookup miss is the normal, silent path

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePosixPath

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

from ...core.verbose import vlog_debug

DEFAULT_STYLE = "github-dark"
FALLBACK_STYLE = "default"

# lexers keep leading/trailing newlines untouched; content lines carry none
_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


# * Find a lexer by filename match, then by extension alias; None on miss
@lru_cache(maxsize=256)
def find_lexer(filename: str) -> Lexer | None:
    if not filename:
        return None
    name = PurePosixPath(filename).name
    try:
        return get_lexer_for_filename(name, **_LEXER_OPTIONS)
    except ClassNotFound:
        pass

    extension = PurePosixPath(name).suffix.lstrip(".").lower()
    if extension:
        try:
            return get_lexer_by_name(extension, **_LEXER_OPTIONS)
        except ClassNotFound:
            pass
    return None


def _make_formatter(style: str) -> Terminal256Formatter:
    try:
        return Terminal256Formatter(style=style)
    except ClassNotFound:
        return Terminal256Formatter(style=FALLBACK_STYLE)


# * Highlights single content lines to ANSI-escaped text
class SyntaxHighlighter:
    def __init__(self, style: str = DEFAULT_STYLE):
        self._formatter = _make_formatter(style)

    # ANSI text, or text unchanged when no lexer matches or lexing fails
    def highlight(self, text: str, filename: str) -> str:
        if not text:
            return text
        lexer = find_lexer(filename)
        if lexer is None:
            return text
        try:
            highlighted = pygments_highlight(text, lexer, self._formatter)
        except Exception as e:
            vlog_debug("HIGHLIGHT", f"Lexer {lexer.name} failed for {filename}: {e}")
            return text
        return highlighted.removesuffix("\n")
