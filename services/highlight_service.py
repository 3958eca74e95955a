"""
Syntax highlighting adapter.

Wraps Pygments so that a list of source lines comes back as a list of
highlighted HTML fragments, one per input line. Callers rely on the
index-for-index correspondence between input lines and fragments.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from fasthtml.common import NotStr, Span
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, TextLexer
from pygments.util import ClassNotFound

from .viewer_config import get_config

logger = logging.getLogger(__name__)

# "%%bash", "%%javascript", ... on the first line of a code cell
MAGIC_PATTERN = re.compile(r'^%%(.*)$')

# nowrap: no <div><pre> around the output, just the token spans
_formatter = HtmlFormatter(nowrap=True)


@dataclass
class HighlightedLines:
    """Result of highlighting a cell's source lines.

    Attributes:
        language: Language the source was highlighted as
        directive: The raw magic line that selected the language, if any
        source_lines: Lines that were highlighted (directive removed)
        fragments: One markup fragment per entry in source_lines
    """
    language: str
    directive: Optional[str] = None
    source_lines: List[str] = field(default_factory=list)
    fragments: List[Any] = field(default_factory=list)

    @property
    def language_tag(self):
        """Span showing the magic line, or None."""
        if self.directive is None:
            return None
        return Span(self.directive, cls="language-tag")

    @property
    def display(self) -> list:
        """Fragments to show for the whole cell, language tag first."""
        tag = self.language_tag
        if tag is None:
            return list(self.fragments)
        return [tag, *self.fragments]


def _get_lexer(language: str):
    # stripnl would drop leading blank lines and break line alignment
    try:
        return get_lexer_by_name(language, stripnl=False, ensurenl=True)
    except ClassNotFound:
        logger.debug(f"No lexer for {language!r}, highlighting as plain text")
        return TextLexer(stripnl=False, ensurenl=True)


def highlight_with_language(language: str, text: str) -> str:
    """Highlight `text` as `language`, returning HTML markup."""
    if not text:
        return ""
    return highlight(text, _get_lexer(language), _formatter)


def split_lines(markup: str) -> List[str]:
    """Split markup on newlines, keeping each line's trailing newline."""
    if not markup:
        return []
    lines = markup.split('\n')
    result = [line + '\n' for line in lines[:-1]]
    if lines[-1]:
        result.append(lines[-1])
    return result


def highlight_lines(lines: List[str], force_language: Optional[str] = None) -> HighlightedLines:
    """Highlight source lines and split the result back into per-line fragments.

    Args:
        lines: Source lines of one cell
        force_language: Use this language verbatim and skip magic detection

    Returns:
        HighlightedLines with fragments aligned to `source_lines`
    """
    lines = list(lines)
    directive = None

    if force_language is not None:
        language = force_language
    else:
        match = MAGIC_PATTERN.match(lines[0]) if lines else None
        if match:
            directive = lines.pop(0)
            language = match.group(1).strip()
        else:
            language = get_config().default_language

    markup = highlight_with_language(language, ''.join(lines))
    fragments = [NotStr(line) for line in split_lines(markup)]

    if len(fragments) != len(lines):
        # Source lines without a trailing newline merge with the next line
        logger.debug(f"Highlighted {len(lines)} lines into {len(fragments)} fragments")

    return HighlightedLines(
        language=language,
        directive=directive,
        source_lines=lines,
        fragments=fragments,
    )
