"""
nbview UI - Unit Components

Renders decomposed units (whole cells, single code lines, single outputs)
into label/content rows of the notebook table.
"""

from fasthtml.common import *
import json
from dataclasses import dataclass, field
from typing import Any, List, Optional

from document.units import MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit
from services.highlight_service import highlight_lines
from services.viewer_config import get_config
from .base import join_classes
from .outputs import OutputView


@dataclass
class RenderedRow:
    """Label and content of one table row.

    `flush` rows have no vertical padding so consecutive code lines read
    as one block.
    """
    label: Optional[str] = None
    content: List[Any] = field(default_factory=list)
    flush: bool = False


def _markdown_row(unit: MarkdownUnit) -> RenderedRow:
    # Markdown is shown as its source text, not rendered
    highlighted = highlight_lines(unit.source_lines, get_config().markdown_language)
    return RenderedRow(None, [Div(*highlighted.display, cls="jupyter-cell-markdown")])


def _code_block_row(unit: CodeBlockUnit) -> RenderedRow:
    highlighted = highlight_lines(unit.source_lines)
    code = Div(*highlighted.display,
               cls="jupyter-cell-code jupyter-cell-code-block monospace")
    return RenderedRow(unit.label, [code, *[OutputView(o) for o in unit.outputs]])


def _code_line_row(unit: CodeLineUnit) -> RenderedRow:
    classes = join_classes(
        "monospace",
        "jupyter-cell-code",
        "jupyter-cell-code-line",
        "jupyter-cell-code-head" if unit.is_head else "",
        "jupyter-cell-code-last" if unit.is_last else "",
    )
    tag = Span(unit.language_tag, cls="language-tag") if unit.language_tag else None
    return RenderedRow(unit.label, [Div(tag, unit.display, cls=classes)], flush=True)


def _code_output_row(unit: CodeOutputUnit) -> RenderedRow:
    return RenderedRow(None, [OutputView(unit.output)])


def _raw_row(unit: RawUnit) -> RenderedRow:
    text = json.dumps(unit.cell, indent=2, ensure_ascii=False, default=str)
    return RenderedRow(None, [Div(text, cls="jupyter-cell-raw monospace")])


_RENDERERS = {
    MarkdownUnit: _markdown_row,
    CodeBlockUnit: _code_block_row,
    CodeLineUnit: _code_line_row,
    CodeOutputUnit: _code_output_row,
    RawUnit: _raw_row,
}


def render_unit(unit) -> RenderedRow:
    """Dispatch to the row renderer for the unit's type.

    Raises:
        TypeError: for objects that are not decomposed units
    """
    renderer = _RENDERERS.get(type(unit))
    if renderer is None:
        raise TypeError(f"Can not render {type(unit).__name__} as a notebook unit")
    return renderer(unit)


def UnitRow(unit):
    """Render a unit as a table row: label cell, then content cell.

    Args:
        unit: A decomposed unit

    Returns:
        Tr with the label Td and content Td
    """
    row = render_unit(unit)
    return Tr(
        Td(row.label, cls="jupyter-label"),
        Td(*row.content, cls="jupyter-cell-flush" if row.flush else None),
    )
