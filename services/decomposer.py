"""
Cell decomposition.

Turns the validated cell list of a notebook into renderable units. In full
mode every cell is one unit. In diff mode each code cell is split into one
unit per source line followed by one unit per output, so that a diff can
address (and comment on) individual lines and output blocks.
"""
import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from document.cell import CellType, cell_type_of, source_lines, cell_outputs, new_cell_label
from document.units import (
    Unit, MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit,
)
from .highlight_service import HighlightedLines, highlight_lines

logger = logging.getLogger(__name__)

Highlighter = Callable[..., HighlightedLines]


class DecomposeMode(str, Enum):
    """Granularity of decomposition."""
    FULL = "full"
    DIFF = "diff"


def cell_to_unit(cell: Any) -> Unit:
    """Wrap one whole cell as a unit according to its type."""
    cell_type = cell_type_of(cell)
    if cell_type == CellType.MARKDOWN.value:
        return MarkdownUnit(source_lines=source_lines(cell), cell=cell)
    if cell_type == CellType.CODE.value:
        return CodeBlockUnit(
            label=new_cell_label(cell),
            source_lines=source_lines(cell),
            outputs=cell_outputs(cell),
            cell=cell,
        )
    return RawUnit(cell=cell)


def split_code_cell(cell: dict, highlighter: Optional[Highlighter] = None) -> List[Unit]:
    """Split a code cell into line units followed by output units.

    The whole cell is highlighted once and the markup is split back into
    lines, so multi-line constructs are highlighted with full context.
    A leading %%magic line is not a code line; its tag rides on the head line.
    """
    highlighter = highlighter or highlight_lines
    label = new_cell_label(cell)
    highlighted = highlighter(source_lines(cell))

    lines = highlighted.source_lines
    fragments = highlighted.fragments
    count = len(lines)

    units: List[Unit] = []
    if count == 0 and highlighted.directive is not None:
        # The directive is the cell's only line; it stands in as the line
        units.append(CodeLineUnit(
            raw=highlighted.directive,
            label=label,
            is_head=True,
            is_last=True,
            language_tag=highlighted.directive,
        ))

    for i, raw in enumerate(lines):
        is_head = i == 0
        units.append(CodeLineUnit(
            raw=raw,
            display=fragments[i] if i < len(fragments) else None,
            label=label if is_head else None,
            is_head=is_head,
            is_last=i == count - 1,
            language_tag=highlighted.directive if is_head else None,
        ))

    # Outputs are separate units in diff mode, never attached to the lines
    units.extend(CodeOutputUnit(output=output) for output in cell_outputs(cell))
    return units


def decompose(cells: List[Any], mode: DecomposeMode = DecomposeMode.FULL,
              highlighter: Optional[Highlighter] = None) -> List[Unit]:
    """Decompose a notebook's cells into units, preserving order.

    Args:
        cells: Validated top-level cell list
        mode: FULL for one unit per cell, DIFF for per-line/per-output units
        highlighter: Replacement for `highlight_lines` (diff mode only)

    Returns:
        List of units in document order
    """
    mode = DecomposeMode(mode)
    if mode == DecomposeMode.FULL:
        return [cell_to_unit(cell) for cell in cells]

    units: List[Unit] = []
    for cell in cells:
        if cell_type_of(cell) != CellType.CODE.value:
            units.append(cell_to_unit(cell))
            continue
        units.extend(split_code_cell(cell, highlighter))

    logger.debug(f"Decomposed {len(cells)} cells into {len(units)} diff units")
    return units
