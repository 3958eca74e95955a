"""Read-only accessors over raw notebook cell mappings."""
from enum import Enum
from typing import Any, List, Optional


class CellType(str, Enum):
    """Cell and unit type tags."""
    MARKDOWN = "markdown"
    CODE = "code"
    CODE_LINE = "code/line"
    CODE_OUTPUT = "code/output"
    RAW = "raw"


def cell_type_of(cell: Any) -> Optional[str]:
    """Return the `cell_type` of a cell, or None for non-mapping entries."""
    if not isinstance(cell, dict):
        return None
    return cell.get('cell_type')


def source_lines(cell: Any) -> List[str]:
    """
    Source of a cell as a list of lines.

    nbformat stores source either as a list of strings or as one multi-line
    string. A string is split keeping line endings; anything else is empty.
    """
    if not isinstance(cell, dict):
        return []
    source = cell.get('source')
    if isinstance(source, str):
        return source.splitlines(keepends=True)
    if not isinstance(source, list):
        return []
    return [line if isinstance(line, str) else str(line) for line in source]


def cell_outputs(cell: Any) -> List[Any]:
    """Outputs of a code cell, in order. Missing or malformed -> []."""
    if not isinstance(cell, dict):
        return []
    outputs = cell.get('outputs')
    if not isinstance(outputs, list):
        return []
    return outputs


def new_cell_label(cell: Any) -> Optional[str]:
    """Execution label, e.g. ``In [3]:``, or None when the cell never ran."""
    if not isinstance(cell, dict):
        return None
    execution_count = cell.get('execution_count')
    if execution_count:
        return f"In [{execution_count}]:"
    return None
