"""
Decomposed units.

A unit is the atomic renderable and hashable item produced by the
decomposer: a whole cell in full mode, or a single source line or a single
output in diff mode. The set of unit classes is closed; renderers and the
fingerprinter dispatch on the concrete class.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .cell import CellType


@dataclass(frozen=True)
class MarkdownUnit:
    """A markdown cell, rendered as plain text."""
    source_lines: List[str] = field(default_factory=list)
    cell: Dict[str, Any] = field(default_factory=dict)

    kind = CellType.MARKDOWN

    def to_dict(self) -> Dict[str, Any]:
        return self.cell


@dataclass(frozen=True)
class CodeBlockUnit:
    """A whole code cell with its outputs (full mode only)."""
    label: Optional[str] = None
    source_lines: List[str] = field(default_factory=list)
    outputs: List[Any] = field(default_factory=list)
    cell: Dict[str, Any] = field(default_factory=dict)

    kind = CellType.CODE

    def to_dict(self) -> Dict[str, Any]:
        return self.cell


@dataclass(frozen=True)
class CodeLineUnit:
    """
    One source line of a code cell (diff mode only).

    `display` is the pre-highlighted markup for this line alone. `label` and
    `language_tag` are only set on the head line of a cell.
    """
    raw: str
    display: Any = None
    label: Optional[str] = None
    is_head: bool = False
    is_last: bool = False
    language_tag: Optional[str] = None

    kind = CellType.CODE_LINE

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cell_type': self.kind.value,
            'label': self.label,
            'raw': self.raw,
            'display': None if self.display is None else str(self.display),
            'head': self.is_head,
            'last': self.is_last,
            'language_tag': self.language_tag,
        }


@dataclass(frozen=True)
class CodeOutputUnit:
    """One output block of a code cell (diff mode only)."""
    output: Any = None

    kind = CellType.CODE_OUTPUT

    def to_dict(self) -> Dict[str, Any]:
        return {'cell_type': self.kind.value, 'output': self.output}


@dataclass(frozen=True)
class RawUnit:
    """Fallback for cells with an unrecognized type or shape."""
    cell: Any = None

    kind = CellType.RAW

    def to_dict(self) -> Any:
        return self.cell


Unit = Union[MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit]

UNIT_TYPES = (MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit)
