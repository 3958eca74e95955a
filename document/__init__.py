"""Document layer - Notebook model, validation and decomposed units."""
from .cell import CellType, cell_type_of, source_lines, cell_outputs, new_cell_label
from .errors import (
    NotebookError, MalformedInput, MissingField, UnsupportedVersion,
    EmptyDocument, InvalidOutput,
)
from .notebook import NotebookDocument, parse_notebook, SUPPORTED_NBFORMAT
from .units import (
    Unit, MarkdownUnit, CodeBlockUnit, CodeLineUnit, CodeOutputUnit, RawUnit,
)

__all__ = [
    'CellType', 'cell_type_of', 'source_lines', 'cell_outputs', 'new_cell_label',
    'NotebookError', 'MalformedInput', 'MissingField', 'UnsupportedVersion',
    'EmptyDocument', 'InvalidOutput',
    'NotebookDocument', 'parse_notebook', 'SUPPORTED_NBFORMAT',
    'Unit', 'MarkdownUnit', 'CodeBlockUnit', 'CodeLineUnit', 'CodeOutputUnit', 'RawUnit',
]
