"""
nbview UI Package

FastHTML components for rendering notebooks and notebook diffs.

Usage:
    from ui import UnitRow, NotebookTable, NotebookPage

    # Or import specific components
    from ui.outputs import OutputView, format_output
    from ui.units import render_unit, RenderedRow
    from ui.layout import DiffView
"""

# Base utilities
from .base import join_classes, Message

# Output components
from .outputs import format_output, OutputView

# Unit components
from .units import RenderedRow, render_unit, UnitRow

# Layout
from .layout import NotebookTable, DiffColumn, DiffView, NotebookList, NotebookPage

__all__ = [
    # Base
    'join_classes',
    'Message',
    # Outputs
    'format_output',
    'OutputView',
    # Units
    'RenderedRow',
    'render_unit',
    'UnitRow',
    # Layout
    'NotebookTable',
    'DiffColumn',
    'DiffView',
    'NotebookList',
    'NotebookPage',
]
