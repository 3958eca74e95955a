"""
nbview UI - Base Utilities

Common utilities shared across UI components.
"""

from fasthtml.common import *


def join_classes(*classes) -> str:
    """Join CSS classes, skipping empty entries.

    Args:
        classes: Class names; None or "" entries are ignored

    Returns:
        Space separated class string
    """
    return " ".join(c for c in classes if c)


def Message(text: str, cls: str = ""):
    """Notice shown in place of a document that can not be rendered."""
    return Div(text, cls=join_classes("document-engine-message", cls))
