"""
nbview UI - Layout Components

Notebook tables, diff columns and full pages.
"""

from fasthtml.common import *
from typing import List
from .base import join_classes, Message
from .units import UnitRow


def NotebookTable(units, diff: bool = False):
    """Wrap rendered units in the notebook table container.

    Args:
        units: Decomposed units, in document order
        diff: Add the diff container class

    Returns:
        Div holding a table with one row per unit
    """
    return Div(
        Table(*[UnitRow(u) for u in units], cls="jupyter-notebook"),
        cls=join_classes("document-engine-jupyter", "document-engine-diff" if diff else ""),
    )


def DiffColumn(title: str, side, other_digests: set):
    """One side of a side-by-side diff.

    Args:
        title: Heading for the column (usually the notebook name)
        side: DiffSide with blocks or an error
        other_digests: Digests present on the opposite side

    Returns:
        Div with one entry per block, changed blocks marked
    """
    if side.error is not None:
        return Div(H3(title), Message(side.error), cls="diff-column")
    return Div(
        H3(title),
        *[Div(b.content,
              cls=join_classes("diff-block", "" if b.digest in other_digests else "diff-changed"),
              data_block_key=str(b.key), data_digest=b.digest)
          for b in side.blocks],
        cls="diff-column",
    )


def DiffView(u_title: str, v_title: str, result):
    """Side-by-side view of two block lists.

    Args:
        u_title: Name of the old document
        v_title: Name of the new document
        result: DocumentBlocks from diff_documents

    Returns:
        Div with messages (if any) and both columns
    """
    u_side, v_side = result.sides
    return Div(
        *[Message(m, cls="diff-message") for m in result.messages],
        Div(
            DiffColumn(u_title, u_side, v_side.digests),
            DiffColumn(v_title, v_side, u_side.digests),
            cls="diff-columns",
        ),
    )


def NotebookList(names: List[str]):
    """Links to every notebook that can be opened."""
    if not names:
        return Div("No notebooks found.", cls="file-list")
    return Div(
        *[A(name, href=f"/notebook/{name}", cls="file-item") for name in names],
        cls="file-list",
    )


def NotebookPage(title: str, content, notebook_list: List[str]):
    """Render a complete page.

    Args:
        title: Page title
        content: Rendered document, diff or message
        notebook_list: Notebook names for the file list

    Returns:
        Complete page with Titled wrapper
    """
    return Titled(
        f"{title} - nbview",
        Div(
            Div(
                Div(Span("📓", cls="title-icon"), Span(title, cls="title")),
                Div(A("All notebooks", href="/", cls="btn btn-sm"), cls="toolbar"),
                cls="header",
            ),
            NotebookList(notebook_list),
            content,
            cls="container",
        ),
    )
