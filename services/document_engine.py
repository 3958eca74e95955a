"""
Notebook document engine.

Top-level entry points: render a notebook for display, and build the
fingerprinted block lists used to diff two versions of a notebook.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Union

from document.errors import NotebookError
from document.notebook import parse_notebook
from .decomposer import DecomposeMode, decompose
from .fingerprint import fingerprint

logger = logging.getLogger(__name__)

Raw = Union[bytes, str]


@dataclass
class DocumentBlock:
    """One diffable unit: its rendered content and content digest."""
    key: int
    content: object
    digest: str


@dataclass
class DiffSide:
    """Blocks for one document of a diff, or the reason there are none."""
    blocks: List[DocumentBlock] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def digests(self) -> set:
        return {b.digest for b in self.blocks}


@dataclass
class DocumentBlocks:
    """Both sides of a diff plus any messages about failed sides."""
    sides: List[DiffSide] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)


def render_document(raw: Raw):
    """Render a whole notebook, or a message if it can't be read."""
    from ui.base import Message
    from ui.layout import NotebookTable

    try:
        doc = parse_notebook(raw)
    except NotebookError as e:
        logger.warning(f"Can not render notebook: {e}")
        return Message(str(e))

    units = decompose(doc.cells, DecomposeMode.FULL)
    return NotebookTable(units)


def new_diff_blocks(raw: Raw) -> DiffSide:
    """Decompose one document for diffing and fingerprint every unit."""
    from ui.layout import NotebookTable

    try:
        doc = parse_notebook(raw)
    except NotebookError as e:
        logger.warning(f"Can not diff notebook: {e}")
        return DiffSide(error=str(e))

    blocks = []
    for key, unit in enumerate(decompose(doc.cells, DecomposeMode.DIFF), start=1):
        blocks.append(DocumentBlock(
            key=key,
            content=NotebookTable([unit], diff=True),
            digest=fingerprint(unit),
        ))
    return DiffSide(blocks=blocks)


def diff_documents(u_raw: Raw, v_raw: Raw) -> DocumentBlocks:
    """Build block lists for two documents. A bad side never hides the other."""
    result = DocumentBlocks()
    for raw in (u_raw, v_raw):
        side = new_diff_blocks(raw)
        result.sides.append(side)
        if not side.ok:
            result.messages.append(side.error)
    return result


class NotebookEngine:
    """Describes how notebooks are detected, rendered and diffed."""
    ENGINE_KEY = "jupyter"
    NAME_PATTERN = re.compile(r'\.ipynb\Z', re.IGNORECASE)

    view_as_label = "View as Jupyter Notebook"
    icon = "fa-sun-o"
    rendering_text = "Rendering Jupyter Notebook..."

    def should_render_async(self) -> bool:
        # Large notebooks are slow; callers may schedule rendering off-request
        return True

    def content_score(self, name: str) -> int:
        if self.NAME_PATTERN.search(name or ""):
            return 2000
        return 500

    def can_render(self, raw: Raw) -> bool:
        """True when the content is probably JSON."""
        if isinstance(raw, bytes):
            raw = raw[:64].decode('utf-8', errors='ignore')
        head = raw.lstrip('\ufeff \t\r\n')[:1]
        return head in ('{', '[')

    def can_diff(self, u_raw: Raw, v_raw: Raw) -> bool:
        return True

    def render(self, raw: Raw):
        return render_document(raw)

    def diff(self, u_raw: Raw, v_raw: Raw) -> DocumentBlocks:
        return diff_documents(u_raw, v_raw)
