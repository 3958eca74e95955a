"""Services layer - Highlighting, decomposition, fingerprinting and the document engine."""

from .decomposer import DecomposeMode, decompose, cell_to_unit, split_code_cell
from .fingerprint import fingerprint, digest_with_named_key, canonical_json
from .highlight_service import HighlightedLines, highlight_lines, highlight_with_language, split_lines
from .document_engine import (
    DocumentBlock,
    DiffSide,
    DocumentBlocks,
    NotebookEngine,
    render_document,
    new_diff_blocks,
    diff_documents,
)
from .document_loader import DocumentRef, load_document_bytes, list_notebooks

__all__ = [
    # decomposer
    "DecomposeMode",
    "decompose",
    "cell_to_unit",
    "split_code_cell",
    # fingerprint
    "fingerprint",
    "digest_with_named_key",
    "canonical_json",
    # highlight_service
    "HighlightedLines",
    "highlight_lines",
    "highlight_with_language",
    "split_lines",
    # document_engine
    "DocumentBlock",
    "DiffSide",
    "DocumentBlocks",
    "NotebookEngine",
    "render_document",
    "new_diff_blocks",
    "diff_documents",
    # document_loader
    "DocumentRef",
    "load_document_bytes",
    "list_notebooks",
]
