"""Loads notebook bytes from the notebooks directory."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .viewer_config import get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentRef:
    """A named notebook inside a notebooks directory."""
    name: str
    root: Path

    @property
    def path(self) -> Path:
        """Resolved path; refuses names that escape the root directory."""
        root = Path(self.root).resolve()
        path = (root / self.name).resolve()
        if path.suffix.lower() != ".ipynb":
            path = path.with_name(path.name + ".ipynb")
        if root not in path.parents:
            raise ValueError(f"Notebook {self.name!r} is outside {root}")
        return path

    @classmethod
    def from_name(cls, name: str, root: Optional[Path] = None) -> 'DocumentRef':
        return cls(name=name, root=Path(root or get_config().notebooks_dir))


def load_document_bytes(ref: Union[DocumentRef, str, Path]) -> bytes:
    """Read raw document bytes for a ref or a filesystem path."""
    path = ref.path if isinstance(ref, DocumentRef) else Path(ref)
    logger.debug(f"Loading notebook bytes from {path}")
    return path.read_bytes()


def list_notebooks(root: Optional[Path] = None) -> List[str]:
    """Names (without extension) of the notebooks under `root`."""
    root = Path(root or get_config().notebooks_dir)
    if not root.is_dir():
        return []
    return sorted(p.stem for p in root.glob("*.ipynb"))
