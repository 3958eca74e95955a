"""Notebook document model and the nbformat 4 validator."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import json
import logging

from .errors import MalformedInput, MissingField, UnsupportedVersion, EmptyDocument

logger = logging.getLogger(__name__)

SUPPORTED_NBFORMAT = 4


@dataclass(frozen=True)
class NotebookDocument:
    """
    A parsed notebook that passed validation.

    Cells are kept as the raw JSON mappings; nothing here is mutated after
    parsing.
    """
    format_version: int
    cells: List[Any]
    format_minor: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def cell_count(self) -> int:
        return len(self.cells)


def parse_notebook(raw: Union[bytes, str]) -> NotebookDocument:
    """
    Decode raw document bytes and validate the notebook shape.

    Raises:
        MalformedInput: not JSON (or nested too deeply), or not a JSON object
        MissingField: "nbformat" is missing, null, false or empty, or "cells" is missing
        UnsupportedVersion: "nbformat" is not 4
        EmptyDocument: "cells" is an empty list
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from very deeply nested arrays or objects
        raise MalformedInput(
            f"This is not a valid JSON document and can not be rendered as "
            f"a Jupyter notebook: {e}."
        ) from e

    if not isinstance(data, dict):
        raise MalformedInput(
            "This document does not encode a valid JSON object and can not "
            "be rendered as a Jupyter notebook."
        )

    nbformat = data.get('nbformat')
    if nbformat is None or nbformat is False or nbformat == "":
        raise MissingField(
            'This document is missing an "nbformat" field. Jupyter notebooks '
            'must have this field.'
        )

    # bool is an int subclass, and 4.0 == 4; only the integer 4 is accepted
    if type(nbformat) is not int or nbformat != SUPPORTED_NBFORMAT:
        raise UnsupportedVersion(json.dumps(nbformat), SUPPORTED_NBFORMAT)

    cells = data.get('cells')
    if not isinstance(cells, list):
        raise MissingField(
            'This Jupyter notebook does not specify a list of "cells".'
        )

    if not cells:
        raise EmptyDocument(
            "This Jupyter notebook does not specify any notebook cells."
        )

    metadata = data.get('metadata')
    format_minor = data.get('nbformat_minor')
    doc = NotebookDocument(
        format_version=nbformat,
        cells=cells,
        format_minor=format_minor if type(format_minor) is int else None,
        metadata=metadata if isinstance(metadata, dict) else {},
    )
    logger.debug(f"Parsed nbformat {nbformat} notebook with {doc.cell_count} cells")
    return doc
