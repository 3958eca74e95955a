"""Errors raised while reading a notebook document."""


class NotebookError(Exception):
    """Base class for documents that can not be rendered as a notebook."""


class MalformedInput(NotebookError):
    """Raw bytes are not JSON, or do not decode to an object."""


class MissingField(NotebookError):
    """A required top-level field is absent."""


class UnsupportedVersion(NotebookError):
    """The notebook declares a format version other than the supported one."""

    def __init__(self, found, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"This Jupyter notebook uses an unsupported version of the file "
            f"format (found version {found}, expected version {expected})."
        )


class EmptyDocument(NotebookError):
    """The notebook has a cell list, but it is empty."""


class InvalidOutput(NotebookError):
    """An output entry is not a mapping. Recovered locally by the formatter."""
