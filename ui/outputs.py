"""
nbview UI - Output Components

Renders a single code cell output (stream text or a rich MIME bundle).
"""

from fasthtml.common import *
import logging
from typing import Any, List, Tuple

from document.errors import InvalidOutput
from .base import join_classes

logger = logging.getLogger(__name__)

INVALID_OUTPUT = "<Invalid Output>"

# Checked in this order; the first one present wins
IMAGE_FORMATS = ("image/png", "image/jpeg", "image/jpg", "image/gif")

# Rendered as raw HTML
HTML_FORMATS = ("text/html", "application/javascript")


def _join_payload(payload: Any) -> str:
    """MIME payloads and stream text may be chunked into a list of strings."""
    if isinstance(payload, list):
        return "".join(str(part) for part in payload)
    return str(payload)


def _check_output(output: Any) -> dict:
    if not isinstance(output, dict):
        raise InvalidOutput(f"Output of type {type(output).__name__} is not a mapping")
    return output


def format_output(output: Any) -> Tuple[Any, List[str]]:
    """Render one output payload into (content, css classes).

    Args:
        output: One entry of a code cell's "outputs" list

    Returns:
        Content (FT component, NotStr markup, text or None) and class list
    """
    try:
        output = _check_output(output)
    except InvalidOutput as e:
        # Only this output is replaced; the rest of the document still renders
        logger.debug(f"Invalid output: {e}")
        return INVALID_OUTPUT, []

    classes = ["output", "monospace"]
    if output.get("name") == "stderr":
        classes.append("output-stderr")

    content = None
    output_type = output.get("output_type")
    if output_type in ("execute_result", "display_data"):
        data = output.get("data")
        if not isinstance(data, dict):
            data = {}

        for image_format in IMAGE_FORMATS:
            if data.get(image_format) is None:
                continue
            payload = _join_payload(data[image_format])
            return Img(src=f"data:{image_format};base64,{payload}"), classes

        for html_format in HTML_FORMATS:
            if data.get(html_format) is not None:
                classes.append("output-html")
                return NotStr(_join_payload(data[html_format])), classes

        if data.get("text/plain") is not None:
            content = _join_payload(data["text/plain"])
    else:
        # "stream", and the default for anything else
        text = output.get("text")
        if isinstance(text, (list, str)):
            content = _join_payload(text)
        else:
            content = ""

    return content, classes


def OutputView(output: Any):
    """Render one output as a styled Div.

    Args:
        output: One entry of a code cell's "outputs" list

    Returns:
        Div holding the rendered content
    """
    content, classes = format_output(output)
    return Div(content, cls=join_classes(*classes) or None)
