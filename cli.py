"""
nbview command line scripts.

Usage:
    nbview_render notebook.ipynb --out notebook.html
    nbview_diff old.ipynb new.ipynb
"""
import logging
import sys

from fastcore.script import call_parse, Param
from fasthtml.common import to_xml

from services import NotebookEngine, load_document_bytes
from services.viewer_config import load_config

logger = logging.getLogger(__name__)


@call_parse
def nbview_render(
    path: Param("Notebook to render", str),
    out: Param("Write HTML here instead of stdout", str) = None,
    config: Param("Path to nbview_config.json", str) = None,
):
    "Render a notebook to an HTML fragment."
    if config:
        load_config(config)
    html = to_xml(NotebookEngine().render(load_document_bytes(path)))
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(html)
        logger.info(f"Wrote {out}")
    else:
        sys.stdout.write(html)


@call_parse
def nbview_diff(
    old: Param("Old version of the notebook", str),
    new: Param("New version of the notebook", str),
    config: Param("Path to nbview_config.json", str) = None,
):
    "Print the content digest of every diff block, marking blocks unique to one side."
    if config:
        load_config(config)
    result = NotebookEngine().diff(load_document_bytes(old), load_document_bytes(new))
    for message in result.messages:
        print(f"! {message}")

    u_side, v_side = result.sides
    for name, side, other, mark in ((old, u_side, v_side, "-"), (new, v_side, u_side, "+")):
        if not side.ok:
            continue
        print(f"== {name}")
        for block in side.blocks:
            print(f"{mark if block.digest not in other.digests else ' '} {block.key:4d} {block.digest}")
