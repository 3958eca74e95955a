#!/usr/bin/env python3
"""
Tests for the FastHTML routes, using Starlette's test client.

Run with: uv run pytest test_app.py
    or: uv run python test_app.py
"""
import json
import sys
sys.path.insert(0, '.')

import pytest
from starlette.testclient import TestClient

NOTEBOOK = {
    "nbformat": 4,
    "cells": [
        {"cell_type": "code", "execution_count": 3, "source": ["print('hi')\n"],
         "outputs": [{"output_type": "stream", "name": "stdout", "text": ["hi\n"]}]},
    ],
}


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    nb_dir = tmp_path / "notebooks"
    nb_dir.mkdir()
    (nb_dir / "old.ipynb").write_text(json.dumps(NOTEBOOK))
    changed = json.loads(json.dumps(NOTEBOOK))
    changed["cells"][0]["source"] = ["print('bye')\n"]
    (nb_dir / "new.ipynb").write_text(json.dumps(changed))
    (nb_dir / "broken.ipynb").write_text("{nope")

    from services.viewer_config import reset_config_cache
    reset_config_cache()
    sys.modules.pop("app", None)
    import app
    yield TestClient(app.app)
    reset_config_cache()
    sys.modules.pop("app", None)


def test_index_lists_notebooks(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "/notebook/old" in r.text
    assert "/notebook/broken" in r.text


def test_render_notebook(client):
    r = client.get("/notebook/old")
    assert r.status_code == 200
    assert "In [3]:" in r.text
    assert "jupyter-notebook" in r.text


def test_render_broken_notebook_shows_message(client):
    r = client.get("/notebook/broken")
    assert r.status_code == 200
    assert "document-engine-message" in r.text


def test_render_missing_notebook(client):
    r = client.get("/notebook/missing")
    assert r.status_code == 200
    assert "could not be read" in r.text


def test_diff_marks_changed_blocks(client):
    r = client.get("/diff", params={"u": "old", "v": "new"})
    assert r.status_code == 200
    assert r.text.count("diff-column") >= 2
    assert "diff-changed" in r.text
    assert "data-digest=" in r.text


def test_diff_with_broken_side(client):
    r = client.get("/diff", params={"u": "broken", "v": "new"})
    assert r.status_code == 200
    assert "diff-message" in r.text
    assert "print" in r.text


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, "-v"]))
