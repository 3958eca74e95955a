"""
nbview - Jupyter notebook viewer and diff with FastHTML

Features:
- Renders nbformat 4 notebooks as a label/content table
- Code highlighting with Pygments, including %%magic language lines
- Rich outputs: images, HTML, plain text and streams
- Side-by-side diff of two notebooks at line and output granularity
"""

from fasthtml.common import *
import logging

from services import NotebookEngine, DocumentRef, load_document_bytes, list_notebooks
from services.viewer_config import load_config, print_config_status
from ui import Message, DiffView, NotebookPage

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

# Load configuration (creates nbview_config.json with defaults if it doesn't exist)
NBVIEW_CONFIG = load_config()
NOTEBOOKS_DIR = NBVIEW_CONFIG.notebooks_dir

engine = NotebookEngine()

# ============================================================================
# CSS
# ============================================================================

css = """
:root {
    --bg-primary: #0d1117;
    --bg-secondary: #161b22;
    --bg-cell: #21262d;
    --text-primary: #c9d1d9;
    --text-muted: #8b949e;
    --accent-blue: #58a6ff;
    --accent-green: #3fb950;
    --accent-red: #f85149;
    --diff-changed: rgba(210, 153, 34, 0.15);
    --border: #30363d;
}

* { box-sizing: border-box; margin: 0; padding: 0; }

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    background: var(--bg-primary);
    color: var(--text-primary);
    line-height: 1.6;
}

.container { max-width: 1200px; margin: 0 auto; padding: 20px; }

/* Header */
.header {
    display: flex; justify-content: space-between; align-items: center;
    padding: 12px 0; border-bottom: 1px solid var(--border); margin-bottom: 20px;
}
.title { font-size: 1.3rem; font-weight: 600; }
.title-icon { font-size: 1.5rem; margin-right: 8px; }
.btn {
    padding: 4px 8px; border: 1px solid var(--border); border-radius: 6px;
    background: var(--bg-secondary); color: var(--text-primary);
    font-size: 0.75rem; text-decoration: none;
}
.file-list { display: flex; gap: 8px; flex-wrap: wrap; margin-bottom: 16px; }
.file-item { color: var(--accent-blue); font-size: 0.85rem; }

/* Notebook table */
.jupyter-notebook { width: 100%; border-collapse: collapse; }
.jupyter-notebook td { padding: 8px 4px; vertical-align: top; }
.jupyter-notebook td.jupyter-cell-flush { padding-top: 0; padding-bottom: 0; }
.jupyter-label {
    width: 80px; color: var(--text-muted); white-space: nowrap;
    font-family: 'SF Mono', Monaco, 'Cascadia Code', monospace; font-size: 0.8rem;
}
.monospace { font-family: 'SF Mono', Monaco, 'Cascadia Code', monospace; font-size: 0.85rem; white-space: pre-wrap; }
.jupyter-cell-markdown { white-space: pre-wrap; }
.jupyter-cell-code { background: var(--bg-cell); padding: 0 8px; }
.jupyter-cell-code-block { padding: 8px; border-radius: 6px; }
.jupyter-cell-code-head { padding-top: 8px; border-radius: 6px 6px 0 0; }
.jupyter-cell-code-last { padding-bottom: 8px; border-radius: 0 0 6px 6px; }
.jupyter-cell-raw { color: var(--text-muted); }
.language-tag { color: var(--accent-green); }
.output { padding: 8px; }
.output img { max-width: 100%; }
.output-stderr { color: var(--accent-red); }
.output-html { white-space: normal; }

/* Diff */
.diff-columns { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
.diff-changed { background: var(--diff-changed); }
.document-engine-message {
    padding: 12px; border: 1px solid var(--accent-red); border-radius: 6px; margin-bottom: 12px;
}
"""

# ============================================================================
# FastHTML App
# ============================================================================

app, rt = fast_app(
    pico=False,
    hdrs=(Style(css),)
)

# ============================================================================
# Helpers
# ============================================================================

def load_ref(name: str):
    """Load a notebook by name, returning (bytes, None) or (None, error message)."""
    try:
        ref = DocumentRef.from_name(name, NOTEBOOKS_DIR)
        return load_document_bytes(ref), None
    except ValueError as e:
        return None, str(e)
    except OSError as e:
        logger.warning(f"Failed to read notebook {name!r}: {e}")
        return None, f"Notebook {name!r} could not be read."

# ============================================================================
# Routes
# ============================================================================

@rt("/")
def get():
    names = list_notebooks(NOTEBOOKS_DIR)
    return NotebookPage("Notebooks", Div(), names)

@rt("/notebook/{name}")
def get(name: str):
    raw, error = load_ref(name)
    if error:
        content = Message(error)
    elif not engine.can_render(raw):
        content = Message("This document does not look like a JSON document.")
    else:
        content = engine.render(raw)
    return NotebookPage(name, content, list_notebooks(NOTEBOOKS_DIR))

@rt("/diff")
def get(u: str, v: str):
    u_raw, u_error = load_ref(u)
    v_raw, v_error = load_ref(v)
    if u_error or v_error:
        content = Div(*[Message(e) for e in (u_error, v_error) if e])
    else:
        content = DiffView(u, v, engine.diff(u_raw, v_raw))
    return NotebookPage(f"{u} → {v}", content, list_notebooks(NOTEBOOKS_DIR))

# ============================================================================
# Run
# ============================================================================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(f"🚀 nbview starting at http://localhost:{NBVIEW_CONFIG.port}")
    print(f"   Notebooks read from: ./{NOTEBOOKS_DIR}/")
    print("")
    print_config_status(NBVIEW_CONFIG)
    print("")
    print("   Routes:")
    print("   • /notebook/<name>        - Render a notebook")
    print("   • /diff?u=<old>&v=<new>   - Diff two notebooks")
    serve(port=NBVIEW_CONFIG.port)
