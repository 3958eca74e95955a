"""
nbview Configuration Service - Manages viewer settings from nbview_config.json.

This module handles loading, creating, and accessing the nbview_config.json file
which controls highlighting defaults, the digest context string and where the
web app looks for notebooks.

`load_config()` creates the file with defaults when it doesn't exist. Library
code only calls `get_config()`, which falls back to the defaults in memory.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "nbview_config.json"

# Default configuration - used when creating new config file
DEFAULT_CONFIG = {
    "highlight": {
        "default_language": "py",
        "markdown_language": "txt",
        "comment": "Language used for code cells without a %%magic line, and for markdown cells"
    },
    "digest": {
        "context": "document-engine.content-digest",
        "comment": "Named key for content digests. Changing it invalidates stored digests"
    },
    "server": {
        "notebooks_dir": "notebooks",
        "port": 8000
    }
}


@dataclass
class ViewerConfig:
    """Parsed nbview configuration."""
    # Highlighting
    default_language: str = "py"
    markdown_language: str = "txt"

    # Fingerprinting
    digest_context: str = "document-engine.content-digest"

    # Web app
    notebooks_dir: Path = field(default_factory=lambda: Path("notebooks"))
    port: int = 8000

    # Raw config for reference
    raw_config: Dict[str, Any] = field(default_factory=dict)


# Module-level cached config
_config: Optional[ViewerConfig] = None
_config_path: Optional[Path] = None


def _parse_config(raw: Dict[str, Any]) -> ViewerConfig:
    """Parse raw JSON config into ViewerConfig."""
    config = ViewerConfig(raw_config=raw)

    highlight = raw.get("highlight", {})
    config.default_language = highlight.get("default_language") or "py"
    config.markdown_language = highlight.get("markdown_language") or "txt"

    digest = raw.get("digest", {})
    config.digest_context = digest.get("context") or "document-engine.content-digest"

    server = raw.get("server", {})
    config.notebooks_dir = Path(server.get("notebooks_dir", "notebooks"))
    try:
        config.port = int(server.get("port", 8000))
    except (TypeError, ValueError):
        logger.warning(f"Invalid server.port {server.get('port')!r}, using 8000")
        config.port = 8000

    return config


def _create_default_config(config_path: Path) -> Dict[str, Any]:
    """Create default config file and return the config dict."""
    logger.info(f"Creating default {CONFIG_FILENAME} at {config_path}")

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)

    return DEFAULT_CONFIG


def load_config(config_path: Optional[Path] = None, force_reload: bool = False) -> ViewerConfig:
    """
    Load nbview configuration from JSON file.

    Creates default config if file doesn't exist.

    Args:
        config_path: Path to config file. Defaults to ./nbview_config.json
        force_reload: If True, reload from disk even if cached

    Returns:
        Parsed ViewerConfig
    """
    global _config, _config_path

    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
    config_path = Path(config_path)

    # Return cached if available and path matches
    if _config is not None and not force_reload and _config_path == config_path:
        return _config

    _config_path = config_path

    if not config_path.exists():
        raw = _create_default_config(config_path)
    else:
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            logger.info(f"Loaded {CONFIG_FILENAME} from {config_path}")
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {CONFIG_FILENAME}: {e}")
            raw = DEFAULT_CONFIG
        except OSError as e:
            logger.error(f"Failed to load {CONFIG_FILENAME}: {e}")
            raw = DEFAULT_CONFIG

    if not isinstance(raw, dict):
        logger.error(f"{CONFIG_FILENAME} must contain a JSON object, using defaults")
        raw = DEFAULT_CONFIG

    _config = _parse_config(raw)
    return _config


def get_config() -> ViewerConfig:
    """Get the current config; defaults (without touching disk) if none was loaded."""
    global _config
    if _config is None:
        _config = _parse_config(DEFAULT_CONFIG)
    return _config


def reset_config_cache() -> None:
    """Reset cached config (useful for testing)."""
    global _config, _config_path
    _config = None
    _config_path = None


def print_config_status(config: ViewerConfig) -> None:
    """Print config status for startup logging."""
    print(f"   Config: {CONFIG_FILENAME}")
    print(f"      Notebooks dir:     {config.notebooks_dir}")
    print(f"      Default language:  {config.default_language}")
    print(f"      Markdown language: {config.markdown_language}")
    print(f"      Digest context:    {config.digest_context}")
