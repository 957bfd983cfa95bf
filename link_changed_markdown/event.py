"""Webhook event payload loading."""

import json
from pathlib import Path
from typing import Any, Dict

from link_changed_markdown.exceptions import ConfigError


def load_event(path: Path) -> Dict[str, Any]:
    """Read the event JSON written by GitHub Actions at GITHUB_EVENT_PATH."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read event payload {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Event payload {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Event payload {path} is not a JSON object")
    return data
