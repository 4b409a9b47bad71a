"""Load and save edits.json.

Each hook event runs in a fresh process, so the only memory between events
is this file. Reads never fail: a missing, unreadable or malformed file is
the same as no state at all. Writes are plain overwrites and propagate
OSError to the caller.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from docpass.paths import state_dir
from docpass.state.models import EditsState

logger = logging.getLogger(__name__)

STATE_FILENAME = "edits.json"


def state_file(root: Path | None = None) -> Path:
    """Full path to edits.json. Ensures the state directory exists."""
    return state_dir(root) / STATE_FILENAME


def load_state(root: Path | None = None) -> EditsState | None:
    """Read edits state, or None if missing, invalid JSON or the wrong shape."""
    path = state_file(root)
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return EditsState.model_validate(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.debug("Ignoring unusable state file %s: %s", path, e)
        return None


def save_state(state: EditsState, root: Path | None = None) -> None:
    """Write edits state (pretty-printed), replacing whatever was there."""
    path = state_file(root)
    path.write_text(json.dumps(state.model_dump(), indent=2), encoding="utf-8")
    logger.debug("Saved %d pending file(s) for %s", len(state.files), state.conversation_id)
