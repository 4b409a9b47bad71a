"""Project-root-relative locations used by the hook."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_DIR_ENV = "CURSOR_PROJECT_DIR"


def project_root() -> Path:
    """Where .cursor/hooks/docs lives: $CURSOR_PROJECT_DIR, else the cwd."""
    root = os.environ.get(PROJECT_DIR_ENV) or os.getcwd()
    return Path(root).resolve()


def hooks_dir(root: Path | None = None) -> Path:
    """The hook's own directory (.cursor/hooks/docs). Not created here."""
    return (root or project_root()) / ".cursor" / "hooks" / "docs"


def state_dir(root: Path | None = None) -> Path:
    """Directory holding edits.json. Created if missing."""
    path = hooks_dir(root) / "state"
    path.mkdir(parents=True, exist_ok=True)
    return path


def agent_log_file(root: Path | None = None) -> Path:
    return hooks_dir(root) / "agent.log"
