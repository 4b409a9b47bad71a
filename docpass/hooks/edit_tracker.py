"""afterFileEdit handler: records edited paths per conversation."""

from __future__ import annotations

import logging
from pathlib import Path

from docpass.state import EditsState, load_state, save_state

logger = logging.getLogger(__name__)


def record_edit(conversation_id: str | None, file_path: str | None, root: Path | None = None) -> None:
    """Add file_path to the pending list for conversation_id.

    Same conversation: append if not already listed. Any other stored
    conversation (or none): start over with just this file.
    """
    if not conversation_id or not file_path:
        return

    current = load_state(root)

    if current is not None and current.conversation_id == conversation_id:
        if current.add(file_path):
            save_state(current, root)
        return

    if current is not None:
        logger.info(
            "New conversation %s, dropping %d pending file(s) from %s",
            conversation_id,
            len(current.files),
            current.conversation_id,
        )
    save_state(EditsState(conversation_id=conversation_id, files=[file_path]), root)
