"""stop handler: runs the doc agent once per batch of edits."""

from __future__ import annotations

import logging
from pathlib import Path

from docpass.config.models import AgentConfig
from docpass.hooks import launcher
from docpass.state import EditsState, load_state, save_state

logger = logging.getLogger(__name__)


def handle_stop(conversation_id: str | None, options: AgentConfig, root: Path | None = None) -> dict:
    """Trigger a doc pass if this conversation has pending edits.

    The pending list is cleared before launching, so a second stop with no
    new edits in between does nothing.
    """
    if not conversation_id:
        return {}

    state = load_state(root)
    if state is None or state.conversation_id != conversation_id or not state.files:
        return {}

    logger.info("Doc pass for %s: %d edited file(s)", conversation_id, len(state.files))
    save_state(EditsState(conversation_id=state.conversation_id, files=[]), root)
    launcher.launch_doc_agent(options, root)
    return {}
