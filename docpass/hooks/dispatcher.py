"""Route a parsed hook payload to its handler."""

from __future__ import annotations

from pathlib import Path

from docpass.config.models import AgentConfig
from docpass.hooks.edit_tracker import record_edit
from docpass.hooks.payload import AfterFileEditPayload, HookPayload, StopPayload
from docpass.hooks.stop import handle_stop


def dispatch(payload: HookPayload, options: AgentConfig, root: Path | None = None) -> dict:
    """Run the handler for the payload's variant and return the response for stdout.

    parse_payload() picks the variant from hook_event_name; anything it did
    not recognize arrives here as a plain HookPayload and is a no-op.
    """
    if isinstance(payload, AfterFileEditPayload):
        record_edit(payload.conversation_id, payload.file_path, root)
        return {}

    if isinstance(payload, StopPayload):
        return handle_stop(payload.conversation_id, options, root)

    return {}
