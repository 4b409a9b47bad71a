"""Cursor hook handlers: afterFileEdit tracking and the stop-time doc pass."""

from docpass.hooks.dispatcher import dispatch
from docpass.hooks.edit_tracker import record_edit
from docpass.hooks.launcher import build_agent_args, find_agent_binary, launch_doc_agent
from docpass.hooks.payload import (
    AfterFileEditPayload,
    HookEvent,
    HookPayload,
    PayloadError,
    StopPayload,
    parse_payload,
    read_payload,
)
from docpass.hooks.stop import handle_stop

__all__ = [
    "AfterFileEditPayload",
    "HookEvent",
    "HookPayload",
    "PayloadError",
    "StopPayload",
    "build_agent_args",
    "dispatch",
    "find_agent_binary",
    "handle_stop",
    "launch_doc_agent",
    "parse_payload",
    "read_payload",
    "record_edit",
]
