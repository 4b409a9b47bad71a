"""Hook payloads: the JSON object Cursor pipes to the hook on stdin."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, ValidationError


class PayloadError(Exception):
    """The hook input could not be read or parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid hook payload: {reason}")


class HookEvent(str, Enum):
    AFTER_FILE_EDIT = "afterFileEdit"
    STOP = "stop"
    UNKNOWN = "unknown"

    @classmethod
    def classify(cls, name: object) -> HookEvent:
        """Map a hook_event_name value to its variant; anything unrecognized is UNKNOWN."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


class HookPayload(BaseModel):
    """Fields common to every hook event. Unlisted fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    hook_event_name: str | None = None
    conversation_id: str | None = None

    @property
    def event(self) -> HookEvent:
        return HookEvent.classify(self.hook_event_name)


class AfterFileEditPayload(HookPayload):
    file_path: str | None = None


class StopPayload(HookPayload):
    """stop carries status and loop_count too; neither is needed, so both stay extras."""


_PAYLOAD_TYPES: dict[HookEvent, type[HookPayload]] = {
    HookEvent.AFTER_FILE_EDIT: AfterFileEditPayload,
    HookEvent.STOP: StopPayload,
}


def parse_payload(data: object) -> HookPayload:
    """Build the payload variant selected by data["hook_event_name"]."""
    if not isinstance(data, dict):
        raise PayloadError(f"expected a JSON object, got {type(data).__name__}")
    event = HookEvent.classify(data.get("hook_event_name"))
    if event is HookEvent.UNKNOWN:
        # Never read, so never validated
        return HookPayload.model_construct(**data)
    try:
        return _PAYLOAD_TYPES[event].model_validate(data)
    except ValidationError as e:
        raise PayloadError(f"bad {event.value} payload: {e.error_count()} invalid field(s)") from e


def read_payload(stream: BinaryIO | None = None) -> HookPayload:
    """Read the whole of stdin (or stream) as one UTF-8 JSON object."""
    if stream is None:
        stream = sys.stdin.buffer
    raw = stream.read()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PayloadError("input is not valid UTF-8") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadError(f"input is not valid JSON ({e.msg})") from e
    return parse_payload(data)
