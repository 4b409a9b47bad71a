"""Tests for hook payload reading and classification."""

from __future__ import annotations

import io
import json

import pytest

from docpass.hooks.payload import (
    AfterFileEditPayload,
    HookEvent,
    HookPayload,
    PayloadError,
    StopPayload,
    parse_payload,
    read_payload,
)


def _stream(obj) -> io.BytesIO:
    return io.BytesIO(json.dumps(obj).encode("utf-8"))


class TestHookEvent:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("afterFileEdit", HookEvent.AFTER_FILE_EDIT),
            ("stop", HookEvent.STOP),
            ("beforeShellExecution", HookEvent.UNKNOWN),
            ("Stop", HookEvent.UNKNOWN),
            (None, HookEvent.UNKNOWN),
            (42, HookEvent.UNKNOWN),
        ],
    )
    def test_classify(self, name, expected):
        assert HookEvent.classify(name) is expected


class TestParsePayload:
    def test_after_file_edit(self):
        payload = parse_payload(
            {
                "hook_event_name": "afterFileEdit",
                "conversation_id": "conv-1",
                "generation_id": "gen-9",
                "file_path": "/repo/src/a.ts",
                "edits": [{"old_string": "a", "new_string": "b"}],
                "workspace_roots": ["/repo"],
            }
        )
        assert isinstance(payload, AfterFileEditPayload)
        assert payload.event is HookEvent.AFTER_FILE_EDIT
        assert payload.conversation_id == "conv-1"
        assert payload.file_path == "/repo/src/a.ts"
        # extra fields are kept, not rejected
        assert payload.model_extra["generation_id"] == "gen-9"

    def test_stop(self):
        payload = parse_payload(
            {"hook_event_name": "stop", "conversation_id": "conv-1", "status": "completed", "loop_count": 0}
        )
        assert isinstance(payload, StopPayload)
        assert payload.event is HookEvent.STOP
        assert payload.model_extra["status"] == "completed"

    def test_stop_status_of_any_shape(self):
        payload = parse_payload({"hook_event_name": "stop", "conversation_id": "conv-1", "status": {"code": 1}})
        assert isinstance(payload, StopPayload)
        assert payload.conversation_id == "conv-1"

    def test_unknown_event_is_base_payload(self):
        payload = parse_payload({"hook_event_name": "beforeReadFile", "conversation_id": "c"})
        assert type(payload) is HookPayload
        assert payload.event is HookEvent.UNKNOWN

    @pytest.mark.parametrize(
        "data",
        [
            {"hook_event_name": 5, "conversation_id": "c"},
            {"hook_event_name": ["stop"]},
            {"hook_event_name": "beforeSubmitPrompt", "conversation_id": 42},
        ],
    )
    def test_unknown_event_fields_not_validated(self, data):
        payload = parse_payload(data)
        assert type(payload) is HookPayload
        assert payload.event is HookEvent.UNKNOWN

    def test_missing_discriminant_is_unknown(self):
        payload = parse_payload({})
        assert payload.event is HookEvent.UNKNOWN

    def test_missing_fields_are_none(self):
        payload = parse_payload({"hook_event_name": "afterFileEdit"})
        assert payload.conversation_id is None
        assert payload.file_path is None

    @pytest.mark.parametrize("data", [[], "stop", 3, None])
    def test_non_object_rejected(self, data):
        with pytest.raises(PayloadError, match="expected a JSON object"):
            parse_payload(data)

    def test_wrong_field_type_rejected(self):
        with pytest.raises(PayloadError, match="afterFileEdit"):
            parse_payload({"hook_event_name": "afterFileEdit", "file_path": ["/a"]})


class TestReadPayload:
    def test_reads_stream(self):
        payload = read_payload(_stream({"hook_event_name": "stop", "conversation_id": "c"}))
        assert isinstance(payload, StopPayload)

    def test_utf8_paths(self):
        payload = read_payload(
            _stream({"hook_event_name": "afterFileEdit", "conversation_id": "c", "file_path": "/docs/résumé.md"})
        )
        assert payload.file_path == "/docs/résumé.md"

    def test_empty_input(self):
        with pytest.raises(PayloadError, match="not valid JSON"):
            read_payload(io.BytesIO(b""))

    def test_invalid_json(self):
        with pytest.raises(PayloadError) as exc_info:
            read_payload(io.BytesIO(b"{not json"))
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_invalid_utf8(self):
        with pytest.raises(PayloadError, match="UTF-8"):
            read_payload(io.BytesIO(b"\xff\xfe{}"))

    def test_reason_attribute(self):
        with pytest.raises(PayloadError) as exc_info:
            read_payload(io.BytesIO(b"[1, 2]"))
        assert exc_info.value.reason == "expected a JSON object, got list"
