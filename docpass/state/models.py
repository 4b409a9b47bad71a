"""Pydantic model for the persisted edits state."""

from __future__ import annotations

from pydantic import BaseModel


class EditsState(BaseModel):
    """Which files were edited in the tracked conversation and not yet documented.

    Stored at .cursor/hooks/docs/state/edits.json. Only one conversation is
    tracked at a time; a new conversation id replaces the whole record.
    """

    conversation_id: str
    files: list[str]

    def add(self, file_path: str) -> bool:
        """Append file_path unless already tracked. Returns True if it was added."""
        if file_path in self.files:
            return False
        self.files.append(file_path)
        return True
