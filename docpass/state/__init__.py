"""Persisted edits state: one conversation's pending files."""

from docpass.state.models import EditsState
from docpass.state.store import load_state, save_state, state_file

__all__ = [
    "EditsState",
    "load_state",
    "save_state",
    "state_file",
]
