"""docpass: keeps project docs current by running a doc agent after Cursor edits files."""

__version__ = "0.1.0"
