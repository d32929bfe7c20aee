"""Step-by-step history capture."""

from .recorder import HistoryEntry, HistoryIndexError, HistoryRecorder

__all__ = ["HistoryEntry", "HistoryIndexError", "HistoryRecorder"]
