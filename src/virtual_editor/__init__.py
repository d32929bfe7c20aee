"""Replay scripted editing actions into per-step editor history."""

from .actions import Action, ActionKind
from .editor import VirtualEditor
from .frames import Frame, SpeechCaption
from .history import HistoryIndexError

__all__ = [
    "Action",
    "ActionKind",
    "Frame",
    "HistoryIndexError",
    "SpeechCaption",
    "VirtualEditor",
    "actions",
    "buffer",
    "frames",
    "history",
    "runtime",
]

__version__ = "0.1.0"
