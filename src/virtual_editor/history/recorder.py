"""Append-only per-step snapshots of the editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from virtual_editor.actions.selection import highlighted_text
from virtual_editor.buffer import EditorState, Position


class HistoryIndexError(IndexError):
    """Raised when a lookup asks for a step that has not been recorded."""

    def __init__(self, index: int, recorded: int) -> None:
        super().__init__(
            f"Action index {index} out of range ({recorded} entries recorded)"
        )
        self.index = index
        self.recorded = recorded


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    lines: Tuple[str, ...]
    caret: Position
    anchor: Optional[Position]
    highlighted_code: str

    @classmethod
    def capture(cls, state: EditorState) -> "HistoryEntry":
        return cls(
            lines=tuple(state.lines),
            caret=state.caret,
            anchor=state.anchor,
            highlighted_code=highlighted_text(state),
        )

    @property
    def code(self) -> str:
        return "\n".join(self.lines)


class HistoryRecorder:
    """Keeps one entry for the initial state plus one per applied action."""

    def __init__(self, initial: EditorState) -> None:
        self._entries: List[HistoryEntry] = [HistoryEntry.capture(initial)]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    @property
    def latest(self) -> HistoryEntry:
        return self._entries[-1]

    def record(self, state: EditorState) -> HistoryEntry:
        entry = HistoryEntry.capture(state)
        self._entries.append(entry)
        return entry

    def entry(self, index: int) -> HistoryEntry:
        if index < 0 or index >= len(self._entries):
            raise HistoryIndexError(index, len(self._entries))
        return self._entries[index]

    def code_at(self, index: int) -> str:
        return self.entry(index).code

    def highlighted_code_at(self, index: int) -> str:
        return self.entry(index).highlighted_code

    def line_history(self) -> List[List[str]]:
        return [list(entry.lines) for entry in self._entries]


__all__ = ["HistoryEntry", "HistoryIndexError", "HistoryRecorder"]
