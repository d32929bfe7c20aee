"""Caret, selection anchor, and the immutable editor state value."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (row, column) location; ordering follows document order."""

    row: int = 0
    column: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.column)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Snapshot of buffer lines, caret, and optional selection anchor.

    The selection, when present, spans from ``anchor`` to ``caret``.
    """

    lines: Tuple[str, ...] = ("",)
    caret: Position = Position()
    anchor: Optional[Position] = None

    def __post_init__(self) -> None:
        if not self.lines:
            object.__setattr__(self, "lines", ("",))

    @classmethod
    def from_text(cls, text: str) -> "EditorState":
        return cls(lines=tuple(text.split("\n")))

    @property
    def code(self) -> str:
        return "\n".join(self.lines)

    @property
    def has_selection(self) -> bool:
        return self.anchor is not None

    def move_caret(self, row: int, column: int) -> "EditorState":
        return replace(self, caret=Position(row, column))

    def clear_selection(self) -> "EditorState":
        if self.anchor is None:
            return self
        return replace(self, anchor=None)


__all__ = ["Position", "EditorState"]
