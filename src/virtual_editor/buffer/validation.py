"""Validation helpers for externally supplied caret positions."""

from __future__ import annotations

from typing import Optional, Sequence

from .state import Position


class BufferValidationError(RuntimeError):
    """Raised when a caller places the caret outside the buffer."""

    def __init__(self, message: str, *, position: Optional[Position] = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(lines: Sequence[str], position: Position) -> Position:
    if position.row < 0 or position.row >= len(lines):
        raise BufferValidationError("Row out of range", position=position)
    if position.column < 0 or position.column > len(lines[position.row]):
        raise BufferValidationError("Column out of range", position=position)
    return position


__all__ = ["BufferValidationError", "ensure_position"]
