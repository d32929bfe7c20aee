"""Actions that change buffer content."""

from __future__ import annotations

from functools import partial
from typing import Tuple

from virtual_editor.buffer import EditorState, LineBuffer, Position

from .models import Action
from .selection import delete_selection


def _open_buffer(state: EditorState) -> Tuple[LineBuffer, Position]:
    """Copy the state's lines and consume any active selection."""

    buffer = LineBuffer.from_lines(state.lines)
    caret = delete_selection(buffer, state)
    return buffer, caret


def _commit(buffer: LineBuffer, caret: Position) -> EditorState:
    return EditorState(lines=tuple(buffer.snapshot()), caret=caret, anchor=None)


def _insert(buffer: LineBuffer, caret: Position, text: str) -> Position:
    # Columns are not clamped after vertical moves; past the end, text is
    # appended while the caret keeps counting from the stale column.
    line = buffer.get_line(caret.row)
    buffer.replace_line(
        caret.row, line[: caret.column] + text + line[caret.column :]
    )
    return Position(caret.row, caret.column + len(text))


def type_text(state: EditorState, action: Action, count: int) -> EditorState:
    buffer, caret = _open_buffer(state)
    caret = _insert(buffer, caret, action.value * count)
    return _commit(buffer, caret)


def _type_literal(
    literal: str, state: EditorState, action: Action, count: int
) -> EditorState:
    del action
    buffer, caret = _open_buffer(state)
    caret = _insert(buffer, caret, literal * count)
    return _commit(buffer, caret)


type_space = partial(_type_literal, " ")
type_tab = partial(_type_literal, "\t")


def split_line(state: EditorState, action: Action, count: int) -> EditorState:
    """Break the line at the caret ``count`` times.

    With a selection, the span is removed first so the breaks land at its
    start and any trailing text ends up on the last new row.
    """

    del action
    buffer, caret = _open_buffer(state)
    for _ in range(count):
        line = buffer.get_line(caret.row)
        buffer.replace_line(caret.row, line[: caret.column])
        buffer.insert_lines(caret.row + 1, [line[caret.column :]])
        caret = Position(caret.row + 1, 0)
    return _commit(buffer, caret)


def backspace(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    buffer = LineBuffer.from_lines(state.lines)
    if state.has_selection:
        # A selection is removed as one unit whatever the count.
        return _commit(buffer, delete_selection(buffer, state))

    caret = state.caret
    for _ in range(count):
        if caret.column > 0:
            line = buffer.get_line(caret.row)
            buffer.replace_line(
                caret.row, line[: caret.column - 1] + line[caret.column :]
            )
            caret = Position(caret.row, caret.column - 1)
        elif caret.row > 0:
            previous = buffer.get_line(caret.row - 1)
            buffer.replace_line(caret.row - 1, previous + buffer.get_line(caret.row))
            buffer.remove_lines(caret.row, caret.row + 1)
            caret = Position(caret.row - 1, len(previous))
    return _commit(buffer, caret)


__all__ = ["type_text", "type_space", "type_tab", "split_line", "backspace"]
