"""Caret movement actions, with and without selection extension."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence

from virtual_editor.buffer import EditorState, Position

from .models import Action

Step = Callable[[Sequence[str], Position], Position]


def _step_left(lines: Sequence[str], caret: Position) -> Position:
    if caret.column > 0:
        return Position(caret.row, caret.column - 1)
    if caret.row > 0:
        return Position(caret.row - 1, len(lines[caret.row - 1]))
    return caret


def _step_right(lines: Sequence[str], caret: Position) -> Position:
    if caret.column < len(lines[caret.row]):
        return Position(caret.row, caret.column + 1)
    if caret.row < len(lines) - 1:
        return Position(caret.row + 1, 0)
    return caret


def _walk(state: EditorState, step: Step, count: int) -> Position:
    caret = state.caret
    for _ in range(count):
        caret = step(state.lines, caret)
    return caret


def arrow_up(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    # Column is kept as-is even when the target row is shorter.
    row = max(0, state.caret.row - count)
    return replace(state, caret=Position(row, state.caret.column), anchor=None)


def arrow_down(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    row = min(len(state.lines) - 1, state.caret.row + count)
    return replace(state, caret=Position(row, state.caret.column), anchor=None)


def arrow_left(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    return replace(state, caret=_walk(state, _step_left, count), anchor=None)


def arrow_right(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    return replace(state, caret=_walk(state, _step_right, count), anchor=None)


def extend_left(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    anchor = state.caret if state.anchor is None else state.anchor
    return replace(state, caret=_walk(state, _step_left, count), anchor=anchor)


def extend_right(state: EditorState, action: Action, count: int) -> EditorState:
    del action
    anchor = state.caret if state.anchor is None else state.anchor
    return replace(state, caret=_walk(state, _step_right, count), anchor=anchor)


def line_start(state: EditorState, action: Action, count: int) -> EditorState:
    del action, count
    return replace(state, caret=Position(state.caret.row, 0), anchor=None)


def line_end(state: EditorState, action: Action, count: int) -> EditorState:
    del action, count
    row = state.caret.row
    return replace(state, caret=Position(row, len(state.lines[row])), anchor=None)


__all__ = [
    "arrow_up",
    "arrow_down",
    "arrow_left",
    "arrow_right",
    "extend_left",
    "extend_right",
    "line_start",
    "line_end",
]
