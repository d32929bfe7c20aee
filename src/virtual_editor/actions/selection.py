"""Selection normalization, highlighting, and range deletion."""

from __future__ import annotations

from typing import Optional, Tuple

from virtual_editor.buffer import EditorState, LineBuffer, Position

SelectionRange = Tuple[Position, Position]


def selection_range(state: EditorState) -> Optional[SelectionRange]:
    """Return the anchor/caret pair sorted into document order."""

    if state.anchor is None:
        return None
    if state.anchor <= state.caret:
        return state.anchor, state.caret
    return state.caret, state.anchor


def highlighted_text(state: EditorState) -> str:
    selection = selection_range(state)
    if selection is None:
        return ""
    start, end = selection
    lines = state.lines
    if start.row == end.row:
        return lines[start.row][start.column : end.column]

    parts = [lines[start.row][start.column :]]
    parts.extend(lines[start.row + 1 : end.row])
    parts.append(lines[end.row][: end.column])
    return "\n".join(parts)


def delete_selection(buffer: LineBuffer, state: EditorState) -> Position:
    """Remove the selected span from ``buffer`` and return the collapsed caret.

    Without a selection the buffer is untouched and the caret is returned.
    """

    selection = selection_range(state)
    if selection is None:
        return state.caret
    start, end = selection
    head = buffer.get_line(start.row)[: start.column]
    tail = buffer.get_line(end.row)[end.column :]
    buffer.replace_line(start.row, head + tail)
    buffer.remove_lines(start.row + 1, end.row + 1)
    return Position(start.row, len(head))


__all__ = ["SelectionRange", "selection_range", "highlighted_text", "delete_selection"]
