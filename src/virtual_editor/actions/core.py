"""Actions that leave the editor state untouched."""

from __future__ import annotations

from virtual_editor.buffer import EditorState

from .models import Action


def narration_marker(state: EditorState, action: Action, count: int) -> EditorState:
    # Narration only surfaces as a speech caption on the exported frame.
    del action, count
    return state


__all__ = ["narration_marker"]
