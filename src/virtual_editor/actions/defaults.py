"""Built-in handlers covering every action kind."""

from __future__ import annotations

from typing import Iterable, Optional

from . import core, editing, movement
from .models import ActionKind
from .registry import ActionRef, ActionRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(ActionKind.TYPE_EDITOR, editing.type_text, "Type text at the caret"),
    ActionRef(ActionKind.ENTER, editing.split_line, "Break the line at the caret"),
    ActionRef(ActionKind.ARROW_UP, movement.arrow_up, "Move caret up"),
    ActionRef(ActionKind.ARROW_DOWN, movement.arrow_down, "Move caret down"),
    ActionRef(ActionKind.ARROW_LEFT, movement.arrow_left, "Move caret left"),
    ActionRef(ActionKind.ARROW_RIGHT, movement.arrow_right, "Move caret right"),
    ActionRef(
        ActionKind.SHIFT_ARROW_LEFT, movement.extend_left, "Extend selection left"
    ),
    ActionRef(
        ActionKind.SHIFT_ARROW_RIGHT, movement.extend_right, "Extend selection right"
    ),
    ActionRef(ActionKind.BACKSPACE, editing.backspace, "Delete before the caret"),
    ActionRef(ActionKind.SPACE, editing.type_space, "Type spaces"),
    ActionRef(ActionKind.TAB, editing.type_tab, "Type tabs"),
    ActionRef(ActionKind.COMMAND_LEFT, movement.line_start, "Jump to line start"),
    ActionRef(ActionKind.COMMAND_RIGHT, movement.line_end, "Jump to line end"),
    ActionRef(ActionKind.SPEAK_BEFORE, core.narration_marker, "Narration"),
    ActionRef(ActionKind.SPEAK_AFTER, core.narration_marker, "Narration"),
    ActionRef(ActionKind.SPEAK_DURING, core.narration_marker, "Narration"),
)

_DEFAULT_REGISTRY: Optional[ActionRegistry] = None


def load_default_actions(
    registry: ActionRegistry, *, actions: Iterable[ActionRef] = DEFAULT_ACTIONS
) -> ActionRegistry:
    """Register ``actions`` and require that every kind ends up handled."""

    for ref in actions:
        registry.register(ref, replace=True)
    missing = registry.missing_kinds()
    if missing:
        names = ", ".join(kind.value for kind in missing)
        raise RuntimeError(f"No handler registered for: {names}")
    return registry


def default_registry() -> ActionRegistry:
    """Return the shared registry seeded with ``DEFAULT_ACTIONS``."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = load_default_actions(
            ActionRegistry(logger_name="virtual_editor.actions")
        )
    return _DEFAULT_REGISTRY


__all__ = ["DEFAULT_ACTIONS", "default_registry", "load_default_actions"]
