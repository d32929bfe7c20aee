"""Pure transition function applying one action to an editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from virtual_editor.buffer import EditorState
from virtual_editor.runtime import telemetry

from .defaults import default_registry
from .models import Action, resolve_repeat_count
from .registry import ActionRegistry


@dataclass(frozen=True, slots=True)
class StepOutcome:
    """Result of ``apply_transition``."""

    state: EditorState
    count: int
    recognized: bool = True


def apply_transition(
    state: EditorState,
    action: Action,
    *,
    registry: Optional[ActionRegistry] = None,
) -> StepOutcome:
    """Return the state that results from applying ``action`` to ``state``.

    Unknown action names and repeatable actions whose count resolves to zero
    return ``state`` unchanged.
    """

    handlers = registry if registry is not None else default_registry()
    ref = handlers.lookup(action.name)
    if ref is None:
        telemetry.record_event("action.unrecognized", action=action, level="warning")
        return StepOutcome(state=state, count=0, recognized=False)

    count = resolve_repeat_count(action)
    if count == 0:
        telemetry.record_event("action.skipped", action=action, level="debug")
        return StepOutcome(state=state, count=0)

    return StepOutcome(state=ref(state, action, count), count=count)


__all__ = ["StepOutcome", "apply_transition"]
