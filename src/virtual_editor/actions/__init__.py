"""Action catalogue, handlers, and the state transition function."""

from .defaults import DEFAULT_ACTIONS, default_registry, load_default_actions
from .engine import StepOutcome, apply_transition
from .models import (
    NARRATION_KINDS,
    REPEATABLE_KINDS,
    Action,
    ActionKind,
    resolve_repeat_count,
)
from .registry import ActionRef, ActionRegistry, Transition
from .selection import delete_selection, highlighted_text, selection_range

__all__ = [
    "Action",
    "ActionKind",
    "ActionRef",
    "ActionRegistry",
    "DEFAULT_ACTIONS",
    "NARRATION_KINDS",
    "REPEATABLE_KINDS",
    "StepOutcome",
    "Transition",
    "apply_transition",
    "default_registry",
    "delete_selection",
    "highlighted_text",
    "load_default_actions",
    "resolve_repeat_count",
    "selection_range",
]
