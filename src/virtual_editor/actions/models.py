"""Action records and the catalogue of action kinds the engine understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class ActionKind(str, Enum):
    """Action names as they appear in scripted sequences."""

    TYPE_EDITOR = "type-editor"
    ENTER = "enter"
    ARROW_UP = "arrow-up"
    ARROW_DOWN = "arrow-down"
    ARROW_LEFT = "arrow-left"
    ARROW_RIGHT = "arrow-right"
    SHIFT_ARROW_LEFT = "shift+arrow-left"
    SHIFT_ARROW_RIGHT = "shift+arrow-right"
    BACKSPACE = "backspace"
    SPACE = "space"
    TAB = "tab"
    COMMAND_LEFT = "command-left"
    COMMAND_RIGHT = "command-right"
    SPEAK_BEFORE = "speak-before"
    SPEAK_AFTER = "speak-after"
    SPEAK_DURING = "speak-during"

    @classmethod
    def lookup(cls, name: str) -> Optional["ActionKind"]:
        try:
            return cls(name)
        except ValueError:
            return None


NARRATION_KINDS = frozenset(
    {ActionKind.SPEAK_BEFORE, ActionKind.SPEAK_AFTER, ActionKind.SPEAK_DURING}
)

# Kinds whose value is a repeat count rather than a text payload.
REPEATABLE_KINDS = frozenset(
    {
        ActionKind.ENTER,
        ActionKind.ARROW_UP,
        ActionKind.ARROW_DOWN,
        ActionKind.ARROW_LEFT,
        ActionKind.ARROW_RIGHT,
        ActionKind.SHIFT_ARROW_LEFT,
        ActionKind.SHIFT_ARROW_RIGHT,
        ActionKind.BACKSPACE,
        ActionKind.SPACE,
        ActionKind.TAB,
        ActionKind.COMMAND_LEFT,
        ActionKind.COMMAND_RIGHT,
    }
)


@dataclass(frozen=True, slots=True)
class Action:
    """One scripted instruction: a kind name plus its value payload.

    The name is kept as given so that unknown kinds survive into the
    action log and the exported frames.
    """

    name: str
    value: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "Action":
        return cls(name=str(payload["name"]), value=str(payload.get("value", "")))

    @property
    def kind(self) -> Optional[ActionKind]:
        return ActionKind.lookup(self.name)

    @property
    def is_repeatable(self) -> bool:
        return self.kind in REPEATABLE_KINDS

    @property
    def is_narration(self) -> bool:
        return self.kind in NARRATION_KINDS

    def to_payload(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


def resolve_repeat_count(action: Action) -> int:
    """Return how many times ``action`` should take effect.

    Non-repeatable kinds always count once. A repeatable kind whose value is
    not a base-10 integer, or is negative, resolves to zero.
    """

    if not action.is_repeatable:
        return 1
    try:
        count = int(str(action.value).strip(), 10)
    except ValueError:
        return 0
    return max(count, 0)


__all__ = [
    "Action",
    "ActionKind",
    "NARRATION_KINDS",
    "REPEATABLE_KINDS",
    "resolve_repeat_count",
]
