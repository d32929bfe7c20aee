"""Handler table mapping action kinds to state transition functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from virtual_editor.buffer import EditorState
from virtual_editor.runtime.telemetry import span

from .models import Action, ActionKind

Transition = Callable[[EditorState, Action, int], EditorState]


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Transition function registered for one action kind."""

    kind: ActionKind
    handler: Transition
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ActionKind):
            raise TypeError("kind must be an ActionKind")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, state: EditorState, action: Action, count: int) -> EditorState:
        return self.handler(state, action, count)


class ActionRegistry:
    """Owns the kind -> handler table used by the transition function."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._handlers: Dict[ActionKind, ActionRef] = {}
        self._logger_name = logger_name

    def __contains__(self, kind: object) -> bool:
        return kind in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[ActionRef]:
        return iter(self._handlers.values())

    def register(self, ref: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "actions::register",
            logger_name=self._logger_name,
            component="actions",
            data={"kind": ref.kind.value},
        ):
            if not replace and ref.kind in self._handlers:
                raise ValueError(f"Action kind '{ref.kind.value}' already registered")
            self._handlers[ref.kind] = ref
            return ref

    def get(self, kind: ActionKind) -> ActionRef:
        try:
            return self._handlers[kind]
        except KeyError as exc:
            raise KeyError(f"Action kind '{kind}' is not registered") from exc

    def lookup(self, name: str) -> Optional[ActionRef]:
        """Resolve a raw action name; ``None`` when it has no handler."""

        kind = ActionKind.lookup(name)
        if kind is None:
            return None
        return self._handlers.get(kind)

    def missing_kinds(self) -> tuple[ActionKind, ...]:
        return tuple(kind for kind in ActionKind if kind not in self._handlers)


__all__ = ["ActionRef", "ActionRegistry", "Transition"]
