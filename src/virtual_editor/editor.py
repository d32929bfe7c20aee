"""Virtual editor that replays scripted actions and records every step."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Union

from virtual_editor.actions import (
    Action,
    ActionRegistry,
    apply_transition,
    default_registry,
    highlighted_text,
)
from virtual_editor.buffer import EditorState, Position, ensure_position
from virtual_editor.frames import Frame, export_frames
from virtual_editor.history import HistoryEntry, HistoryRecorder
from virtual_editor.runtime import telemetry

ActionInput = Union[Action, Mapping[str, object]]

LOGGER_NAME = "virtual_editor.editor"


def _coerce_action(action: ActionInput) -> Action:
    if isinstance(action, Action):
        return action
    return Action.from_payload(action)


class VirtualEditor:
    """Applies actions in order and keeps a replayable history.

    History index 0 is the state before any action; index ``k`` is the
    state right after the ``k``-th applied action.
    """

    def __init__(
        self,
        actions: Optional[Iterable[ActionInput]] = None,
        *,
        verbose: bool = False,
        initial_code: str = "",
        registry: Optional[ActionRegistry] = None,
    ) -> None:
        self.verbose = verbose
        self._registry = registry if registry is not None else default_registry()
        self._state = EditorState.from_text(initial_code)
        self._actions: List[Action] = []
        self._history = HistoryRecorder(self._state)
        if actions:
            self.apply_actions(actions)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def history(self) -> HistoryRecorder:
        return self._history

    def apply_actions(self, actions: Iterable[ActionInput]) -> str:
        for action in actions:
            self.apply_action(action)
        return self.get_current_code()

    def apply_action(self, action: ActionInput) -> str:
        """Apply one action and return the resulting code.

        The code can equal the previous step's when the action does not edit.
        """

        action = _coerce_action(action)
        step = len(self._actions)
        with telemetry.span(
            "editor::apply",
            component="editor",
            action=action,
            step=step,
            logger_name=LOGGER_NAME,
        ):
            outcome = apply_transition(self._state, action, registry=self._registry)

        self._state = outcome.state
        self._actions.append(action)
        self._history.record(self._state)

        if self.verbose:
            telemetry.record_event(
                "action.applied",
                action=action,
                step=step,
                data={"lines": list(self._state.lines)},
                logger_name=LOGGER_NAME,
            )
        return self._state.code

    def get_current_code(self) -> str:
        return self._state.code

    get_current_command = get_current_code

    def get_code_lines(self) -> List[str]:
        return list(self._state.lines)

    def get_current_caret_position(self) -> Position:
        return self._state.caret

    def set_current_caret_position(self, row: int, column: int) -> None:
        """Place the caret directly, dropping any selection."""

        position = ensure_position(self._state.lines, Position(row, column))
        self._state = self._state.clear_selection().move_caret(
            position.row, position.column
        )

    def get_current_highlighted_code(self) -> str:
        return highlighted_text(self._state)

    def get_actions_applied(self) -> List[Action]:
        return list(self._actions)

    def get_code_at_action_index(self, action_index: int) -> str:
        return self._history.code_at(action_index)

    get_command_at_action_index = get_code_at_action_index

    def get_highlighted_code_at_action_index(self, action_index: int) -> str:
        return self._history.highlighted_code_at(action_index)

    def get_code_history(self) -> List[List[str]]:
        return self._history.line_history()

    get_command_history = get_code_history

    def get_code_after_each_step(self) -> List[str]:
        return [entry.code for entry in self._history]

    def get_editor_state_after_each_step(self) -> List[HistoryEntry]:
        return list(self._history)

    def get_data_for_annotated_frames(self) -> List[Frame]:
        return export_frames(self._actions, self._history)


__all__ = ["VirtualEditor", "ActionInput"]
