"""Annotated frame export consumed by the video renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from virtual_editor.actions import Action
from virtual_editor.buffer import Position
from virtual_editor.history import HistoryRecorder
from virtual_editor.runtime import telemetry


@dataclass(frozen=True, slots=True)
class SpeechCaption:
    speech_type: str
    speech_value: str

    def to_payload(self) -> Dict[str, str]:
        return {"speechType": self.speech_type, "speechValue": self.speech_value}


@dataclass(frozen=True, slots=True)
class Frame:
    """Editor state right after ``action`` was applied."""

    action: Action
    code: str
    caret: Position
    highlight_start: Optional[Position]
    highlighted_code: str
    speech_captions: Tuple[SpeechCaption, ...] = ()

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping the renderer reads."""

        return {
            "actionApplied": self.action.to_payload(),
            "code": self.code,
            "caretPosition": _position_payload(self.caret),
            "highlightStartPosition": (
                None
                if self.highlight_start is None
                else _position_payload(self.highlight_start)
            ),
            "highlightedCode": self.highlighted_code,
            "speechCaptions": [
                caption.to_payload() for caption in self.speech_captions
            ],
        }


def _position_payload(position: Position) -> Dict[str, int]:
    return {"row": position.row, "col": position.column}


def speech_captions_for(action: Action) -> Tuple[SpeechCaption, ...]:
    if not action.is_narration:
        return ()
    return (SpeechCaption(speech_type=action.name, speech_value=action.value),)


def export_frames(
    actions: Sequence[Action], recorder: HistoryRecorder
) -> List[Frame]:
    """Pair each applied action with the snapshot recorded after it.

    Entry 0 of ``recorder`` is the pre-action state and has no frame.
    """

    frames: List[Frame] = []
    with telemetry.span(
        "frames::export",
        component="frames",
        data={"actions": len(actions), "entries": len(recorder)},
    ):
        for index, action in enumerate(actions):
            entry = recorder.entry(index + 1)
            frames.append(
                Frame(
                    action=action,
                    code=entry.code,
                    caret=entry.caret,
                    highlight_start=entry.anchor,
                    highlighted_code=entry.highlighted_code,
                    speech_captions=speech_captions_for(action),
                )
            )
    return frames


def frames_to_payload(frames: Iterable[Frame]) -> List[Dict[str, Any]]:
    return [frame.to_payload() for frame in frames]


__all__ = [
    "Frame",
    "SpeechCaption",
    "export_frames",
    "frames_to_payload",
    "speech_captions_for",
]
