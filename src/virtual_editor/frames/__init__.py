"""Renderer-facing annotated frames."""

from .exporter import (
    Frame,
    SpeechCaption,
    export_frames,
    frames_to_payload,
    speech_captions_for,
)

__all__ = [
    "Frame",
    "SpeechCaption",
    "export_frames",
    "frames_to_payload",
    "speech_captions_for",
]
