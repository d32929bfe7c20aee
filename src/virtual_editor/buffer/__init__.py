"""Line buffer, caret/selection state, and position validation."""

from .document import LineBuffer
from .state import EditorState, Position
from .validation import BufferValidationError, ensure_position

__all__ = [
    "LineBuffer",
    "EditorState",
    "Position",
    "BufferValidationError",
    "ensure_position",
]
