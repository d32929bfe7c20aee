"""Line-oriented text storage used by the action handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineBuffer:
    """Mutable ordered list of lines that always holds at least one line.

    Rows are addressed 0-based. Bounds are the caller's responsibility; an
    out-of-range row surfaces as a plain ``IndexError``.
    """

    _lines: List[str] = field(default_factory=lambda: [""])

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines.append("")

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(_lines=text.split("\n"))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_row(self) -> int:
        return len(self._lines) - 1

    def get_line(self, row: int) -> str:
        return self._lines[row]

    def line_length(self, row: int) -> int:
        return len(self._lines[row])

    def replace_line(self, row: int, text: str) -> None:
        self._lines[row] = text

    def insert_lines(self, row: int, lines: Iterable[str]) -> None:
        """Insert ``lines`` so the first of them lands at ``row``."""

        self._lines[row:row] = list(lines)

    def remove_lines(self, start: int, end: int) -> None:
        """Remove rows ``[start:end]``, keeping at least one empty line."""

        del self._lines[start:end]
        if not self._lines:
            self._lines.append("")


__all__ = ["LineBuffer"]
