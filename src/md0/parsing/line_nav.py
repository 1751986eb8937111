"""Line navigation utilities for the md0 parser.

Provides mixin for line stream navigation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from md0.lines import Line, LineType

if TYPE_CHECKING:
    from collections.abc import Sequence


class LineNavigationMixin:
    """Mixin providing line stream navigation methods.

    Required Host Attributes:
        - _lines: Sequence[Line]
        - _lines_len: int (cached len(_lines))
        - _pos: int
        - _current: Line | None

    """

    _lines: Sequence[Line]
    _lines_len: int
    _pos: int
    _current: Line | None

    def _at_end(self) -> bool:
        """Check if at end of line stream."""
        return self._current is None or self._current.type == LineType.EOF

    def _advance(self) -> Line | None:
        """Advance to next line and return it."""
        self._pos += 1
        if self._pos < self._lines_len:
            self._current = self._lines[self._pos]
        else:
            self._current = None
        return self._current
