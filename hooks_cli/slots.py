"""Ordered list of hooked file paths with 1-based positional operations.

The list is always dense: positions run ``1..len`` with no gaps after any
mutation. Single-item adds reject duplicates; checks happen before any
mutation so a failed operation leaves the list untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator

from .errors import BoundaryError
from .errors import DuplicateError
from .errors import EmptyListError
from .errors import NotFoundError
from .errors import SlotIndexError


class SlotList:
    """In-memory hook list for a single context."""

    def __init__(self, paths: Iterable[str] | None = None):
        self._paths: list[str] = list(paths or [])

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SlotList):
            return self._paths == other._paths
        if isinstance(other, list):
            return self._paths == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"SlotList({self._paths!r})"

    @property
    def paths(self) -> list[str]:
        """Copy of the paths in position order."""
        return list(self._paths)

    def copy(self) -> SlotList:
        return SlotList(self._paths)

    def find(self, path: str) -> int | None:
        """Return the 1-based position of ``path``, or None if absent."""
        try:
            return self._paths.index(path) + 1
        except ValueError:
            return None

    def _require_new(self, path: str) -> None:
        existing = self.find(path)
        if existing is not None:
            raise DuplicateError(path, existing)

    def _require_position(self, position: int) -> None:
        if not 1 <= position <= len(self._paths):
            raise SlotIndexError(position)

    def _require_path(self, path: str) -> int:
        position = self.find(path)
        if position is None:
            raise NotFoundError(path)
        return position

    # ===== ADD =====

    def add_at_start(self, path: str) -> int:
        """Insert ``path`` at position 1, shifting the rest up.

        Returns:
            The position the path was inserted at (always 1)

        Raises:
            DuplicateError: If the path is already hooked
        """
        return self.insert_at(path, 1)

    def add_at_end(self, path: str) -> int:
        """Append ``path`` after the last position.

        Raises:
            DuplicateError: If the path is already hooked
        """
        return self.insert_at(path, len(self._paths) + 1)

    def insert_at(self, path: str, position: int) -> int:
        """Insert ``path`` at ``position``, shifting later entries up.

        Position is clamped to ``[1, len + 1]``; anything past the end appends.

        Args:
            path: Absolute file path
            position: Requested 1-based position

        Returns:
            The position actually used after clamping

        Raises:
            DuplicateError: If the path is already hooked
        """
        self._require_new(path)
        position = max(1, min(position, len(self._paths) + 1))
        self._paths.insert(position - 1, path)
        return position

    # ===== REMOVE =====

    def remove_at(self, position: int) -> str:
        """Remove the entry at ``position`` and close the gap.

        Returns:
            The removed path

        Raises:
            SlotIndexError: If position is outside ``[1, len]``
        """
        self._require_position(position)
        return self._paths.pop(position - 1)

    def remove_by_path(self, path: str) -> int:
        """Remove the first entry equal to ``path``.

        Returns:
            The position the path was removed from

        Raises:
            NotFoundError: If the path is not hooked
        """
        position = self._require_path(path)
        self.remove_at(position)
        return position

    # ===== MOVE =====

    def move_left(self, path: str) -> tuple[int, int]:
        """Swap ``path`` with its left neighbour.

        Returns:
            ``(old_position, new_position)``

        Raises:
            NotFoundError: If the path is not hooked
            BoundaryError: If the path is already first
        """
        position = self._require_path(path)
        if position == 1:
            raise BoundaryError(path, "first")
        self._swap(position, position - 1)
        return position, position - 1

    def move_right(self, path: str) -> tuple[int, int]:
        """Swap ``path`` with its right neighbour.

        Raises:
            NotFoundError: If the path is not hooked
            BoundaryError: If the path is already last
        """
        position = self._require_path(path)
        if position == len(self._paths):
            raise BoundaryError(path, "last")
        self._swap(position, position + 1)
        return position, position + 1

    def _swap(self, a: int, b: int) -> None:
        self._paths[a - 1], self._paths[b - 1] = self._paths[b - 1], self._paths[a - 1]

    # ===== NAVIGATE =====

    def jump(self, position: int) -> str:
        """Return the path at ``position``.

        Raises:
            SlotIndexError: If nothing is hooked at that position
        """
        self._require_position(position)
        return self._paths[position - 1]

    def next(self, current: str | None) -> str:
        """Return the entry after ``current``, wrapping to the first.

        Falls back to the first entry when ``current`` is not hooked.

        Raises:
            EmptyListError: If the list is empty
        """
        n = self._require_entries()
        i = self.find(current) if current else None
        if i is None:
            return self._paths[0]
        return self._paths[i % n]

    def prev(self, current: str | None) -> str:
        """Return the entry before ``current``, wrapping to the last.

        Falls back to the first entry when ``current`` is not hooked.

        Raises:
            EmptyListError: If the list is empty
        """
        n = self._require_entries()
        i = self.find(current) if current else None
        if i is None:
            return self._paths[0]
        return self._paths[(i - 2 + n) % n]

    def _require_entries(self) -> int:
        if not self._paths:
            raise EmptyListError()
        return len(self._paths)
