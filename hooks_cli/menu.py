"""Bulk editing of a hook list as plain text lines.

Each entry renders as ``[<position>] = <path>``. After the user edits the
lines, ``parse`` validates every line and ``commit`` replaces the list in line
order. The bracketed number is informational only: line order decides the new
positions. Edits are all-or-nothing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from .errors import ValidationError
from .slots import SlotList
from .store import SlotStore

logger = logging.getLogger(__name__)

SEPARATOR = "="


def render(slots: Iterable[str]) -> list[str]:
    """Format a hook list as one ``[n] = path`` line per entry."""
    return [f"[{i}] {SEPARATOR} {path}" for i, path in enumerate(slots, start=1)]


def is_readable_file(path: str) -> bool:
    """True if ``path`` is an existing file the current user can read."""
    return os.path.isfile(path) and os.access(path, os.R_OK)


@dataclass
class MenuResult:
    """Outcome of parsing edited menu lines.

    Attributes:
        paths: Paths in line order (only meaningful when ``ok``)
        error_lines: 1-based numbers of lines that failed validation
    """

    paths: list[str] = field(default_factory=list)
    error_lines: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.error_lines


def parse_line(line: str) -> str | None:
    """Return the path portion of a menu line, or None when there is no separator."""
    head, sep, tail = line.partition(SEPARATOR)
    if not sep:
        return None
    return os.path.expanduser(tail.strip())


def parse(lines: Iterable[str], exists: Callable[[str], bool] = is_readable_file) -> MenuResult:
    """Validate edited menu lines.

    A line is invalid if it has no ``=`` or its path is not a readable file.
    Duplicate paths across lines are accepted.

    Args:
        lines: Edited lines, top to bottom
        exists: Check applied to each path

    Returns:
        MenuResult with the parsed paths and any failing line numbers
    """
    result = MenuResult()
    for number, line in enumerate(lines, start=1):
        path = parse_line(line)
        if path is None or not path or not exists(path):
            result.error_lines.append(number)
            continue
        result.paths.append(path)
    return result


def split_text(text: str) -> list[str]:
    """Split editor text into menu lines, ignoring blank trailing lines."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def commit(
    store: SlotStore,
    lines: Iterable[str],
    context: str | None = None,
    exists: Callable[[str], bool] = is_readable_file,
) -> SlotList:
    """Validate edited lines and, if all pass, replace the hook list.

    Raises:
        ValidationError: If any line fails; the stored list is left untouched
    """
    result = parse(lines, exists)
    if not result.ok:
        logger.debug(f"Menu edit rejected, invalid lines: {result.error_lines}")
        raise ValidationError(result.error_lines)
    return store.replace(result.paths, context)
