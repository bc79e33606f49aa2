"""
Hook list persistence for hooks-cli.

Manages one JSON array of file paths per context with atomic writes,
a context-keyed in-memory registry and per-context write serialization.
"""

import contextlib
import json
import logging
import tempfile
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .context import ContextResolver
from .context import GitContextResolver
from .context import context_filename
from .errors import StorageError
from .events import EventBus
from .events import HooksChanged
from .slots import SlotList

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SlotStore:
    """
    Owns the hook lists for every context touched in this process.

    Contract:
    - Inputs: context key (resolved via the injected ContextResolver when omitted)
    - Outputs: SlotList instances, or the result of a list operation
    - Side Effects: Filesystem writes to <base_dir>/<sanitized-context>, HooksChanged events
    - Errors: StorageError for corrupt/unwritable state, HooksError subclasses from list operations
    """

    def __init__(
        self,
        base_dir: Path | None = None,
        resolver: ContextResolver | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize with base directory for state files.

        Args:
            base_dir: Directory for state files. Defaults to ~/.hooks/data
            resolver: Context resolver. Defaults to GitContextResolver
            event_bus: Bus receiving HooksChanged after each save
        """
        if base_dir is None:
            base_dir = Path.home() / ".hooks" / "data"
        self.base_dir = base_dir
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create hook data directory {base_dir}: {e}") from e
        self.resolver = resolver or GitContextResolver()
        self.event_bus = event_bus or EventBus()

        self._lists: dict[str, SlotList] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def context(self) -> str:
        """Resolve the active context key."""
        return self.resolver.resolve()

    def path_for(self, context: str) -> Path:
        """Return the state file for a context key."""
        return self.base_dir / context_filename(context)

    def _lock_for(self, context: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(context)
            if lock is None:
                lock = self._locks[context] = threading.Lock()
            return lock

    # ===== LOAD / SAVE =====

    def load(self, context: str | None = None, *, reload: bool = False) -> SlotList:
        """Return the hook list for a context, reading it from disk on first access.

        A missing state file is initialized with an empty list and persisted.

        Args:
            context: Context key. Resolved when omitted
            reload: Discard the in-memory copy and read the file again

        Returns:
            The context's SlotList (shared with the registry)

        Raises:
            StorageError: If the state file exists but cannot be parsed
        """
        if context is None:
            context = self.context()

        if not reload and context in self._lists:
            return self._lists[context]

        state_file = self.path_for(context)
        if not state_file.exists():
            logger.debug(f"No state for context {context!r}, initializing empty list")
            slots = SlotList()
            self.save(context, slots)
            return slots

        slots = SlotList(self._read(state_file))
        self._lists[context] = slots
        logger.debug(f"Loaded {len(slots)} hooks for context {context!r}")
        return slots

    def _read(self, state_file: Path) -> list[str]:
        try:
            with open(state_file, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Corrupt hook state at {state_file}: {e}")
            raise StorageError(f"Cannot read hook state at {state_file}: {e}") from e

        # Older state files stored a {"1": path, "2": path} mapping
        if isinstance(data, dict):
            if not all(isinstance(k, str) and k.isdigit() for k in data):
                raise StorageError(f"Unexpected keys in hook state at {state_file}")
            data = [data[k] for k in sorted(data, key=int)]

        if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
            raise StorageError(f"Hook state at {state_file} is not a list of paths")
        return data

    def save(self, context: str, slots: SlotList) -> None:
        """Persist a hook list atomically and notify observers.

        Args:
            context: Context key
            slots: List to persist; becomes the registry's copy

        Raises:
            StorageError: If unable to write the state file
        """
        state_file = self.path_for(context)
        try:
            self._write_atomic(state_file, slots.paths)
        except OSError as e:
            raise StorageError(f"Failed to save hook state: {e}") from e

        self._lists[context] = slots
        logger.debug(f"Saved {len(slots)} hooks for context {context!r}")
        self.event_bus.publish(HooksChanged(context=context, count=len(slots)))

    def _write_atomic(self, state_file: Path, paths: list[str]) -> None:
        state_file.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first (atomic write pattern)
        with tempfile.NamedTemporaryFile(
            mode="w", dir=state_file.parent, prefix="hooks_", suffix=".tmp", delete=False, encoding="utf-8"
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            try:
                json.dump(paths, tmp_file, ensure_ascii=False)
                tmp_file.flush()

                temp_path.replace(state_file)

            except Exception as e:
                # Clean up temp file on failure
                with contextlib.suppress(Exception):
                    temp_path.unlink()
                raise OSError(f"Failed to write {state_file}: {e}") from e

    # ===== OPERATIONS =====

    def mutate(self, operation: Callable[[SlotList], T], context: str | None = None) -> T:
        """Apply ``operation`` to a copy of the list and persist it on success.

        If the operation raises, neither the registry nor the state file change.

        Args:
            operation: Callable mutating the given SlotList
            context: Context key. Resolved when omitted

        Returns:
            Whatever ``operation`` returned
        """
        if context is None:
            context = self.context()

        with self._lock_for(context):
            working = self.load(context).copy()
            result = operation(working)
            self.save(context, working)
            return result

    def add_at_start(self, path: str, context: str | None = None) -> int:
        return self.mutate(lambda s: s.add_at_start(path), context)

    def add_at_end(self, path: str, context: str | None = None) -> int:
        return self.mutate(lambda s: s.add_at_end(path), context)

    def insert_at(self, path: str, position: int, context: str | None = None) -> int:
        return self.mutate(lambda s: s.insert_at(path, position), context)

    def remove_at(self, position: int, context: str | None = None) -> str:
        return self.mutate(lambda s: s.remove_at(position), context)

    def remove_by_path(self, path: str, context: str | None = None) -> int:
        return self.mutate(lambda s: s.remove_by_path(path), context)

    def move_left(self, path: str, context: str | None = None) -> tuple[int, int]:
        return self.mutate(lambda s: s.move_left(path), context)

    def move_right(self, path: str, context: str | None = None) -> tuple[int, int]:
        return self.mutate(lambda s: s.move_right(path), context)

    def replace(self, paths: list[str], context: str | None = None) -> SlotList:
        """Replace the whole list, keeping the given order.

        Duplicates are kept as given; bulk edits are not deduplicated.
        """
        if context is None:
            context = self.context()

        with self._lock_for(context):
            slots = SlotList(paths)
            self.save(context, slots)
            return slots

    def jump(self, position: int, context: str | None = None) -> str:
        return self.load(context).jump(position)

    def next(self, current: str | None, context: str | None = None) -> str:
        return self.load(context).next(current)

    def prev(self, current: str | None, context: str | None = None) -> str:
        return self.load(context).prev(current)
