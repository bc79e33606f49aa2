"""Context resolution: which hook list applies to the current invocation.

A context is the top-level directory of the enclosing git repository, or the
``global`` sentinel when there is none. The store only sees the resulting key
through the ``ContextResolver`` protocol.
"""

import logging
import subprocess
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

logger = logging.getLogger(__name__)

GLOBAL_CONTEXT = "global"


class ContextResolver(Protocol):
    """Supplies the storage key for the active context."""

    def resolve(self) -> str:
        """Return the context key.

        Returns:
            Repository identity, or ``GLOBAL_CONTEXT``
        """
        ...


class StaticContextResolver:
    """Resolver that always returns the same key."""

    def __init__(self, key: str = GLOBAL_CONTEXT):
        self.key = key

    def resolve(self) -> str:
        return self.key


class GitContextResolver:
    """Resolve the context from ``git rev-parse --show-toplevel``.

    Any failure (non-zero exit, git missing) falls back to the global context.
    """

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def resolve(self) -> str:
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            logger.warning(f"git unavailable, using global context: {e}")
            return GLOBAL_CONTEXT

        if result.returncode != 0:
            logger.debug("Not inside a git repository, using global context")
            return GLOBAL_CONTEXT

        toplevel = result.stdout.strip()
        return toplevel or GLOBAL_CONTEXT


def context_filename(key: str) -> str:
    """Map a context key to the name of its state file.

    Keys are percent-encoded with no safe characters, so separators cannot
    escape the data directory and distinct keys never share a file.
    """
    if not key or not key.strip():
        raise ValueError("context key cannot be empty")

    name = quote(key, safe="")
    if name in (".", ".."):
        raise ValueError(f"Invalid context key: {key}")
    return name
