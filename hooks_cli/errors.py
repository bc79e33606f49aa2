"""Error taxonomy for hook list operations.

Every operation either succeeds completely or raises one of these without
touching in-memory or persisted state. The command layer catches
``HooksError`` and renders it for the user.
"""


class HooksError(Exception):
    """Base class for all hook list errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateError(HooksError):
    """Raised when adding a path that is already hooked."""

    def __init__(self, path: str, position: int):
        self.path = path
        self.position = position
        super().__init__(f"File already exists at [{position}]")


class SlotIndexError(HooksError, IndexError):
    """Raised when a position falls outside the current list."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"No hook at [{position}]")


class NotFoundError(HooksError):
    """Raised when a path is expected in the list but is not there."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} is not a hook")


class BoundaryError(HooksError):
    """Raised when moving past the first or last position."""

    def __init__(self, path: str, edge: str):
        self.path = path
        self.edge = edge
        super().__init__(f"Already at {edge} position")


class EmptyListError(HooksError):
    """Raised when navigating an empty list."""

    def __init__(self):
        super().__init__("No hooks defined")


class StorageError(HooksError):
    """Raised when persisted state cannot be read or written."""


class ValidationError(HooksError):
    """Raised when bulk-edited lines fail validation.

    Attributes:
        lines: 1-based line numbers that failed
    """

    def __init__(self, lines: list[int]):
        self.lines = lines
        joined = ", ".join(str(n) for n in lines)
        super().__init__(
            f"Invalid lines: {joined}. Ensure syntax is correct ([<key>] = <valid fp>) and that the file exists"
        )
