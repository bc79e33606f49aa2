"""CLI commands for hooks-cli."""

__all__ = [
    "menu",
    "navigate",
    "slots",
]
