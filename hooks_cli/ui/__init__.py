"""Terminal rendering for hook lists and errors."""

from .error_display import display_error
from .error_display import display_menu_errors
from .listing import render_hooks_table

__all__ = ["display_error", "display_menu_errors", "render_hooks_table"]
