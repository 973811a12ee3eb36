"""marimo display helpers (requires marimo)."""

from hexwall.ui.marimo.wrap_wall import wrap_wall

__all__ = ["wrap_wall"]
