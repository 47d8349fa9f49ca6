"""Command implementations exposed through :mod:`faturas.cli`."""

from . import menu

__all__ = ["menu"]
