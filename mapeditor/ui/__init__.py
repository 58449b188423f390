"""
Retro Tile Studio - UI Module

Widgets and file dialogs for the editor.
"""

from .widgets import Button

__all__ = ["Button"]
