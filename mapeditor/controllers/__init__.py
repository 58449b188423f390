"""
Retro Tile Studio - Controllers Module

Application state management and event handling.
"""

from .editor_state import EditorState
from .event_handler import EventHandler
from .view_state import ScrollPane, ViewState

__all__ = ["EditorState", "EventHandler", "ScrollPane", "ViewState"]
