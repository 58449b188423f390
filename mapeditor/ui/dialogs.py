"""
Retro Tile Studio - File Dialogs

Cross-platform multi-file open dialog using plyer with tkinter fallback.
"""

from plyer import filechooser

from retrotile.logging_config import get_logger

logger = get_logger("editor.dialogs")


def _open_files_tkinter(title: str, filetypes: list[tuple[str, str]]) -> list[str]:
    """Tkinter fallback for the open files dialog."""
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        logger.warning("tkinter not available for file dialog")
        return []

    root = tk.Tk()
    root.withdraw()
    paths = filedialog.askopenfilenames(title=title, filetypes=filetypes)
    root.destroy()
    return list(paths)


def open_files_dialog(title: str, filetypes: list[tuple[str, str]]) -> list[str]:
    """
    Display an 'Open Files' dialog allowing several files to be selected.

    Args:
        title: Dialog window title
        filetypes: List of (description, pattern) tuples, e.g. [("Binary files", "*.bin")]

    Returns:
        Selected file paths in selection order, or an empty list if canceled
    """
    try:
        result = filechooser.open_file(
            title=title, filters=[list(ft) for ft in filetypes], multiple=True
        )
        return list(result) if result else []
    except (OSError, NotImplementedError):
        # plyer backend not available, fall back to tkinter
        return _open_files_tkinter(title, filetypes)
