"""Cross-platform plain-text clipboard access.

    import clipline
    clipline.copy("wow such clipboard")
    assert clipline.paste() == "wow such clipboard"

The backend is detected on first use and kept for the life of the process.
"""
import logging

from .backends import provide
from .common import BackendError, ClipboardFault, ProviderNotFound, Selection

_selection = Selection()


def _board():
    return _selection.get(provide)


def copy_text(text):
    """Put ``text`` on the clipboard, raising OSError on failure."""
    _board().copy(text)


def paste_text():
    """Return the clipboard contents, raising OSError on failure."""
    return _board().paste()


def provider_name():
    return _board().name


def copy(value):
    """Put ``str(value)`` on the clipboard; any failure is a ClipboardFault."""
    try:
        copy_text(f"{value}")
    except OSError as e:
        logging.exception("Clipboard copy failed")
        raise ClipboardFault(f"clipboard copy failed: {e}") from e


def paste():
    try:
        return paste_text()
    except OSError as e:
        logging.exception("Clipboard paste failed")
        raise ClipboardFault(f"clipboard paste failed: {e}") from e


from .manager import ClipboardManager

__all__ = [
    'BackendError',
    'ClipboardFault',
    'ClipboardManager',
    'ProviderNotFound',
    'copy',
    'copy_text',
    'paste',
    'paste_text',
    'provider_name',
]
