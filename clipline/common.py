import logging
import threading

PROC_VERSION = '/proc/version'


class ProviderNotFound(OSError):
    """No clipboard backend is usable on this host."""

    def __init__(self, message="no clipboard provider available"):
        super().__init__(message)


class BackendError(OSError):
    """A clipboard tool ran but reported failure through its exit status."""


class ClipboardFault(RuntimeError):
    """The clipboard environment is broken in a way callers cannot recover from."""


class Selection:
    """Write-once slot holding the selected board or the detection error."""

    def __init__(self):
        self._lock = threading.Lock()
        self._filled = False
        self._board = None
        self._error = None

    @property
    def filled(self):
        return self._filled

    def get(self, factory):
        if not self._filled:
            with self._lock:
                if not self._filled:
                    try:
                        self._board = factory()
                    except OSError as e:
                        logging.warning(f"Clipboard detection failed: {e}")
                        self._error = e
                    self._filled = True
        if self._error is not None:
            # same object every time, without piling up callers' frames or context
            raise self._error.with_traceback(None) from None
        return self._board
