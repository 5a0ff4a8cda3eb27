import contextlib
import logging
import time

import pywintypes
import win32clipboard as wc

OPEN_ATTEMPTS = 3
OPEN_DELAY = 0.05


def _as_oserror(e):
    return OSError(None, f"{e.funcname}: {e.strerror}", None, e.winerror)


@contextlib.contextmanager
def _opened():
    # another process may hold the clipboard for a moment
    for attempt in range(OPEN_ATTEMPTS):
        try:
            wc.OpenClipboard()
            break
        except pywintypes.error as e:
            if attempt == OPEN_ATTEMPTS - 1:
                raise _as_oserror(e) from e
            logging.debug(f"OpenClipboard failed ({e.strerror}), retrying")
            time.sleep(OPEN_DELAY)
    try:
        yield
    except pywintypes.error as e:
        raise _as_oserror(e) from e
    finally:
        wc.CloseClipboard()


def copy(text):
    with _opened():
        wc.EmptyClipboard()
        wc.SetClipboardText(text, wc.CF_UNICODETEXT)


def paste():
    with _opened():
        if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
            return ""
        return wc.GetClipboardData(wc.CF_UNICODETEXT)
