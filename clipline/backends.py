import logging
import os
import platform
import subprocess
from typing import Callable, NamedTuple

from .common import PROC_VERSION, ProviderNotFound


class Board(NamedTuple):
    name: str
    copy: Callable[[str], None]
    paste: Callable[[], str]


class ClipboardBackend:
    """Abstract clipboard backend."""

    name = None

    def copy(self, text):
        raise NotImplementedError

    def paste(self):
        raise NotImplementedError

    def board(self):
        return Board(self.name, self.copy, self.paste)


class WindowsBackend(ClipboardBackend):
    name = 'windows'

    def copy(self, text):
        from .win import copy as _copy
        _copy(text)

    def paste(self):
        from .win import paste as _paste
        return _paste()


class MacOSBackend(ClipboardBackend):
    name = 'macos'

    def copy(self, text):
        from .macos import copy as _copy
        _copy(text)

    def paste(self):
        from .macos import paste as _paste
        return _paste()


class WSLBackend(ClipboardBackend):
    name = 'wsl'

    def copy(self, text):
        from .linux import wsl_copy
        wsl_copy(text)

    def paste(self):
        from .linux import wsl_paste
        return wsl_paste()


class WaylandBackend(ClipboardBackend):
    name = 'wayland'

    def copy(self, text):
        from .linux import wayland_copy
        wayland_copy(text)

    def paste(self):
        from .linux import wayland_paste
        return wayland_paste()


class XselBackend(ClipboardBackend):
    name = 'xsel'

    def copy(self, text):
        from .linux import xsel_copy
        xsel_copy(text)

    def paste(self):
        from .linux import xsel_paste
        return xsel_paste()


class XclipBackend(ClipboardBackend):
    name = 'xclip'

    def copy(self, text):
        from .linux import xclip_copy
        xclip_copy(text)

    def paste(self):
        from .linux import xclip_paste
        return xclip_paste()


class KlipperBackend(ClipboardBackend):
    name = 'klipper'

    def copy(self, text):
        from .linux import klipper_copy
        klipper_copy(text)

    def paste(self):
        from .linux import klipper_paste
        return klipper_paste()


BACKENDS = {
    backend.name: backend
    for backend in (
        WindowsBackend,
        MacOSBackend,
        WSLBackend,
        WaylandBackend,
        XselBackend,
        XclipBackend,
        KlipperBackend,
    )
}


def has_command(cmd):
    try:
        status = subprocess.run(['which', cmd],
                                stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL).returncode
    except OSError as e:
        logging.debug(f"Could not probe for {cmd}: {e}")
        return False
    return status == 0


def is_wsl(path=PROC_VERSION):
    try:
        with open(path, encoding='utf-8') as f:
            return 'microsoft' in f.read().lower()
    except (OSError, UnicodeDecodeError):
        return False


def get_backend(system=None, environ=None, proc_version=PROC_VERSION, has=has_command):
    """Pick the clipboard backend for this host.

    The first matching rule wins: native Windows, macOS, WSL, Wayland, xsel,
    xclip, then Klipper. Raises ProviderNotFound when nothing matches.
    """
    if system is None:
        system = platform.system()
    if environ is None:
        environ = os.environ

    if system == 'Windows':
        return WindowsBackend()
    if system == 'Darwin':
        return MacOSBackend()
    if is_wsl(proc_version):
        return WSLBackend()
    if 'WAYLAND_DISPLAY' in environ and has('wl-copy'):
        return WaylandBackend()
    if has('xsel'):
        return XselBackend()
    if has('xclip'):
        return XclipBackend()
    if has('klipper') and has('qdbus'):
        return KlipperBackend()
    raise ProviderNotFound()


def provide(**kwargs):
    backend = get_backend(**kwargs)
    logging.info(f"Using {backend.name} clipboard provider")
    return backend.board()
