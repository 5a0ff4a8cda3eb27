from .common import BackendError, ClipboardFault
from .process import DEVNULL, read_stdout, run_status, write_stdin

KLIPPER = ['qdbus', 'org.kde.klipper', '/klipper']


def _encode(text):
    return text.encode('utf-8')


# WSL: hand off to the Windows host's tools
def wsl_copy(text):
    write_stdin(['clip.exe'], _encode(text))


def wsl_paste():
    text = read_stdout(['powershell.exe', '-noprofile', '-command', 'Get-Clipboard'])
    # Get-Clipboard terminates its output with CRLF
    if text.endswith('\r\n'):
        text = text[:-2]
    return text


def wayland_copy(text):
    if text == '':
        if run_status(['wl-copy', '-p', '--clear']) != 0:
            raise BackendError("wl-copy was not successful")
        return
    write_stdin(['wl-copy', '-p'], _encode(text))


def wayland_paste():
    return read_stdout(['wl-paste', '-n', '-p'])


def xsel_copy(text):
    write_stdin(['xsel', '-b', '-i'], _encode(text))


def xsel_paste():
    return read_stdout(['xsel', '-b', '-o'])


def xclip_copy(text):
    write_stdin(['xclip', '-selection', 'c'], _encode(text))


def xclip_paste():
    # xclip complains on stderr when the selection is empty
    return read_stdout(['xclip', '-selection', 'c', '-o'], stderr=DEVNULL)


def klipper_copy(text):
    run_status(KLIPPER + ['setClipboardContents', text])


def klipper_paste():
    text = read_stdout(KLIPPER + ['getClipboardContents'])
    if not text.endswith('\n'):
        raise ClipboardFault(f"qdbus output lacks its trailing newline: {text!r}")
    return text[:-1]
