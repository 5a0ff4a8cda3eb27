from .process import read_stdout, write_stdin


def copy(text):
    write_stdin(['pbcopy'], text.encode('utf-8'))


def paste():
    return read_stdout(['pbpaste'])
