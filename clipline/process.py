import errno
import logging
import subprocess

DEVNULL = subprocess.DEVNULL


def write_stdin(argv, data, stdout=None, stderr=None):
    """Feed ``data`` to the command's stdin and wait for it to exit.

    The exit status is ignored; spawn, write and wait failures raise, including
    a broken pipe when the command exits without reading its input.
    """
    logging.debug(f"Running {argv} (writing {len(data)} bytes)")
    with subprocess.Popen(argv, stdin=subprocess.PIPE, stdout=stdout, stderr=stderr) as process:
        process.stdin.write(data)
        process.stdin.close()
        process.wait()


def read_stdout(argv, stderr=None):
    """Run the command and return everything it wrote to stdout as text."""
    logging.debug(f"Running {argv} (reading stdout)")
    with subprocess.Popen(argv, stdout=subprocess.PIPE, stderr=stderr) as process:
        output, _ = process.communicate()
    try:
        return output.decode('utf-8')
    except UnicodeDecodeError as e:
        raise OSError(errno.EILSEQ, f"{argv[0]} produced non-UTF-8 output") from e


def run_status(argv, stdout=None, stderr=None):
    logging.debug(f"Running {argv}")
    return subprocess.run(argv, stdout=stdout, stderr=stderr).returncode
