import contextlib
import errno
import logging
import os
import signal
import sys
import typing

import click

log = logging.getLogger(__name__)

# Statuses a shell reports when a command can't be found or can't be run.
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class GPGEncryptException(click.ClickException):
    pass


class GPGNotFound(GPGEncryptException):
    exit_code = COMMAND_NOT_FOUND


class GPGNotExecutable(GPGEncryptException):
    exit_code = COMMAND_NOT_EXECUTABLE


def start_error(executable: str, error: OSError) -> GPGEncryptException:
    """Pick the exception for an executable that failed to start."""
    message = f"Could not run {executable}: {error.strerror}"
    if error.errno == errno.ENOENT:
        return GPGNotFound(message)
    return GPGNotExecutable(message)


@contextlib.contextmanager
def ignore_interrupts() -> typing.Iterator[None]:
    """
    Ignore SIGINT in this process until the block exits.

    The child shares the terminal's process group, so it receives Ctrl-C
    itself and decides how to exit.
    """
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)


def controlling_tty(stream: typing.Optional[typing.TextIO] = None) -> typing.Optional[str]:
    """Find the name of the terminal attached to a stream, if there is one."""
    stream = stream if stream is not None else sys.stdin
    try:
        if not stream.isatty():
            return None
        return os.ttyname(stream.fileno())
    except (AttributeError, ValueError, OSError) as error:
        log.debug(f"Could not find a terminal for {stream!r}: {error}")
        return None


def exit_status(returncode: int) -> int:
    """
    Convert a subprocess return code into a process exit status.

    Children killed by a signal have a negative return code, which a shell
    would report as 128 plus the signal number.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
