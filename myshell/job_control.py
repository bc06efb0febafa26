import os
import signal

from myshell.config import LOG_FILE, LOG_MESSAGE


def _log_reaped():
    """Append one line to the log with raw, unbuffered writes."""
    try:
        fd = os.open(LOG_FILE, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o644)
    except OSError:
        return
    try:
        os.write(fd, LOG_MESSAGE)
    except OSError:
        pass
    finally:
        os.close(fd)


def handle_sigchld(signum, frame):
    """
    Reap every terminated child without blocking and log each one.

    Runs at an arbitrary point of the main loop, so it does no buffered
    I/O and never lets an exception escape into the interrupted code.
    """
    while True:
        try:
            pid, _ = os.waitpid(-1, os.WNOHANG)
        except ChildProcessError:
            break
        if pid == 0:
            break
        _log_reaped()


def init_signal_handlers():
    """Install the SIGCHLD reaper"""
    signal.signal(signal.SIGCHLD, handle_sigchld)
