import os
import signal
import sys

from myshell.config import EXIT_FAILURE

_CHLD = {signal.SIGCHLD}


def _exec_child(args, env):
    """Replace the forked child with the command. Never returns."""
    try:
        # exec keeps ignored signals and the mask; give the program defaults
        for name in ("SIGPIPE", "SIGXFSZ"):
            if hasattr(signal, name):
                signal.signal(getattr(signal, name), signal.SIG_DFL)
        os.execvpe(args[0], args, env)
    except FileNotFoundError:
        print(f"myshell: command not found: {args[0]}", file=sys.stderr)
    except PermissionError:
        print(f"myshell: permission denied: {args[0]}", file=sys.stderr)
    except (OSError, ValueError) as e:
        print(f"myshell: failed to execute '{args[0]}': {e}", file=sys.stderr)
    finally:
        try:
            sys.stderr.flush()
        except (OSError, ValueError):
            pass
        os._exit(EXIT_FAILURE)


def wait_foreground(pid):
    """
    Block until the given child terminates.
    Returns: exit code (negative signal number if killed), or None on error
    """
    while True:
        try:
            _, status = os.waitpid(pid, 0)
            break
        except KeyboardInterrupt:
            # Ctrl+C reaches the child through the terminal; keep waiting
            continue
        except ChildProcessError as e:
            print(f"waitpid: {e}", file=sys.stderr)
            return None

    if os.WIFSIGNALED(status):
        print(f"Child terminated abnormally by signal {os.WTERMSIG(status)}",
              file=sys.stderr)
    return os.waitstatus_to_exitcode(status)


def execute_command(args, background=False, env=None):
    """
    Fork and exec an external command.

    SIGCHLD stays blocked from before the fork until a foreground child has
    been awaited, so the reaper never collects it first. Background children
    are left to the reaper.
    Returns: exit code (foreground), pid (background), or None if nothing ran
    """
    if env is None:
        env = dict(os.environ)

    # Buffered output would otherwise be flushed twice
    sys.stdout.flush()
    sys.stderr.flush()

    old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, _CHLD)
    try:
        try:
            pid = os.fork()
        except OSError as e:
            print(f"fork: {e}", file=sys.stderr)
            return None

        if pid == 0:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
            _exec_child(args, env)

        if background:
            return pid
        return wait_foreground(pid)
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
