import os
import sys

from myshell.builtin import execute_builtin
from myshell.config import PROMPT_LABEL, START_DIR
from myshell.environment import Environment
from myshell.executor import execute_command
from myshell.expansion import process_tokens
from myshell.job_control import init_signal_handlers
from myshell.parser import LineReader, parse_input, split_background


def prompt():
    """Generate shell prompt"""
    try:
        cwd = os.getcwd()
    except OSError:
        return f"{PROMPT_LABEL}> "
    return f"{PROMPT_LABEL}:{cwd}> "


def setup_environment():
    """Start the session in START_DIR"""
    try:
        os.chdir(START_DIR)
    except OSError as e:
        print(f"chdir: {e}", file=sys.stderr)


def main_loop(env=None):
    """
    Read, tokenize and run one line at a time.
    Returns: exit status of the session
    """
    if env is None:
        env = Environment()
    reader = LineReader(sys.stdin)

    while True:
        sys.stdout.write(prompt())
        sys.stdout.flush()
        try:
            line = reader.read_line()
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            continue

        if not line:
            continue

        tokens = parse_input(line)
        if not tokens:
            continue

        # Arguments after exit are ignored
        if tokens[0] == "exit":
            return 0

        # Built-ins
        executed, _ = execute_builtin(tokens, env)
        if executed:
            continue

        # External
        args, background = split_background(process_tokens(tokens, env))
        if args:
            execute_command(args, background, env.snapshot())


def main():
    init_signal_handlers()
    setup_environment()
    try:
        status = main_loop()
    except MemoryError:
        print("allocation error", file=sys.stderr)
        sys.exit(1)
    sys.exit(status)
