import os
import sys

from myshell.expansion import expand_variable


def builtin_cd(args, env):
    """Change directory"""
    if not args or args[0] == "~":
        path = env.get("HOME")
        if path is None:
            path = "/"
    elif args[0].startswith("~"):
        home = env.get("HOME")
        if home is None:
            print("cd: HOME not set", file=sys.stderr)
            return 1
        path = home + args[0][1:]
    else:
        path = args[0]

    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"cd: {e}", file=sys.stderr)
        return 1


def builtin_echo(args, env):
    """Print arguments after variable expansion"""
    if not args:
        return 0
    print(" ".join(expand_variable(arg, env) for arg in args))
    return 0


def builtin_export(args, env):
    """Set NAME=VALUE for this session and its children"""
    if not args:
        print("export: missing argument", file=sys.stderr)
        return 1

    name, sep, value = args[0].partition("=")
    if not sep:
        print("export: invalid argument", file=sys.stderr)
        return 1

    try:
        env.set(name, value)
    except (ValueError, OSError) as e:
        print(f"export: {e}", file=sys.stderr)
        return 1
    return 0


BUILTINS = {
    'cd': builtin_cd,
    'echo': builtin_echo,
    'export': builtin_export,
}


def execute_builtin(tokens, env):
    """
    Execute built-in command if it matches.
    Takes the raw (unexpanded) tokens; only echo expands its arguments.
    Returns (executed: bool, exit_code: int)
    """
    if not tokens:
        return False, 0

    handler = BUILTINS.get(tokens[0])
    if handler is None:
        return False, 0
    return True, handler(tokens[1:], env)
