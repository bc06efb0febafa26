import sys

from myshell.config import MAX_LINE


class LineReader:
    """
    Bounded line reader over a text stream.

    A read takes at most `limit` characters; anything past the limit comes
    back on the next read. When a read stops exactly at the limit, one
    character is looked ahead so a newline right there ends that line.
    """

    def __init__(self, stream=None, limit=MAX_LINE - 1):
        self.stream = sys.stdin if stream is None else stream
        self.limit = limit
        self._pending = ""

    def read_line(self):
        """Return the next line without its newline. Raises EOFError at end of input."""
        line = self._pending
        if len(line) < self.limit:
            line += self.stream.readline(self.limit - len(line))
        self._pending = ""

        if not line:
            raise EOFError
        if line.endswith("\n"):
            return line[:-1]
        if len(line) == self.limit:
            ahead = self.stream.readline(1)
            if ahead != "\n":
                self._pending = ahead
        return line


def parse_input(line):
    """
    Split a command line into words on spaces/tabs.
    Double quotes group words and are dropped; an unterminated quote
    runs to the end of the line.
    Returns: list of tokens
    """
    tokens = []
    current = []
    in_quotes = False

    for c in line:
        if c == '"':
            in_quotes = not in_quotes
        elif c in " \t" and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(c)

    if current:
        tokens.append("".join(current))
    return tokens


def split_background(tokens):
    """
    Strip a trailing "&" token.
    Returns: (args: list, background: bool)
    """
    if tokens and tokens[-1] == "&":
        return tokens[:-1], True
    return list(tokens), False
