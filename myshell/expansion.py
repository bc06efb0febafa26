import re

# Name may be empty: a bare "$" looks up "" and expands to nothing
_VAR_RX = re.compile(r"\$([A-Za-z0-9_]*)")
_WORD_SEP_RX = re.compile(r"[ \t]+")


def expand_variable(token, env):
    """
    Replace every $NAME in a token with its value ("" when unset).
    Whitespace inside values is kept as is.
    """
    return _VAR_RX.sub(lambda m: env.get(m.group(1)) or "", token)


def process_tokens(tokens, env):
    """
    Expand every token and re-split expansions that contain spaces/tabs.

    Quotes were already consumed by the tokenizer, so a quoted token whose
    expansion holds whitespace is split here as well.
    Returns: list of final arguments
    """
    result = []
    for token in tokens:
        expanded = expand_variable(token, env)
        if " " in expanded or "\t" in expanded:
            result.extend(word for word in _WORD_SEP_RX.split(expanded) if word)
        else:
            result.append(expanded)
    return result
