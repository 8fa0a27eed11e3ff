"""Command-line splitting and quoting following the VC++ 2008 C runtime rules."""

from typing import Iterable

WHITESPACE = (" ", "\t", "\r", "\n")
NULL = "\0"
BACKSLASH = "\\"
DOUBLE_QUOTE = '"'


def is_delimiter(c: str) -> bool:
    """Check if a character ends an unquoted argument."""
    return c in WHITESPACE or c == NULL


def split(line: str) -> list[str]:
    """
    Split a command line into arguments the way the C runtime builds argv.

    Rules:
    - Whitespace (space, tab, CR, LF) or null separates arguments
    - A double quoted part can be anywhere within an argument
    - 2n backslashes followed by " produce n backslashes and start/end a quoted part
    - 2n+1 backslashes followed by " produce n backslashes and a literal "
    - n backslashes not followed by " produce n backslashes
    - Inside a quoted part, "" produces a literal " and the quoted part continues
    - An unterminated quoted part is closed at the end of the line

    Args:
        line: The command line to split

    Returns:
        List of arguments, in the order they appear
    """
    args = []
    arg_chars = []
    # Set once a quote has been seen, so "" yields an empty argument
    opened = False
    in_quote = False
    backslashes = 0
    i = 0
    line_len = len(line)

    while i < line_len:
        c = line[i]
        i += 1

        if c == BACKSLASH:
            backslashes += 1
            continue

        if c == DOUBLE_QUOTE:
            if backslashes >= 2:
                arg_chars.append(BACKSLASH * (backslashes // 2))

            if backslashes % 2 == 1:
                # Escaped quote
                arg_chars.append(DOUBLE_QUOTE)
            elif in_quote and i < line_len and line[i] == DOUBLE_QUOTE:
                # "" inside a quoted part
                arg_chars.append(DOUBLE_QUOTE)
                i += 1
            else:
                in_quote = not in_quote
                opened = True

            backslashes = 0
            continue

        if backslashes:
            arg_chars.append(BACKSLASH * backslashes)
            backslashes = 0

        if not in_quote and is_delimiter(c):
            if arg_chars or opened:
                args.append("".join(arg_chars))
                arg_chars = []
                opened = False
        else:
            arg_chars.append(c)

    # Trailing backslashes are never followed by a quote
    if backslashes:
        arg_chars.append(BACKSLASH * backslashes)

    if arg_chars or opened:
        args.append("".join(arg_chars))

    return args


def needs_quoting(value: str) -> bool:
    """Check if a value would not survive split() as a bare word."""
    if not value:
        return True
    return any(is_delimiter(c) or c == DOUBLE_QUOTE for c in value)


def quote(value: str) -> str:
    """
    Quote a single value so that split() gives it back unchanged.

    Values without whitespace, null or double quotes are returned as is.
    Anything else is wrapped in double quotes; backslash runs in front of a
    quote (including the closing one) are doubled and quotes are escaped.

    Args:
        value: The literal argument

    Returns:
        The quoted form of the argument
    """
    if not needs_quoting(value):
        return value

    quoted = [DOUBLE_QUOTE]
    backslashes = 0

    for c in value:
        if c == BACKSLASH:
            backslashes += 1
            continue

        if c == DOUBLE_QUOTE:
            quoted.append(BACKSLASH * (backslashes * 2 + 1))
        elif backslashes:
            quoted.append(BACKSLASH * backslashes)

        quoted.append(c)
        backslashes = 0

    quoted.append(BACKSLASH * (backslashes * 2))
    quoted.append(DOUBLE_QUOTE)
    return "".join(quoted)


def join(args: Iterable[str]) -> str:
    """Quote each argument and join them into a single command line."""
    return " ".join(quote(arg) for arg in args)
