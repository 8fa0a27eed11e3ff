"""Quoting and splitting for command lines handed to cmd.exe."""

BACKSLASH = "\\"
DOUBLE_QUOTE = '"'
DELIMITER = " "


def quote(value: str) -> str:
    """
    Escape a value so that it keeps its literal meaning on a cmd.exe command line.

    The value is always wrapped in double quotes. Each double quote becomes
    \\" and a backslash run right before a quote (including the closing one)
    is doubled.
    """
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


def split(line: str) -> list[str]:
    """
    Split a cmd.exe command line into arguments.

    Rules:
    - Spaces separate arguments outside quotes
    - A double quote turns quoting on, the next unescaped one turns it off
    - Inside quotes, 2n+1 backslashes before " give n backslashes and a literal "
    - Inside quotes, 2n backslashes before " give n backslashes and end the quotes
    - Any other backslash is literal
    - Quotes are removed from arguments

    Args:
        line: The line to split

    Returns:
        List of parsed arguments
    """
    args = []
    arg_chars = []
    opened = False
    in_quotes = False
    i = 0
    line_len = len(line)

    while i < line_len:
        c = line[i]

        if c == BACKSLASH and in_quotes:
            start = i
            while i < line_len and line[i] == BACKSLASH:
                i += 1
            count = i - start

            if i < line_len and line[i] == DOUBLE_QUOTE:
                arg_chars.append(BACKSLASH * (count // 2))
                if count % 2 == 1:
                    # Escaped quote
                    arg_chars.append(DOUBLE_QUOTE)
                    i += 1
            else:
                arg_chars.append(BACKSLASH * count)
            continue

        if c == DOUBLE_QUOTE:
            in_quotes = not in_quotes
            opened = True
        elif c == DELIMITER and not in_quotes:
            if arg_chars or opened:
                args.append("".join(arg_chars))
                arg_chars = []
                opened = False
        else:
            arg_chars.append(c)

        i += 1

    if arg_chars or opened:
        args.append("".join(arg_chars))

    return args
