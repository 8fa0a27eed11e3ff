"""Quoting and splitting for PowerShell command lines."""

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
ESCAPE = "`"
WHITESPACE = (" ", "\t")


def quote(value: str) -> str:
    """
    Escape a value so that it keeps its literal meaning in PowerShell.

    The value is wrapped in single quotes, where nothing is expanded, and
    embedded single quotes are doubled.
    """
    return SINGLE_QUOTE + value.replace(SINGLE_QUOTE, SINGLE_QUOTE * 2) + SINGLE_QUOTE


def split(line: str) -> list[str]:
    """
    Split a line according to PowerShell quoting rules.

    Rules:
    - Spaces and tabs separate arguments outside quotes
    - Single quoted parts are verbatim; '' inside them is a literal '
    - Double quoted parts honour the backtick escape; "" inside them is a literal "
    - Outside quotes every other character is literal

    Args:
        line: The line to split

    Returns:
        List of parsed arguments
    """
    args = []
    arg_chars = []
    opened = False
    quote_char = None
    i = 0
    line_len = len(line)

    while i < line_len:
        c = line[i]

        if quote_char is not None:
            if c == ESCAPE and quote_char == DOUBLE_QUOTE and i + 1 < line_len:
                i += 1
                arg_chars.append(line[i])
            elif c == quote_char:
                if i + 1 < line_len and line[i + 1] == quote_char:
                    arg_chars.append(quote_char)
                    i += 1
                else:
                    quote_char = None
            else:
                arg_chars.append(c)
        elif c in (SINGLE_QUOTE, DOUBLE_QUOTE):
            quote_char = c
            opened = True
        elif c in WHITESPACE:
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
