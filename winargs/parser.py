"""Command-line tokenizer matching CommandLineToArgvW, with executable path support."""

from enum import Enum
from typing import Iterable, Optional

from . import vc2008
from .vc2008 import BACKSLASH, DOUBLE_QUOTE, is_delimiter

NEWLINE = "\n"


# Custom exceptions
class ParseError(Exception):
    """Base exception for command-line parse failures."""

    message = "Command line could not be parsed"

    def __init__(self, position: Optional[int] = None):
        self.position = position
        if position is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message} at position {position}")


class ArgNotEmptyInInitialState(ParseError):
    """Raised when an argument is still pending while waiting for a new one."""

    message = "Argument not empty in initial state"


class CommandNameBackslash(ParseError):
    """Raised when a backslash escape is reached while parsing the command name."""

    message = "Encountered special backslash during command name"


class UnescapedNewline(ParseError):
    """Raised when a newline is reached while waiting for a new argument."""

    message = "Reached unescaped newline"


class ParseMode(Enum):
    """What the command line is expected to start with."""

    ARGUMENTS_ONLY = "arguments"
    FULL_LINE = "full"


class _State(Enum):
    INITIAL = 0
    UNQUOTED = 1
    QUOTED = 2


def _is_special(c: str) -> bool:
    return is_delimiter(c) or c == BACKSLASH or c == DOUBLE_QUOTE


def _is_special_in_command_name(c: str) -> bool:
    # Backslashes are path separators in the executable name, never escapes
    return is_delimiter(c) or c == DOUBLE_QUOTE


def _parse_backslashes(line: str, i: int, token: list[str]) -> int:
    """
    Consume a run of backslashes starting at i, plus an escaped quote after it.

    Returns the index of the next character to process. When an even run is
    followed by a quote, the quote is left for the caller to interpret.
    """
    line_len = len(line)
    start = i
    while i < line_len and line[i] == BACKSLASH:
        i += 1
    count = i - start

    if i < line_len and line[i] == DOUBLE_QUOTE:
        if count >= 2:
            token.append(BACKSLASH * (count // 2))
        if count % 2 == 1:
            token.append(DOUBLE_QUOTE)
            return i + 1
        return i

    token.append(BACKSLASH * count)
    return i


class CommandLineParser:
    """
    Splits a Windows command line into arguments like CommandLineToArgvW.

    With ParseMode.FULL_LINE the first token is an executable path: CreateProcess
    does not treat backslashes in it as escapes, so only whitespace, null and
    double quotes are special there. Every later token follows the C runtime
    backslash/quote counting rules.
    """

    def __init__(self, mode: ParseMode = ParseMode.ARGUMENTS_ONLY):
        self._mode = mode

    @classmethod
    def full(cls) -> "CommandLineParser":
        """Create a parser that expects an executable path at the start."""
        return cls(ParseMode.FULL_LINE)

    @property
    def mode(self) -> ParseMode:
        return self._mode

    def __repr__(self) -> str:
        return f"CommandLineParser(mode={self._mode})"

    def parse(self, line: str) -> list[str]:
        """
        Parse a command line into arguments.

        Args:
            line: The command line to parse

        Returns:
            List of arguments; in FULL_LINE mode the first one is the executable path

        Raises:
            UnescapedNewline: If a newline is reached between arguments
            CommandNameBackslash: If the command name needed backslash escaping
            ArgNotEmptyInInitialState: If characters were left over from a finished argument
        """
        args = []
        token = []
        state = _State.INITIAL
        command_name = self._mode is ParseMode.FULL_LINE
        i = 0
        line_len = len(line)

        while i < line_len:
            if state is _State.INITIAL:
                if token:
                    raise ArgNotEmptyInInitialState(position=i)

                # Skip delimiters before an argument
                while i < line_len and is_delimiter(line[i]):
                    if line[i] == NEWLINE:
                        raise UnescapedNewline(position=i)
                    i += 1

                if i >= line_len:
                    break

                # Take the run of ordinary characters in one slice
                special = _is_special_in_command_name if command_name else _is_special
                start = i
                while i < line_len and not special(line[i]):
                    i += 1
                if i > start:
                    token.append(line[start:i])

                if i >= line_len or is_delimiter(line[i]):
                    args.append("".join(token))
                    token = []
                    command_name = False
                    i += 1
                elif line[i] == DOUBLE_QUOTE:
                    state = _State.QUOTED
                    i += 1
                elif line[i] == BACKSLASH:
                    if command_name:
                        raise CommandNameBackslash(position=i)
                    i = _parse_backslashes(line, i, token)
                    state = _State.UNQUOTED
                continue

            c = line[i]

            if c == BACKSLASH and not command_name:
                i = _parse_backslashes(line, i, token)
                continue

            if state is _State.UNQUOTED:
                if is_delimiter(c):
                    # End of an argument that contained special characters
                    args.append("".join(token))
                    token = []
                    command_name = False
                    state = _State.INITIAL
                elif c == DOUBLE_QUOTE:
                    state = _State.QUOTED
                else:
                    token.append(c)
            else:
                if c == DOUBLE_QUOTE:
                    if i + 1 < line_len and line[i + 1] == DOUBLE_QUOTE:
                        # "" inside a quoted part is one literal quote
                        token.append(DOUBLE_QUOTE)
                        i += 1
                    else:
                        state = _State.UNQUOTED
                else:
                    token.append(c)

            i += 1

        # An argument left open (even an empty quoted one) is still an argument
        if state is not _State.INITIAL:
            args.append("".join(token))

        return args


def split_arguments(line: str) -> list[str]:
    """Split a command line that holds arguments only."""
    return CommandLineParser().parse(line)


def split_command_line(line: str) -> list[str]:
    """Split a full command line whose first token is the executable path."""
    return CommandLineParser.full().parse(line)


def quote_command_name(path: str) -> str:
    """
    Quote an executable path for the start of a full command line.

    Raises:
        ValueError: If the path contains a double quote, which cannot be escaped there
    """
    if DOUBLE_QUOTE in path:
        raise ValueError(f"Command name cannot contain a double quote: {path!r}")

    if not path or any(is_delimiter(c) for c in path):
        return f"{DOUBLE_QUOTE}{path}{DOUBLE_QUOTE}"
    return path


def join_command_line(executable: str, args: Iterable[str]) -> str:
    """Build a full command line from an executable path and its arguments."""
    parts = [quote_command_name(executable)]
    rest = vc2008.join(args)
    if rest:
        parts.append(rest)
    return " ".join(parts)
