"""Dispatch split/quote/join to a named command-line dialect."""

from enum import Enum
from typing import Iterable

from . import cmd_exe
from . import parser
from . import powershell
from . import vc2008


class UnknownDialect(ValueError):
    """Raised when a dialect name is not recognised."""

    pass


class Dialect(Enum):
    """Supported command-line dialects."""

    VC2008 = "vc2008"
    ARGV = "argv"
    ARGV_FULL = "argv-full"
    CMD = "cmd"
    POWERSHELL = "powershell"

    @classmethod
    def names(cls) -> list[str]:
        return [dialect.value for dialect in cls]

    @classmethod
    def from_name(cls, name: str) -> "Dialect":
        """
        Look up a dialect by name.

        Raises:
            UnknownDialect: If no dialect has that name
        """
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(cls.names())
            raise UnknownDialect(
                f"Unknown dialect '{name}' (expected one of: {valid})"
            ) from None


def split(line: str, dialect: Dialect = Dialect.VC2008) -> list[str]:
    """
    Split a command line using the given dialect.

    Raises:
        parser.ParseError: For the argv dialects, on a structural failure
    """
    if dialect is Dialect.VC2008:
        return vc2008.split(line)
    if dialect is Dialect.ARGV:
        return parser.split_arguments(line)
    if dialect is Dialect.ARGV_FULL:
        return parser.split_command_line(line)
    if dialect is Dialect.CMD:
        return cmd_exe.split(line)
    if dialect is Dialect.POWERSHELL:
        return powershell.split(line)
    raise UnknownDialect(f"Unknown dialect '{dialect}'")


def quote(value: str, dialect: Dialect = Dialect.VC2008) -> str:
    """Quote one value for the given dialect."""
    if dialect in (Dialect.VC2008, Dialect.ARGV):
        return vc2008.quote(value)
    if dialect is Dialect.ARGV_FULL:
        return parser.quote_command_name(value)
    if dialect is Dialect.CMD:
        return cmd_exe.quote(value)
    if dialect is Dialect.POWERSHELL:
        return powershell.quote(value)
    raise UnknownDialect(f"Unknown dialect '{dialect}'")


def join(args: Iterable[str], dialect: Dialect = Dialect.VC2008) -> str:
    """
    Build one command line from a list of arguments.

    For ARGV_FULL the first argument is taken as the executable path.
    """
    args = list(args)
    if dialect is Dialect.ARGV_FULL:
        if not args:
            return ""
        return parser.join_command_line(args[0], args[1:])
    return " ".join(quote(arg, dialect) for arg in args)
