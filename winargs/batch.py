"""Tokenize a file of command lines and export the results as JSON Lines."""

import json
import sys
from dataclasses import dataclass

from . import dialects
from .dialects import Dialect
from .parser import ParseError


class BatchFailed(Exception):
    """Raised when one or more lines could not be parsed."""

    pass


@dataclass
class BatchError:
    """Represents a parse failure on one line of the input."""

    message: str
    line_num: int
    path: str


@dataclass
class BatchRow:
    """One successfully tokenized input line."""

    line_num: int
    line: str
    args: list[str]


@dataclass
class BatchStats:
    """Statistics about a processed batch."""

    line_count: int
    arg_count: int
    error_count: int


class Batch:
    """Collects the arguments of every command line in a file."""

    def __init__(self, dialect: Dialect = Dialect.VC2008):
        self.dialect = dialect
        self.line_count: int = 0
        self.rows: list[BatchRow] = []
        self.errors: list[BatchError] = []

    def stats(self) -> BatchStats:
        return BatchStats(
            line_count=self.line_count,
            arg_count=sum(len(row.args) for row in self.rows),
            error_count=len(self.errors),
        )

    def _is_comment(self, line: str) -> bool:
        """Check if a line is blank or a comment."""
        stripped = line.lstrip()
        return len(stripped) == 0 or stripped[0] == "#"

    def load(self, path: str) -> None:
        """
        Tokenize each command line in a file.

        Blank lines and lines starting with # are skipped. Each line is split
        on its own, without its line ending.

        Args:
            path: File holding one command line per line

        Raises:
            BatchFailed: If any line failed to parse
        """
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        for line_num, line in enumerate(content.split("\n"), start=1):
            line = line.rstrip("\r")
            if self._is_comment(line):
                continue

            self.line_count += 1
            try:
                args = dialects.split(line, self.dialect)
            except ParseError as e:
                self.errors.append(
                    BatchError(message=type(e).__name__, line_num=line_num, path=path)
                )
                continue

            self.rows.append(BatchRow(line_num=line_num, line=line, args=args))

        if self.errors:
            self._print_errors()
            raise BatchFailed("Batch failed with errors")

    def _print_errors(self) -> None:
        """Print all errors to stderr."""
        for error in self.errors:
            print(
                f"{error.path}:{error.line_num}: error.{error.message}", file=sys.stderr
            )

    def export_json(self, output_file: str) -> None:
        """
        Export the tokenized lines to JSON Lines format.

        Args:
            output_file: Path to output file
        """
        with open(output_file, "w", encoding="utf-8") as f:
            for row in self.rows:
                record = {
                    "line": row.line_num,
                    "input": row.line,
                    "args": row.args,
                }
                f.write(json.dumps(record, separators=(",", ":")) + "\n")
