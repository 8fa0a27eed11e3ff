"""Command-line interface handler for winargs."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console

from . import batch
from . import config
from . import dialects
from .parser import ParseError

console = Console(stderr=True)

VERSION = "0.1.0"


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: winargs [-h | --help] [-c | --config FILE] <command> [<args>]

Commands:
  split                    Split a command line into arguments
      -d, --dialect STR    vc2008, argv, argv-full, cmd or powershell (default vc2008)
      --json               Print the arguments as a JSON array. Without it each argument
                           is printed on its own line, so an empty argument shows as a
                           blank line and one with a newline looks like two; use --json
                           when that matters
      <line>               The command line (read from stdin when omitted)

  quote                    Quote values into a single command line
      -d, --dialect STR    vc2008, argv, argv-full, cmd or powershell (default vc2008)
      <value>...           The literal values to quote

  batch                    Split every line of a file and export JSON Lines
      -d, --dialect STR    vc2008, argv, argv-full, cmd or powershell (default vc2008)
      <input>              File with one command line per line
      <output>             The output file

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(VERSION)


def resolve_dialect(args: argparse.Namespace, settings: config.Settings) -> dialects.Dialect:
    """Pick the dialect from the command line, falling back to the config file."""
    if args.dialect:
        return dialects.Dialect.from_name(args.dialect)
    return settings.dialect


def cmd_split(args: argparse.Namespace, settings: config.Settings) -> None:
    """Execute the split command."""
    dialect = resolve_dialect(args, settings)
    line = args.line if args.line is not None else sys.stdin.read().rstrip("\r\n")

    try:
        tokens = dialects.split(line, dialect)
    except ParseError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json or settings.json_output:
        print(json.dumps(tokens))
    else:
        for token in tokens:
            print(token)


def cmd_quote(args: argparse.Namespace, settings: config.Settings) -> None:
    """Execute the quote command."""
    if not args.values:
        print("Please specify at least one value to quote\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    dialect = resolve_dialect(args, settings)

    try:
        print(dialects.join(args.values, dialect))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_batch(args: argparse.Namespace, settings: config.Settings) -> None:
    """Execute the batch command."""
    if not args.input or not args.output:
        print("Please specify an input and an output path for batch\n", file=sys.stderr)
        print_usage()
        sys.exit(1)

    dialect = resolve_dialect(args, settings)

    job = batch.Batch(dialect)
    try:
        job.load(args.input)
    except batch.BatchFailed:
        sys.exit(1)

    job.export_json(args.output)

    stats = job.stats()
    console.print(f"[magenta]┃[/magenta] {stats.line_count:<6} Lines")
    console.print(f"[magenta]┃[/magenta] {stats.arg_count:<6} Arguments")
    console.print(f"[green]✓ Wrote {args.output}[/green]")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="winargs", description="Windows command-line tokenizer", add_help=False
    )

    # Add global options
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")
    parser.add_argument("-c", "--config", type=str, help="Path to configuration file")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument("-d", "--dialect", type=str, help="Dialect to split with")
    split_parser.add_argument(
        "--json", action="store_true", help="Print arguments as a JSON array"
    )
    split_parser.add_argument("line", nargs="?", help="Command line to split")

    # Quote command
    quote_parser = subparsers.add_parser("quote", add_help=False)
    quote_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for quote"
    )
    quote_parser.add_argument("-d", "--dialect", type=str, help="Dialect to quote for")
    quote_parser.add_argument("values", nargs="*", help="Values to quote")

    # Batch command
    batch_parser = subparsers.add_parser("batch", add_help=False)
    batch_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for batch"
    )
    batch_parser.add_argument("-d", "--dialect", type=str, help="Dialect to split with")
    batch_parser.add_argument("input", nargs="?", help="Input file path")
    batch_parser.add_argument("output", nargs="?", help="Output file path")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    # Parse arguments
    if not argv:
        print_usage()
        return

    args = parser.parse_args(argv)

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    try:
        settings = config.load_settings(args.config)
    except config.ConfigError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    try:
        # Execute commands
        if args.command == "split":
            cmd_split(args, settings)
        elif args.command == "quote":
            cmd_quote(args, settings)
        elif args.command == "batch":
            cmd_batch(args, settings)
        else:
            print_usage()
    except dialects.UnknownDialect as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
