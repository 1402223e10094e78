#!/usr/bin/env python3

import argparse
from collections.abc import Sequence

from receiptsplit.runtime import get_config, level_from_name, set_log_level


def _apply_log_level(verbose: bool) -> None:
    config_level = get_config().log_level
    if verbose:
        set_log_level(level_from_name("DEBUG"))
    elif config_level:
        set_log_level(level_from_name(config_level))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt parsing and bill splitting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse [text_file]          Parse receipt text (stdin if no file)
  scan <image>               OCR a receipt image and parse it
  split <text> <toml>        Split receipt items among people
  serve [--host] [--port]    Start the HTTP server

Notes:
  Edited OCR text can be saved to a file and re-parsed with 'parse'.
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse receipt text")
    parse_parser.add_argument("text_file", nargs="?", help="Text file to parse (reads stdin if omitted)")
    parse_parser.add_argument("--json", action="store_true", help="Print the parsed receipt as JSON")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="OCR a receipt image and parse it")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from config)")
    scan_parser.add_argument("--json", action="store_true", help="Print the parsed receipt as JSON")

    # split command
    split_parser = subparsers.add_parser("split", help="Split receipt items among people")
    split_parser.add_argument("text_file", help="Receipt text file")
    split_parser.add_argument("assignments", help="Assignment TOML file")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: from config)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: from config)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        _apply_log_level(args.verbose)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 1

    from receiptsplit.cli import receipt as commands

    handlers = {
        "parse": commands.cmd_parse,
        "scan": commands.cmd_scan,
        "split": commands.cmd_split,
        "serve": commands.cmd_serve,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    raise SystemExit(main())
