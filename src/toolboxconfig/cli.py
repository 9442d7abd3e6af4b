"""toolbox-config CLI: check, upgrade and inspect saved toolbox pages.

Usage:
    toolbox-config check page.json              # Validate (after migration)
    toolbox-config upgrade page.json -o out.json
    toolbox-config note-types page.json         # key, color, text per type
    cat page.json | toolbox-config check -      # Read from stdin
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import ConfigError, format_error
from .settings import ToolboxSettings
from .subreddit_config import SubredditConfig


class CommandError(Exception):
    """A command failed for a reason outside the page contents."""


def _read_input(path: str) -> bytes:
    # Decoding is left to the parser so bad bytes surface as ConfigParseError
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _load(args: argparse.Namespace) -> SubredditConfig:
    try:
        text = _read_input(args.file)
    except OSError as e:
        raise CommandError(f"Cannot read {args.file}: {e}") from e
    return SubredditConfig(text, settings=args.settings)


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a page and report its version."""
    config = _load(args)
    print(f"ok (version {config.to_json()['version']})")
    return 0


def cmd_upgrade(args: argparse.Namespace) -> int:
    """Write the migrated, normalized page."""
    config = _load(args)
    if args.materialize_note_types:
        config.ensure_default_note_types()

    output = config.to_string(indent=args.indent)
    if args.output and args.output != "-":
        try:
            Path(args.output).write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            raise CommandError(f"Cannot write {args.output}: {e}") from e
    else:
        print(output)
    return 0


def cmd_note_types(args: argparse.Namespace) -> int:
    """Print every note type, tab separated."""
    config = _load(args)
    for note_type in config.get_all_note_types():
        print(f"{note_type.key}\t{note_type.color}\t{note_type.text}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolbox-config",
        description="Validate and upgrade subreddit toolbox configuration pages",
    )
    parser.add_argument("--settings", "-s", type=str, default=None,
                        help="Settings YAML file (default: $TOOLBOX_CONFIG_SETTINGS)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate a page")
    check_parser.add_argument("file", help="Page JSON file, or - for stdin")

    upgrade_parser = subparsers.add_parser("upgrade", help="Migrate a page to the latest schema")
    upgrade_parser.add_argument("file", help="Page JSON file, or - for stdin")
    upgrade_parser.add_argument("--output", "-o", type=str, default=None,
                                help="Output file (default: stdout)")
    upgrade_parser.add_argument("--indent", type=int, default=None,
                                help="Pretty-print indent (omit when saving to the wiki)")
    upgrade_parser.add_argument("--materialize-note-types", action="store_true",
                                help="Write default note types into pages that have none")

    note_types_parser = subparsers.add_parser("note-types", help="List usernote types")
    note_types_parser.add_argument("file", help="Page JSON file, or - for stdin")

    return parser


COMMANDS = {
    "check": cmd_check,
    "upgrade": cmd_upgrade,
    "note-types": cmd_note_types,
}


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        parser.print_help()
        sys.exit(1)

    try:
        if args.settings:
            args.settings = ToolboxSettings.from_file(args.settings)
        else:
            args.settings = ToolboxSettings.from_env()
    except (ValueError, OSError) as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else args.settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        sys.exit(COMMANDS[args.command](args))
    except ConfigError as e:
        print(format_error(e), file=sys.stderr)
        sys.exit(1)
    except CommandError as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
