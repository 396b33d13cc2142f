from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from file_renamer.config import AppSettings, RenameOptions, load_settings
from file_renamer.extensions import normalize_extension
from file_renamer.pipeline import run_pipeline

EXIT_OK = 0
EXIT_FAILURE = 1

PROG = "file-renamer"
EXAMPLES = f"""\
examples:
  {PROG} -p /home/user/documents -f cpp -t txt
  {PROG} -p /home/user/documents -f cpp -t txt -r
"""


class UsageError(Exception):
    """Bad command line. An empty message means usage was requested with -h."""


@dataclass(frozen=True, slots=True)
class CliArgs:
    options: RenameOptions
    config_path: Path | None = None
    verbosity: int = 0
    progress: bool = False


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(f"Error: {message}")


class _UsageAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str = argparse.SUPPRESS, **kwargs) -> None:
        super().__init__(option_strings=option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        raise UsageError("")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=f"{PROG} -p <directory_path> -f <from_extension> -t <to_extension> [-y] [-r]",
        description="Rename every file with one extension to another extension.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-p", "--path", metavar="<path>", help="Sets the directory path to scan")
    parser.add_argument("-f", "--from", dest="from_ext", metavar="<ext>", help="Sets the extension to rename from")
    parser.add_argument("-t", "--to", dest="to_ext", metavar="<ext>", help="Sets the extension to rename to")
    parser.add_argument("-y", dest="yes", action="store_true", help="Skips the confirmation prompt")
    parser.add_argument("-r", "--recursive", action="store_true", help="Recursively scan subdirectories")
    parser.add_argument("-c", "--config", metavar="<toml>", help="Optional settings file (TOML)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv for debug output)"
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while renaming")
    parser.add_argument("-h", "--help", action=_UsageAction, help="Displays this help message")
    return parser


def _require_extension(raw: str | None, label: str) -> str:
    if raw is None:
        raise UsageError(f"Error: {label} must be provided.")
    ext = normalize_extension(raw)
    if not ext:
        raise UsageError(f"Error: {label} must not be empty.")
    return ext


def parse_cli(argv: Sequence[str] | None = None, parser: argparse.ArgumentParser | None = None) -> CliArgs:
    """
    Parse and validate the command line.

    Raises UsageError on any problem, or NotADirectoryError for an empty path.
    """
    parser = parser or build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        raise UsageError("Error: Path (-p) must be provided.")
    from_ext = _require_extension(args.from_ext, "'From' extension (-f)")
    to_ext = _require_extension(args.to_ext, "'To' extension (-t)")
    # Path("") would silently mean the current directory.
    if not args.path:
        raise NotADirectoryError("The provided path is not a valid directory: ")

    return CliArgs(
        options=RenameOptions(
            directory=Path(args.path),
            from_extension=from_ext,
            to_extension=to_ext,
            skip_confirmation=args.yes,
            recursive=args.recursive,
        ),
        config_path=Path(args.config).expanduser() if args.config else None,
        verbosity=args.verbose,
        progress=args.progress,
    )


def _configure_logging(settings: AppSettings, verbosity: int) -> None:
    level = logging.getLevelName(settings.logging.level)
    if verbosity >= 2:
        level = min(level, logging.DEBUG)
    elif verbosity == 1:
        level = min(level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        cli = parse_cli(argv, parser)
    except UsageError as e:
        if str(e):
            print(e, file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_FAILURE
    except NotADirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        settings = load_settings(cli.config_path)
    except (OSError, TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if cli.progress:
        settings = dataclasses.replace(settings, output=dataclasses.replace(settings.output, progress=True))

    _configure_logging(settings, cli.verbosity)

    try:
        run_pipeline(options=cli.options, settings=settings)
    except NotADirectoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
