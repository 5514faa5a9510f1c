from __future__ import annotations

import argparse
from collections.abc import Callable
import logging
from pathlib import Path
import sys

from pydantic import BaseModel, Field

from socialsheet.compact import parse_compact
from socialsheet.defaults import build_default_document
from socialsheet.errors import SocialSheetError
from socialsheet.expanded import convert_to_compact
from socialsheet.export import export_workbook
from socialsheet.shared.a1 import coordinate_to_row_col, row_col_to_coordinate
from socialsheet.validate import check_document

logger = logging.getLogger(__name__)

_STDIN = "-"


class CliConfig(BaseModel):
    """Global options shared by every subcommand."""

    log_level: str = Field(default="WARNING", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``socialsheet`` command.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="socialsheet",
        description="Convert and check compact and expanded spreadsheet text.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--log-file", type=Path, help="Optional log file path.")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Compact text to expanded text.")
    _add_io_arguments(parse_cmd)
    parse_cmd.set_defaults(handler=_run_parse)

    convert_cmd = sub.add_parser("convert", help="Expanded text to compact text.")
    _add_io_arguments(convert_cmd)
    convert_cmd.set_defaults(handler=_run_convert)

    validate_cmd = sub.add_parser("validate", help="Check expanded text.")
    validate_cmd.add_argument("input", nargs="?", default=_STDIN)
    validate_cmd.set_defaults(handler=_run_validate)

    default_cmd = sub.add_parser("default", help="Print the welcome document.")
    default_cmd.add_argument(
        "--storage", default="local", help="Storage backend label for cell C3."
    )
    default_cmd.set_defaults(handler=_run_default)

    coord_cmd = sub.add_parser(
        "coord", help="Decode COORD, or encode --row/--col into a coordinate."
    )
    coord_cmd.add_argument("coordinate", nargs="?")
    coord_cmd.add_argument("--row", type=int)
    coord_cmd.add_argument("--col", type=int)
    coord_cmd.set_defaults(handler=_run_coord)

    export_cmd = sub.add_parser("export", help="Expanded text to an .xlsx workbook.")
    export_cmd.add_argument("input", nargs="?", default=_STDIN)
    export_cmd.add_argument("-o", "--output", type=Path, required=True)
    export_cmd.add_argument("--sheet-title", default="Sheet1")
    export_cmd.set_defaults(handler=_run_export)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv: Optional CLI arguments for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(CliConfig(log_level=args.log_level, log_file=args.log_file))
    handler: Callable[[argparse.Namespace], int] = args.handler
    try:
        return handler(args)
    except (SocialSheetError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", nargs="?", default=_STDIN, help="Input file or '-'.")
    parser.add_argument("-o", "--output", type=Path, help="Output file (stdout).")


def _configure_logging(config: CliConfig) -> None:
    """Configure logging for the CLI process.

    Args:
        config: CLI configuration.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level.upper(),
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_input(source: str) -> str:
    if source == _STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", output)


def _run_parse(args: argparse.Namespace) -> int:
    _write_output(parse_compact(_read_input(args.input)), args.output)
    return 0


def _run_convert(args: argparse.Namespace) -> int:
    _write_output(convert_to_compact(_read_input(args.input)), args.output)
    return 0


def _run_validate(args: argparse.Namespace) -> int:
    report = check_document(_read_input(args.input))
    if report.is_valid:
        print("OK")
        return 0
    for error in report.errors:
        print(error)
    return 1


def _run_default(args: argparse.Namespace) -> int:
    print(build_default_document(args.storage))
    return 0


def _run_coord(args: argparse.Namespace) -> int:
    if args.coordinate is not None:
        row, col = coordinate_to_row_col(args.coordinate)
        print(f"{row} {col}")
        return 0
    if args.row is None or args.col is None:
        print("error: pass COORD or both --row and --col", file=sys.stderr)
        return 1
    coordinate = row_col_to_coordinate(args.row, args.col)
    if not coordinate:
        print("error: row and column must be at least 1", file=sys.stderr)
        return 1
    print(coordinate)
    return 0


def _run_export(args: argparse.Namespace) -> int:
    export_workbook(
        _read_input(args.input), args.output, sheet_title=args.sheet_title
    )
    return 0
