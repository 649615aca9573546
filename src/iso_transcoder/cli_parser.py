#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of the iso-cvt argument parser
# - Split into _add_input_args, _add_mode_args and _add_output_args
# - validate_args checks the region bounds; resolve_direction picks the table
#

"""
cli_parser.py - Command-line argument parsing for iso-cvt
=========================================================

Handles parsing and validation of command-line arguments for the iso-cvt CLI.
"""

from __future__ import annotations

import argparse
from typing import Any

from . import __version__
from .config_schema import DEFAULT_CONFIG_FILENAME, VALID_LOG_LEVELS
from .format_registry import DEFAULT_REGISTRY
from .models import ConversionDirection, GermanStrictness

EPILOG = """
examples:
  iso-cvt --direction tex-to-iso paper.tex -o paper.txt
  iso-cvt --save-as sgml page.txt > page.html
  iso-cvt --direction german-to-iso --strictness conservative brief.txt
  iso-cvt --auto --start 100 --end 400 notes.txt
  iso-cvt --list-formats
"""


def _add_input_args(parser: argparse.ArgumentParser) -> None:
    """Add input and configuration arguments to the parser.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument(
        "filepath",
        type=str,
        nargs="?",
        help="File to convert. Reads standard input when omitted or '-'",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_FILENAME,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_FILENAME})",
    )

    parser.add_argument(
        "--encoding",
        type=str,
        help="Encoding of the input. 'auto' detects it (overrides config)",
    )

    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Start offset of the region to convert, in characters (default: 0)",
    )

    parser.add_argument(
        "--end",
        type=int,
        help="End offset (exclusive) of the region to convert (default: end of text)",
    )


def _add_mode_args(parser: argparse.ArgumentParser) -> None:
    """Add the mutually exclusive conversion mode arguments.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--direction",
        choices=[d.value for d in ConversionDirection],
        help="Apply one conversion table",
    )
    modes.add_argument(
        "--load-as",
        choices=DEFAULT_REGISTRY.names(),
        metavar="FORMAT",
        help="Decode the input as FORMAT into Latin-1 characters",
    )
    modes.add_argument(
        "--save-as",
        choices=DEFAULT_REGISTRY.names(),
        metavar="FORMAT",
        help="Encode Latin-1 characters of the input into FORMAT",
    )
    modes.add_argument(
        "--auto",
        action="store_true",
        help="Detect the input format and decode it",
    )
    modes.add_argument(
        "--list-formats",
        action="store_true",
        help="Show the known formats as Load As / Write As / Translate menus and exit",
    )
    modes.add_argument(
        "--show-config",
        action="store_true",
        help="Print the effective configuration and exit",
    )

    parser.add_argument(
        "--strictness",
        choices=[s.value for s in GermanStrictness],
        help="German digraph table used by --direction german-to-iso (overrides config)",
    )


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    """Add output arguments to the parser.

    Args:
        parser: ArgumentParser instance to add arguments to
    """
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Write the result to this file instead of standard output",
    )

    parser.add_argument(
        "--output-encoding",
        type=str,
        help="Encoding of the written result (overrides config)",
    )

    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level (overrides config)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all command-line options.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="iso-cvt",
        description="Convert between ISO 8859-1 characters and TeX, German, Spanish, SGML and Duden spellings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )

    _add_input_args(parser)
    _add_mode_args(parser)
    _add_output_args(parser)

    return parser


def resolve_direction(args: argparse.Namespace, config: dict[str, Any]) -> ConversionDirection | None:
    """
    Work out the table-level direction requested on the command line or in config.

    The German direction follows the configured strictness, which
    --strictness has already overridden.

    Returns:
        The direction, or None when a format mode (--load-as, --save-as, --auto) is used
    """
    if args.load_as or args.save_as or args.auto:
        return None

    value = args.direction or config["conversion"]["default_direction"]
    if not value:
        return None

    direction = ConversionDirection(value)
    if direction is ConversionDirection.GERMAN_TO_ISO and config["conversion"]["german_strictness"] == GermanStrictness.CONSERVATIVE.value:
        return ConversionDirection.GERMAN_TO_ISO_CONSERVATIVE
    return direction


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments that argparse cannot check on its own.

    Args:
        args: Parsed command-line arguments
        parser: ArgumentParser instance for error reporting

    Raises:
        SystemExit: If validation fails
    """
    if args.start < 0:
        parser.error("--start must not be negative")
    if args.end is not None and args.end < args.start:
        parser.error("--end must not be smaller than --start")
