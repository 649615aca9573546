#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - iso-cvt command: converts a file or standard input with one rule table
# - Format modes (--load-as, --save-as, --auto) go through the format registry
# - Setup split into cli_parser and cli_setup
#

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .cli_parser import create_parser, resolve_direction, validate_args
from .cli_setup import setup_configuration, setup_console, setup_logging, setup_signal_handler
from .common_file_utils import decode_bytes, read_text_file, write_text_file
from .common_print_utils import print_error, render_menu_tree, safe_print
from .common_yaml_utils import dump_safe_yaml
from .conversions import convert_region
from .format_registry import DEFAULT_REGISTRY, build_menu
from .models import ConversionError
from .text_buffer import StringBuffer

logger = logging.getLogger(__name__)


def read_input(args: argparse.Namespace, config: dict[str, Any]) -> str:
    """Read the input file, or standard input, and decode it."""
    encoding = config["text_processing"]["input_encoding"]
    fallbacks = config["text_processing"]["fallback_encodings"]

    if args.filepath and args.filepath != "-":
        return read_text_file(Path(args.filepath), encoding=encoding, fallback_encodings=fallbacks)

    return decode_bytes(sys.stdin.buffer.read(), encoding=encoding, fallback_encodings=fallbacks)


def write_output(text: str, args: argparse.Namespace, config: dict[str, Any]) -> None:
    """Write the result to --output, or to standard output."""
    encoding = config["text_processing"]["output_encoding"]

    if args.output:
        write_text_file(Path(args.output), text, encoding=encoding)
        logger.info(f"Wrote {args.output}")
        return

    sys.stdout.buffer.write(text.encode(encoding))
    sys.stdout.flush()


def convert(buffer: StringBuffer, args: argparse.Namespace, config: dict[str, Any]) -> int:
    """
    Run the requested conversion on the buffer region.

    Returns:
        The new region end offset

    Raises:
        ConversionError: If a one-way format is used in its unsupported direction
        ValueError: If the region lies outside the text
    """
    start = args.start
    end = len(buffer) if args.end is None else args.end

    if args.load_as:
        return DEFAULT_REGISTRY.get(args.load_as).decode(buffer, start, end)

    if args.save_as:
        return DEFAULT_REGISTRY.get(args.save_as).encode(buffer, start, end)

    if args.auto:
        detected = DEFAULT_REGISTRY.detect(buffer.substring(start, end))
        if detected is None:
            logger.warning("No known format detected; text left unchanged")
            return end
        logger.info(f"Detected format: {detected.description}")
        return detected.decode(buffer, start, end)

    direction = resolve_direction(args, config)
    if direction is None:
        raise ValueError("No conversion requested: use --direction, --load-as, --save-as or --auto")
    logger.info(f"Converting with table {direction.value}")
    return convert_region(buffer, start, end, direction)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the iso-cvt command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    validate_args(args, parser)

    config_manager = setup_configuration(args.config)
    config = config_manager.update_with_args(args)

    tolog = setup_logging(config)
    setup_console()
    setup_signal_handler(tolog)

    if args.list_formats:
        safe_print(render_menu_tree(build_menu(DEFAULT_REGISTRY)))
        return 0

    if args.show_config:
        safe_print(dump_safe_yaml(config), markup=False, highlight=False)
        return 0

    try:
        buffer = StringBuffer(read_input(args, config))
        new_end = convert(buffer, args, config)
        tolog.debug(f"Region end moved to {new_end}")
        write_output(buffer.text, args, config)
    except ConversionError as e:
        print_error(str(e))
        return 1
    except (OSError, UnicodeError, LookupError, ValueError) as e:
        print_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
