#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation of configuration, logging and console setup for iso-cvt
# - Logging is configured from the 'logging' config section
#

"""
cli_setup.py - CLI setup and initialization
==========================================

Handles initialization of configuration, logging and the console
for the iso-cvt command.
"""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from typing import Any

import colorama

from .config_manager import ConfigManager


def setup_configuration(config_path: str) -> ConfigManager:
    """Load and validate configuration from config file.

    Args:
        config_path: Path of the YAML configuration file

    Returns:
        ConfigManager instance
    """
    try:
        return ConfigManager(config_path=Path(config_path))
    except (ValueError, OSError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        print("Please fix the configuration file or delete it to regenerate defaults.", file=sys.stderr)
        sys.exit(1)


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, config["logging"]["level"], logging.WARNING)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format, stream=sys.stderr)
    logger = logging.getLogger("iso_transcoder")
    logger.setLevel(log_level)

    # Set up file logging if enabled
    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"], encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger


def setup_console() -> None:
    """Make ANSI colors work on Windows consoles; a no-op elsewhere."""
    colorama.just_fix_windows_console()


def setup_signal_handler(logger: logging.Logger) -> None:
    """Set up signal handling for graceful termination.

    Args:
        logger: Logger instance
    """

    def signal_handler(sig: int, frame: Any) -> None:
        logger.info("Interrupt received. Exiting.")
        sys.exit(130)

    signal.signal(signal.SIGINT, signal_handler)
