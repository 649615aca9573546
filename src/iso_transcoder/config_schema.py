#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module to hold configuration schema and default template
# - Sections: conversion, text_processing, logging
# - Added the allowed values used by config_validator.py
#

"""
config_schema.py - Configuration schema and default template for iso-cvt
"""

from .models import ConversionDirection, GermanStrictness

DEFAULT_CONFIG_FILENAME = "iso_cvt_config.yml"

VALID_STRICTNESS = [s.value for s in GermanStrictness]
VALID_DIRECTIONS = [d.value for d in ConversionDirection]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_DIRECTIONS_TEXT = ", ".join(VALID_DIRECTIONS)

REQUIRED_SECTIONS = {
    "conversion": "Conversion settings (German strictness, default direction)",
    "text_processing": "Text processing settings (input and output encodings)",
    "logging": "Logging configuration",
}

# Default configuration template with extensive comments
DEFAULT_CONFIG_TEMPLATE = f"""# iso-cvt Configuration File
# ==========================
# This file contains default settings for the iso-cvt Latin-1 converter.
# Any command-line arguments will override these settings.

# Conversion Settings
# -------------------
conversion:
  # Which German digraph table "--direction german-to-iso" uses:
  #   aggressive   - convert "a, "o, "u, "s everywhere
  #   conservative - only when preceded by a letter, hyphen, quote or backquote
  german_strictness: aggressive

  # Direction used when none is given on the command line.
  # One of: {_DIRECTIONS_TEXT}
  # null means a direction (or --load-as / --save-as / --auto) is required.
  default_direction: null

# Text Processing Settings
# ------------------------
text_processing:
  # Encoding of input files. "auto" detects it with chardet.
  input_encoding: auto

  # Encodings tried in order when detection fails
  fallback_encodings:
    - utf-8
    - iso-8859-1

  # Encoding of written output. iso-8859-1 keeps files single-byte.
  output_encoding: utf-8

# Logging Settings
# ----------------
logging:
  level: WARNING  # DEBUG, INFO, WARNING, ERROR, CRITICAL
  file_enabled: false
  file_path: iso_cvt.log
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""
