#!/usr/bin/env python3

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

"""
common_file_utils.py - Encoding detection and text file I/O for iso-cvt

Input files may be UTF-8 or single-byte ISO 8859-1; the encoding is
detected with chardet unless the caller names one.
"""

import logging
from pathlib import Path

import chardet

# Default logger
logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "iso-8859-1"]


def detect_encoding(raw_data: bytes, logger: logging.Logger | None = None) -> tuple[str | None, float]:
    """
    Detect the encoding of a byte string with chardet.

    Args:
        raw_data: Bytes to analyze
        logger: Logger instance (uses module logger if None)

    Returns:
        (encoding, confidence) tuple; encoding is None when chardet has no guess
    """
    if logger is None:
        logger = globals()["logger"]

    result = chardet.detect(raw_data)
    encoding = result.get("encoding")
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet.detect: {encoding} (confidence: {confidence})")
    return encoding, confidence


def decode_bytes(
    raw_data: bytes,
    encoding: str = "auto",
    fallback_encodings: list[str] | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """
    Decode bytes, detecting the encoding when asked to.

    Parameters:
    - raw_data: Bytes to decode
    - encoding: Encoding name, or "auto" to detect it with chardet
    - fallback_encodings: Encodings tried in order when detection fails
    - logger: Logger instance (uses module logger if None)

    Returns: Decoded text

    Raises:
        UnicodeDecodeError: If an explicitly named encoding cannot decode the data
        LookupError: If the named encoding is unknown
    """
    if logger is None:
        logger = globals()["logger"]

    if encoding != "auto":
        return raw_data.decode(encoding)

    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    detected, _ = detect_encoding(raw_data, logger=logger)
    candidates = ([detected] if detected else []) + [enc for enc in fallback_encodings if enc != detected]

    for enc in candidates:
        try:
            content = raw_data.decode(enc)
            logger.debug(f"Successfully decoded with {enc}")
            return content
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {enc}: {e}")

    # iso-8859-1 decodes any byte string, so this is only reached with custom fallbacks
    logger.warning(f"All encodings failed, using {candidates[0]} with error replacement")
    return raw_data.decode(candidates[0], errors="replace")


def read_text_file(
    file_path: Path,
    encoding: str = "auto",
    fallback_encodings: list[str] | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """
    Read and decode an entire text file.

    Raises:
        OSError: If the file cannot be read
    """
    if logger is None:
        logger = globals()["logger"]

    with file_path.open("rb") as f:
        raw_data = f.read()
    logger.debug(f"Read {len(raw_data)} bytes from {file_path}")
    return decode_bytes(raw_data, encoding=encoding, fallback_encodings=fallback_encodings, logger=logger)


def write_text_file(file_path: Path, content: str, encoding: str = "utf-8", logger: logging.Logger | None = None) -> None:
    """
    Write text to a file, creating parent directories if needed.

    Raises:
        OSError: If the file cannot be written
        UnicodeEncodeError: If the text has characters the encoding lacks
    """
    if logger is None:
        logger = globals()["logger"]

    data = content.encode(encoding)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("wb") as f:
        f.write(data)
    logger.debug(f"Successfully wrote {len(data)} bytes to {file_path}")
