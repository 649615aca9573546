#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Added FileFormat declarations for every conversion
# - Added FormatRegistry with lookup and auto-detection
# - Added build_menu producing the Load As / Write As / Translate menus as data
#

"""
File format registry.

A host editor decodes a file with a format's ``decode`` function when it is
loaded and encodes it with ``encode`` when it is saved. One-way formats use
the ``read_only`` / ``write_only`` stubs for the missing direction.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterator

from .conversions import (
    german_to_iso_aggressive,
    german_to_iso_conservative,
    gtex_to_iso,
    iso_to_duden,
    iso_to_gtex,
    iso_to_sgml,
    iso_to_tex,
    read_only,
    sgml_to_iso,
    spanish_to_iso,
    tex_to_iso,
    write_only,
)
from .rules_sgml import ISOLAT1_ENTITIES
from .text_buffer import StringBuffer, TextBuffer

logger = logging.getLogger(__name__)

RegionFunction = Callable[[TextBuffer, int, int], int]


@dataclass(frozen=True)
class FileFormat:
    """A named pair of decode/encode region functions."""

    name: str
    description: str
    detect: re.Pattern[str] | None
    decode: RegionFunction
    encode: RegionFunction

    @property
    def readable(self) -> bool:
        return self.decode is not write_only

    @property
    def writable(self) -> bool:
        return self.encode is not read_only


@dataclass(frozen=True)
class MenuItem:
    label: str
    format_name: str
    action: RegionFunction


@dataclass(frozen=True)
class Menu:
    title: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class MenuTree:
    """The four format menus a host renders."""

    load_as: Menu
    write_as: Menu
    translate_to: Menu
    translate_from: Menu

    def __iter__(self) -> Iterator[Menu]:
        return iter((self.load_as, self.write_as, self.translate_to, self.translate_from))


class FormatRegistry:
    """Ordered, name-keyed collection of file formats."""

    def __init__(self, formats: list[FileFormat] | None = None):
        self._formats: dict[str, FileFormat] = {}
        for file_format in formats or []:
            self.register(file_format)

    def register(self, file_format: FileFormat) -> None:
        """
        Add a format.

        Raises:
            ValueError: If a format with the same name is already registered
        """
        if file_format.name in self._formats:
            raise ValueError(f"Format already registered: {file_format.name}")
        self._formats[file_format.name] = file_format

    def get(self, name: str) -> FileFormat:
        """
        Look up a format by name.

        Raises:
            KeyError: If the name is unknown
        """
        try:
            return self._formats[name]
        except KeyError:
            known = ", ".join(self._formats)
            raise KeyError(f"Unknown format '{name}'. Known formats: {known}") from None

    def names(self) -> list[str]:
        return list(self._formats)

    def detect(self, text: str) -> FileFormat | None:
        """
        Return the first readable format whose detection pattern matches.

        Args:
            text: Text to inspect

        Returns:
            The detected format, or None if no pattern matches
        """
        for file_format in self._formats.values():
            if file_format.detect is None or not file_format.readable:
                continue
            if file_format.detect.search(text):
                logger.debug(f"Detected format '{file_format.name}'")
                return file_format
        logger.debug("No format detected")
        return None

    def __iter__(self) -> Iterator[FileFormat]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, name: object) -> bool:
        return name in self._formats


_ENTITY_NAMES = "|".join(name for name, _ in ISOLAT1_ENTITIES)

DEFAULT_FORMATS = [
    FileFormat(
        name="sgml",
        description='HTML/SGML "ISO 8879:1986//ENTITIES Added Latin 1//EN"',
        detect=re.compile(rf"&(?:{_ENTITY_NAMES});"),
        decode=sgml_to_iso,
        encode=iso_to_sgml,
    ),
    FileFormat(
        name="tex",
        description="TeX (encoding)",
        detect=re.compile(r"""\\(?:["'`^~](?:\{?[a-zA-Z]|\{?\\i)|ss(?![a-zA-Z])|c[ {][cC])"""),
        decode=tex_to_iso,
        encode=iso_to_tex,
    ),
    FileFormat(
        name="gtex",
        description="German TeX (encoding)",
        detect=None,
        decode=gtex_to_iso,
        encode=iso_to_gtex,
    ),
    FileFormat(
        name="german",
        description="German (read-only)",
        detect=re.compile(r'[a-zA-Z]"[aouAOUs]'),
        decode=german_to_iso_aggressive,
        encode=read_only,
    ),
    FileFormat(
        name="german-conservative",
        description="German, conservative (read-only)",
        detect=None,
        decode=german_to_iso_conservative,
        encode=read_only,
    ),
    FileFormat(
        name="spanish",
        description="Spanish (read-only)",
        detect=re.compile(r"~[nN]"),
        decode=spanish_to_iso,
        encode=read_only,
    ),
    FileFormat(
        name="duden",
        description="Duden Ersatzdarstellung (write-only)",
        detect=None,
        decode=write_only,
        encode=iso_to_duden,
    ),
]

DEFAULT_REGISTRY = FormatRegistry(DEFAULT_FORMATS)


def decode_text(text: str, name: str, registry: FormatRegistry = DEFAULT_REGISTRY) -> str:
    """
    Decode text written in format ``name`` to Latin-1 characters.

    Raises:
        KeyError: If the format is unknown
        UnsupportedDirectionError: If the format is write-only
    """
    buffer = StringBuffer(text)
    registry.get(name).decode(buffer, 0, len(buffer))
    return buffer.text


def encode_text(text: str, name: str, registry: FormatRegistry = DEFAULT_REGISTRY) -> str:
    """
    Encode Latin-1 text into format ``name``.

    Raises:
        KeyError: If the format is unknown
        UnsupportedDirectionError: If the format is read-only
    """
    buffer = StringBuffer(text)
    registry.get(name).encode(buffer, 0, len(buffer))
    return buffer.text


def build_menu(registry: FormatRegistry) -> MenuTree:
    """
    Build the format menus from a registry.

    "Load As" and "Translate from" decode, so they list readable formats;
    "Write As" and "Translate to" encode, so they list writable ones.

    Args:
        registry: Formats to offer

    Returns:
        The menu tree, in registry order
    """
    readable = [f for f in registry if f.readable]
    writable = [f for f in registry if f.writable]

    def items(formats: list[FileFormat], decode: bool) -> tuple[MenuItem, ...]:
        return tuple(MenuItem(f.description, f.name, f.decode if decode else f.encode) for f in formats)

    return MenuTree(
        load_as=Menu("Load As", items(readable, decode=True)),
        write_as=Menu("Write As", items(writable, decode=False)),
        translate_to=Menu("Translate to", items(writable, decode=False)),
        translate_from=Menu("Translate from", items(readable, decode=True)),
    )
