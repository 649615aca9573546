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
# - Added TextBuffer protocol describing the host text container
# - Added StringBuffer in-memory implementation
#

"""Text buffer abstraction consumed by the rule engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextBuffer(Protocol):
    """
    Capabilities the rule engine needs from a host text container.

    Offsets are character indexes, ``end`` is exclusive.
    """

    def substring(self, start: int, end: int) -> str: ...

    def replace(self, start: int, end: int, text: str) -> None: ...

    def __len__(self) -> int: ...


class StringBuffer:
    """Mutable in-memory text buffer."""

    def __init__(self, text: str = "") -> None:
        if not isinstance(text, str):
            raise TypeError("Input must be a string")
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def substring(self, start: int, end: int) -> str:
        self._check_bounds(start, end)
        return self._text[start:end]

    def replace(self, start: int, end: int, text: str) -> None:
        self._check_bounds(start, end)
        self._text = self._text[:start] + text + self._text[end:]

    def _check_bounds(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise ValueError(f"Invalid range [{start}, {end}) for buffer of length {len(self._text)}")

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringBuffer({self._text!r})"
