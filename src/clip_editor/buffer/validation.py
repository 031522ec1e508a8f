"""Validation helpers shared across buffer services."""

from __future__ import annotations

import re
from typing import Tuple

from .document import TextDocument
from .errors import NumericArgumentError, SelectionRangeError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def ensure_selection(document: TextDocument, start: int, end: int) -> None:
    length = len(document)
    if start < 0 or start > end or end >= length:
        raise SelectionRangeError(start, end, length)


def parse_int(raw: str) -> int:
    value = raw.strip()
    if not _INTEGER.fullmatch(value):
        raise NumericArgumentError(raw)
    return int(value)


def parse_int_pair(raw: str) -> Tuple[int, int]:
    parts = raw.split()
    if len(parts) != 2:
        raise NumericArgumentError(raw, expected="two integers")
    return parse_int(parts[0]), parse_int(parts[1])
