"""Reading numeric CSV files into lists of rows."""

from __future__ import annotations

import math
import os
import re

Matrix = list[list[float]]

_HEX = r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
_DEC = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_SPECIAL = r"[+-]?(?:inf(?:inity)?|nan)"
_NUMBER = re.compile(
    rf"\s*(?:(?P<hex>{_HEX})|(?P<dec>{_DEC})|(?P<special>{_SPECIAL}))",
    re.IGNORECASE,
)


def _leading_number(token: str) -> float:
    """Value of the longest numeric prefix of ``token``, or 0.0 if none."""
    match = _NUMBER.match(token)
    if match is None:
        return 0.0
    if match.group("hex"):
        value = float.fromhex(match.group("hex"))
    elif match.group("dec"):
        value = float(match.group("dec"))
    else:
        return float(match.group("special"))
    if math.isinf(value):
        return 0.0  # out of range
    return value


def _split_fields(line: str) -> list[str]:
    fields = line.split(",")
    if len(fields) > 1 and fields[-1] == "":
        fields.pop()
    return fields


def parse_csv(filename: str | os.PathLike[str], skip_header: bool = True) -> Matrix:
    """Read a comma-separated file of numbers.

    Empty lines are skipped and fields that do not start with a number
    become 0.0. Raises ``FileNotFoundError`` if the file does not exist.
    """
    with open(filename, "rb") as handle:
        text = handle.read().decode("latin-1")

    lines = text.split("\n")
    if skip_header:
        lines = lines[1:]

    return [
        [_leading_number(field) for field in _split_fields(line)]
        for line in lines
        if line
    ]