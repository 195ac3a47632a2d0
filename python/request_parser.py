"""
Request file parsing for the fractal drawer.

A request file is a .csv file with one request per line:

    <kind>,<depth>

Both fields are a single decimal digit with no surrounding whitespace.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fractal_types import MAX_DEPTH, MIN_DEPTH, InputError, PatternKind, Request
from pattern_catalog import available_kinds

__all__ = ["REQUEST_FILE_SUFFIX", "load_requests", "parse_requests"]

logger = logging.getLogger(__name__)

REQUEST_FILE_SUFFIX = ".csv"
FIELD_SEPARATOR = ","


def _parse_field(field: str, name: str, low: int, high: int, where: str) -> int:
    if len(field) != 1 or not (field.isascii() and field.isdigit()):
        raise InputError(
            f"Invalid {name} field: '{field}'\n"
            f"  {where}\n"
            f"  Expected a single digit from {low} to {high}"
        )
    value = int(field)
    if not low <= value <= high:
        raise InputError(
            f"{name.capitalize()} out of range: {value}\n"
            f"  {where}\n"
            f"  Valid {name} values: {low} to {high}"
        )
    return value


def parse_requests(text: str, source: str = "<string>") -> list[Request]:
    """
    Parse request lines into validated requests.

    Format:
    - One request per line: "kind,depth"
    - kind: single digit naming a pattern (1 carpet, 2 triangle, 3 vicsek)
    - depth: single digit from MIN_DEPTH to MAX_DEPTH
    - No spaces anywhere; empty lines are rejected
    - The final line terminator is optional, CRLF endings are accepted

    Example:
        "1,2\\n3,1\\n" -> [Request(CARPET, 2), Request(VICSEK, 1)]

    Args:
        text: Contents of a request file
        source: Name used in error messages

    Returns:
        Requests in file order

    Raises:
        InputError: On the first malformed line
    """
    kinds = available_kinds()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    requests: list[Request] = []
    for line_idx, raw_line in enumerate(lines):
        line = raw_line.removesuffix("\r")
        where = f"{source}, line {line_idx + 1}: \"{line}\""

        if not line:
            raise InputError(f"Empty line\n  {where}")

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 2:
            raise InputError(
                f"Wrong number of fields: {len(fields)}\n"
                f"  {where}\n"
                f"  Expected exactly 2: kind{FIELD_SEPARATOR}depth"
            )

        kind = _parse_field(fields[0], "kind", kinds[0], kinds[-1], where)
        depth = _parse_field(fields[1], "depth", MIN_DEPTH, MAX_DEPTH, where)
        requests.append(Request(PatternKind(kind), depth))

    logger.info("parse_requests: %s -> %d request(s)", source, len(requests))
    return requests


def load_requests(path: str | Path) -> list[Request]:
    """
    Read and validate a request file.

    Raises:
        InputError: If the file is missing, not a .csv file, unreadable, or
            contains a malformed line
    """
    path = Path(path)
    if not path.is_file():
        raise InputError(f"Request file not found: {path}")
    if path.suffix != REQUEST_FILE_SUFFIX:
        raise InputError(
            f"Wrong request file type: {path}\n"
            f"  Expected a '{REQUEST_FILE_SUFFIX}' file"
        )
    try:
        # No newline translation, so a bare \r stays inside its line
        with path.open(encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read request file {path}: {e}") from e
    return parse_requests(text, source=str(path))
