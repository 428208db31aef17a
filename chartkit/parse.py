"""Parsing lists of numbers and timestamps from text."""

from __future__ import annotations

import re
from datetime import datetime, timezone

_LAYOUT_TOKENS = sorted(
    {
        "January": "%B",
        "Monday": "%A",
        "2006": "%Y",
        "-07:00:00": "%z",
        "-070000": "%z",
        "Z07:00:00": "%z",
        "Z070000": "%z",
        "-07:00": "%z",
        "-0700": "%z",
        "Z07:00": "%z",
        "Z0700": "%z",
        "Jan": "%b",
        "Mon": "%a",
        "MST": "%Z",
        "002": "%j",
        "-07": "%z",
        "Z07": "%z",
        "01": "%m",
        "02": "%d",
        "03": "%I",
        "04": "%M",
        "05": "%S",
        "06": "%y",
        "15": "%H",
        "_2": "%d",
        "PM": "%p",
        "pm": "%p",
        "1": "%m",
        "2": "%d",
        "3": "%I",
        "4": "%M",
        "5": "%S",
    }.items(),
    key=lambda item: -len(item[0]),
)

_FRACTION = re.compile(r"[.,](0+|9+)(?!\d)")


def parse_floats(*args: str) -> list:
    """Parse numbers, ignoring thousands separators and blank entries."""
    output = []
    for value in args:
        cleaned = value.replace(",", "").strip()
        if not cleaned:
            continue
        if "_" in cleaned:
            raise ValueError(f"invalid number: {value!r}")
        output.append(float(cleaned))
    return output


def _layout_formats(layout: str) -> list:
    """strptime formats equivalent to a reference-time layout."""
    formats = [""]
    position = 0
    while position < len(layout):
        fraction = _FRACTION.match(layout, position)
        if fraction:
            separator = layout[position]
            piece = separator + "%f"
            if fraction.group(1)[0] == "9":
                formats = [f + variant for f in formats for variant in (piece, "")]
            else:
                formats = [f + piece for f in formats]
            position = fraction.end()
            continue
        for token, directive in _LAYOUT_TOKENS:
            if layout.startswith(token, position):
                formats = [f + directive for f in formats]
                position += len(token)
                break
        else:
            char = layout[position]
            literal = "%%" if char == "%" else char
            formats = [f + literal for f in formats]
            position += 1
    return formats


def parse_times(layout: str, *args: str) -> list:
    """Parse timestamps written in the given reference-time layout.

    Timestamps without a zone are taken as UTC.
    """
    formats = _layout_formats(layout)
    output = []
    for value in args:
        for fmt in formats:
            try:
                parsed = datetime.strptime(value, fmt)
            except ValueError:
                continue
            break
        else:
            raise ValueError(f"cannot parse {value!r} as {layout!r}")
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        output.append(parsed)
    return output