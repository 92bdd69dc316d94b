from __future__ import annotations

import re
from typing import Tuple, Type

from .errors import (
    MalformedArrow,
    MalformedTimestamp,
    SrtParseError,
    UnexpectedEndOfInput,
)
from .models import Time

# ASCII only: str.isdigit() would also accept other Unicode digits.
_DIGITS_RE = re.compile(r"[0-9]+")
_ARROW_RE = re.compile(r"[ \t]*-->[ \t]*")

U8_MAX = 0xFF
U16_MAX = 0xFFFF


def _fail(err: Type[SrtParseError], text: str, pos: int, what: str) -> SrtParseError:
    if pos >= len(text):
        return UnexpectedEndOfInput.at(text, pos, f"unexpected end of input, expected {what}")
    return err.at(text, pos, f"expected {what}, found {text[pos:pos + 12]!r}")


def parse_digits(
    text: str,
    pos: int,
    *,
    max_value: int,
    err: Type[SrtParseError],
    what: str,
) -> Tuple[int, int]:
    """Parse one run of ASCII digits that must fit ``max_value``."""
    m = _DIGITS_RE.match(text, pos)
    if not m:
        raise _fail(err, text, pos, what)
    digits = m.group().lstrip("0") or "0"
    # length check first: int() refuses very long digit strings
    if len(digits) > len(str(max_value)) or int(digits) > max_value:
        shown = digits if len(digits) <= 20 else digits[:20] + "..."
        raise err.at(text, pos, f"{what} out of range: {shown} > {max_value}")
    return m.end(), int(digits)


def _expect(text: str, pos: int, literal: str, what: str) -> int:
    if text.startswith(literal, pos):
        return pos + len(literal)
    raise _fail(MalformedTimestamp, text, pos, what)


# 00:00:49,174
def parse_time(text: str, pos: int = 0) -> Tuple[int, Time]:
    pos, hours = parse_digits(text, pos, max_value=U8_MAX, err=MalformedTimestamp, what="hours")
    pos = _expect(text, pos, ":", "':' after hours")
    pos, minutes = parse_digits(text, pos, max_value=U8_MAX, err=MalformedTimestamp, what="minutes")
    pos = _expect(text, pos, ":", "':' after minutes")
    pos, seconds = parse_digits(text, pos, max_value=U8_MAX, err=MalformedTimestamp, what="seconds")
    pos = _expect(text, pos, ",", "',' after seconds")
    pos, millis = parse_digits(text, pos, max_value=U16_MAX, err=MalformedTimestamp, what="milliseconds")
    return pos, Time(hours=hours, minutes=minutes, seconds=seconds, milliseconds=millis)


# 00:00:49,174 --> 00:00:52,593
def parse_time_range(text: str, pos: int = 0) -> Tuple[int, Tuple[Time, Time]]:
    pos, start = parse_time(text, pos)
    m = _ARROW_RE.match(text, pos)
    if not m:
        raise _fail(MalformedArrow, text, pos, "'-->'")
    pos, end = parse_time(text, m.end())
    return pos, (start, end)


def to_duration(time: Time) -> int:
    return time.to_duration()
