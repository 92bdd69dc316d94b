from __future__ import annotations

from srtcsv.core.subtitle.errors import (
    MalformedArrow,
    MalformedIndex,
    MalformedTimestamp,
    MissingLineBreak,
    SrtParseError,
    UnexpectedEndOfInput,
)
from srtcsv.core.subtitle.models import SubTitle, Time
from srtcsv.core.subtitle.srt_io import read_srt, read_srt_stream
from srtcsv.core.subtitle.srt_parser import (
    DecodeResult,
    ParseOptions,
    decode_document,
    parse_block,
    parse_document,
)
from srtcsv.core.subtitle.timecode import parse_time, parse_time_range, to_duration

__all__ = [
    "Time",
    "SubTitle",
    "SrtParseError",
    "MalformedIndex",
    "MalformedTimestamp",
    "MalformedArrow",
    "MissingLineBreak",
    "UnexpectedEndOfInput",
    "ParseOptions",
    "DecodeResult",
    "parse_time",
    "parse_time_range",
    "to_duration",
    "parse_block",
    "parse_document",
    "decode_document",
    "read_srt",
    "read_srt_stream",
]
