from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from srtcsv.utils.logger import get_logger

from .errors import MalformedIndex, MissingLineBreak, SrtParseError, UnexpectedEndOfInput
from .models import SubTitle
from .timecode import parse_digits, parse_time_range

logger = get_logger("srtcsv.parser")

OnError = Literal["fail", "skip"]

BOM = "\ufeff"
U32_MAX = 0xFFFFFFFF

_HSPACE_RE = re.compile(r"[ \t]*")
# Blank lines (possibly holding only horizontal whitespace) between blocks.
_BLANK_LINES_RE = re.compile(r"(?:[ \t]*\n)*")
_TERMINATOR = "\n\n"
_TRAILING_SPACE_RE = re.compile(r"\s*\Z")


@dataclass(frozen=True)
class ParseOptions:
    """
    Driver knobs.

    on_error:
      - "fail": first malformed block aborts the document, nothing is returned
      - "skip": malformed blocks are logged, recorded and skipped up to the next blank line
    strip_bom:
      - drop one leading U+FEFF
    """
    on_error: OnError = "fail"
    strip_bom: bool = True

    def __post_init__(self) -> None:
        if self.on_error not in ("fail", "skip"):
            raise ValueError(f"on_error must be one of: fail, skip (got {self.on_error!r})")


@dataclass
class DecodeResult:
    subtitles: List[SubTitle] = field(default_factory=list)
    skipped: List[SrtParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def _line_break(text: str, pos: int, after: str) -> int:
    pos = _HSPACE_RE.match(text, pos).end()
    if pos >= len(text):
        raise UnexpectedEndOfInput.at(text, pos, f"unexpected end of input, expected line break after {after}")
    if text[pos] != "\n":
        raise MissingLineBreak.at(text, pos, f"expected line break after {after}, found {text[pos:pos + 12]!r}")
    return pos + 1


def _text_span(text: str, pos: int) -> Tuple[int, str]:
    # The line break closing the timecode line is already consumed, so a
    # caption that starts with another one is empty.
    if text.startswith("\n", pos):
        return pos + 1, ""
    end = text.find(_TERMINATOR, pos)
    if end < 0:
        return len(text), text[pos:].strip()
    return end + len(_TERMINATOR), text[pos:end].strip()


# 1
# 00:00:49,174 --> 00:00:52,593
# - Is everything in place?
# - You're not to relieve me.
def parse_block(text: str, pos: int = 0) -> Tuple[int, SubTitle]:
    """
    Decode one block starting at ``pos``.

    ``text`` must already use LF line endings (see normalize_newlines).
    Returns the position just past the block terminator.
    """
    pos, index = parse_digits(text, pos, max_value=U32_MAX, err=MalformedIndex, what="cue index")
    pos = _line_break(text, pos, "cue index")
    pos, (start, end) = parse_time_range(text, pos)
    pos = _line_break(text, pos, "timecode line")
    pos, body = _text_span(text, pos)
    return pos, SubTitle(index=index, start=start, end=end, text=body)


def _skip_blank_lines(text: str, pos: int) -> int:
    pos = _BLANK_LINES_RE.match(text, pos).end()
    if _TRAILING_SPACE_RE.match(text, pos):
        return len(text)
    return pos


def _resync(text: str, pos: int) -> int:
    end = text.find(_TERMINATOR, pos)
    return len(text) if end < 0 else end + len(_TERMINATOR)


def decode_document(text: str, *, options: Optional[ParseOptions] = None) -> DecodeResult:
    """
    Decode a whole SRT document held in memory.

    - Strips one leading BOM.
    - Normalizes CRLF to LF once, so mixed line endings are accepted.
    - Skips blank lines around blocks.
    - on_error="fail" raises the first SrtParseError; on_error="skip" collects them.
    """
    opts = options or ParseOptions()
    if opts.strip_bom and text.startswith(BOM):
        text = text[len(BOM):]
    text = normalize_newlines(text)

    result = DecodeResult()
    pos = _skip_blank_lines(text, 0)
    while pos < len(text):
        block_start = pos
        try:
            pos, sub = parse_block(text, pos)
        except SrtParseError as e:
            if opts.on_error == "fail":
                raise
            logger.warning("SRT_BLOCK_SKIPPED code=%s %s", e.code, e)
            result.skipped.append(e)
            pos = _resync(text, block_start)
        else:
            logger.debug("SRT_BLOCK index=%d start=%s end=%s", sub.index, sub.start, sub.end)
            result.subtitles.append(sub)
        pos = _skip_blank_lines(text, pos)

    logger.debug("SRT_DOCUMENT cues=%d skipped=%d", len(result.subtitles), len(result.skipped))
    return result


def parse_document(text: str, *, options: Optional[ParseOptions] = None) -> List[SubTitle]:
    return decode_document(text, options=options).subtitles
