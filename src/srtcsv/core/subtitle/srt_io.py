from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TextIO

from .models import SubTitle
from .srt_parser import ParseOptions, parse_document


def read_srt(path: str | Path, encoding: str = "utf-8", *, options: Optional[ParseOptions] = None) -> List[SubTitle]:
    """
    Read a .srt file into a list of SubTitle.

    - The whole file is decoded before parsing starts.
    - UTF-8 BOM and CRLF line endings are handled by the parser.
    """
    p = Path(path)
    # newline="" keeps '\r\n' intact; the parser normalizes it itself.
    with open(p, "r", encoding=encoding, newline="") as f:
        raw = f.read()
    return parse_document(raw, options=options)


def read_srt_stream(stream: TextIO, *, options: Optional[ParseOptions] = None) -> List[SubTitle]:
    return parse_document(stream.read(), options=options)
