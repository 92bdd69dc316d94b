from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


def line_col(text: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of ``offset`` in ``text``."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, col


@dataclass
class SrtParseError(Exception):
    """
    Typed parse error carrying a stable machine-readable code.

    offset:
      - index into the decoded (newline-normalized) text
    line/column:
      - 1-based, derived from offset
    """

    message: str
    code: str = "parse_error"
    offset: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "position": {"offset": self.offset, "line": self.line, "column": self.column},
        }

    @classmethod
    def at(cls, text: str, offset: int, message: str) -> "SrtParseError":
        line, col = line_col(text, offset)
        return cls(message=message, offset=offset, line=line, column=col)


class MalformedIndex(SrtParseError):
    def __init__(self, message: str, *, offset: int = 0, line: int = 1, column: int = 1) -> None:
        super().__init__(code="malformed_index", message=message, offset=offset, line=line, column=column)


class MalformedTimestamp(SrtParseError):
    def __init__(self, message: str, *, offset: int = 0, line: int = 1, column: int = 1) -> None:
        super().__init__(code="malformed_timestamp", message=message, offset=offset, line=line, column=column)


class MalformedArrow(SrtParseError):
    def __init__(self, message: str, *, offset: int = 0, line: int = 1, column: int = 1) -> None:
        super().__init__(code="malformed_arrow", message=message, offset=offset, line=line, column=column)


class MissingLineBreak(SrtParseError):
    def __init__(self, message: str, *, offset: int = 0, line: int = 1, column: int = 1) -> None:
        super().__init__(code="missing_line_break", message=message, offset=offset, line=line, column=column)


class UnexpectedEndOfInput(SrtParseError):
    def __init__(self, message: str, *, offset: int = 0, line: int = 1, column: int = 1) -> None:
        super().__init__(code="unexpected_eof", message=message, offset=offset, line=line, column=column)
