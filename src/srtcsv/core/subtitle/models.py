from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Time:
    """
    A point on the subtitle timeline, as written in the source.

    Notes:
    - fields are kept verbatim; minutes=75 is not normalized.
    - hours/minutes/seconds fit 0..255, milliseconds 0..65535 (enforced by the decoder).
    """
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def __post_init__(self) -> None:
        if min(self.hours, self.minutes, self.seconds, self.milliseconds) < 0:
            raise ValueError("time fields must be non-negative")

    def to_duration(self) -> int:
        """Total milliseconds since 0:00:00,000."""
        return self.milliseconds + 1000 * self.seconds + 60000 * self.minutes + 3600000 * self.hours

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}:{self.seconds},{self.milliseconds}"


@dataclass(frozen=True)
class SubTitle:
    """
    A single decoded SRT block.

    Notes:
    - index is the number written in the source, never renumbered.
    - text preserves inner line breaks with '\n'; outer whitespace is trimmed.
    """
    index: int
    start: Time
    end: Time
    text: str

    @property
    def start_ms(self) -> int:
        return self.start.to_duration()

    @property
    def end_ms(self) -> int:
        return self.end.to_duration()

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n") if self.text else []
