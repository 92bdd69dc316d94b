from __future__ import annotations

from pydantic import BaseModel

from srtcsv.core.subtitle.models import SubTitle

CSV_HEADER = ("index", "start", "end", "text")


class SubtitleRecord(BaseModel):
    # all fields are strings, exactly as they land in a CSV cell
    index: str
    start: str
    end: str
    text: str

    @classmethod
    def from_subtitle(cls, sub: SubTitle) -> "SubtitleRecord":
        return cls(
            index=str(sub.index),
            start=str(sub.start.to_duration()),
            end=str(sub.end.to_duration()),
            text=sub.text,
        )

    def as_row(self) -> tuple[str, str, str, str]:
        return (self.index, self.start, self.end, self.text)
