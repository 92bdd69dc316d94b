from __future__ import annotations

import csv
import json
from typing import Iterable, List, TextIO

from srtcsv.core.subtitle.models import SubTitle
from srtcsv.core_types import CSV_HEADER, SubtitleRecord


def to_records(subs: Iterable[SubTitle]) -> List[SubtitleRecord]:
    return [SubtitleRecord.from_subtitle(s) for s in subs]


def write_csv(subs: Iterable[SubTitle], stream: TextIO) -> int:
    """
    Write header + one row per subtitle.

    Quoting is left to the csv module (fields holding ',', '"' or line
    breaks are quoted). Returns the number of data rows.
    """
    w = csv.writer(stream, lineterminator="\n")
    w.writerow(CSV_HEADER)
    n = 0
    for rec in to_records(subs):
        w.writerow(rec.as_row())
        n += 1
    return n


def write_jsonl(subs: Iterable[SubTitle], stream: TextIO) -> int:
    n = 0
    for rec in to_records(subs):
        stream.write(json.dumps(rec.model_dump(), ensure_ascii=False))
        stream.write("\n")
        n += 1
    return n


WRITERS = {
    "csv": write_csv,
    "jsonl": write_jsonl,
}
