from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CliConfig:
    """
    CLI runtime config (env-driven).
    Command-line options take precedence over these values.
    """

    # Console log level (stderr). File log (if any) is always DEBUG.
    log_level: str = os.getenv("SRTCSV_LOG_LEVEL", "WARNING")
    log_path: str = os.getenv("SRTCSV_LOG_PATH", "")

    # Text decoding of the input file / stdin
    input_encoding: str = os.getenv("SRTCSV_INPUT_ENCODING", "utf-8")

    # "fail" (all-or-nothing) or "skip" (drop malformed blocks)
    on_error: str = os.getenv("SRTCSV_ON_ERROR", "fail")

    def __post_init__(self) -> None:
        v = (self.on_error or "").strip().lower()
        if v not in ("fail", "skip"):
            raise ValueError(f"SRTCSV_ON_ERROR must be one of: fail, skip (got {self.on_error!r})")
        object.__setattr__(self, "on_error", v)


def load_config() -> CliConfig:
    # Read env at call time, not at import time.
    return CliConfig(
        log_level=os.getenv("SRTCSV_LOG_LEVEL", "WARNING"),
        log_path=os.getenv("SRTCSV_LOG_PATH", ""),
        input_encoding=os.getenv("SRTCSV_INPUT_ENCODING", "utf-8"),
        on_error=os.getenv("SRTCSV_ON_ERROR", "fail"),
    )
