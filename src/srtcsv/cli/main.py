from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from srtcsv.config import CliConfig, load_config
from srtcsv.core.export.records import WRITERS
from srtcsv.core.subtitle.errors import SrtParseError
from srtcsv.core.subtitle.srt_parser import DecodeResult, ParseOptions, decode_document
from srtcsv.utils.io import open_output, read_text
from srtcsv.utils.logger import configure_logging, parse_level

app = typer.Typer(help="Convert SubRip (.srt) subtitles into CSV rows (index,start,end,text)")


def _normalize_format(fmt: str) -> str:
    f = (fmt or "").strip().lower()
    if f not in WRITERS:
        raise typer.BadParameter(f"format must be one of: {', '.join(sorted(WRITERS))}")
    return f


def _normalize_on_error(v: Optional[str], cfg: CliConfig) -> str:
    if v is None:
        return cfg.on_error
    v2 = v.strip().lower()
    if v2 not in ("fail", "skip"):
        raise typer.BadParameter("on-error must be one of: fail, skip")
    return v2


def _setup(cfg: CliConfig, log_level: Optional[str]):
    try:
        level = parse_level(log_level or cfg.log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    return configure_logging(logger_name="srtcsv", console_level=level, log_path=(cfg.log_path or None))


def _decode(input: Optional[Path], encoding: str, on_error: str) -> DecodeResult:
    """Read all input, then parse. Exit 1 (nothing written) on the first error in fail mode."""
    try:
        raw = read_text(input, encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"error: cannot read input: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        return decode_document(raw, options=ParseOptions(on_error=on_error))  # type: ignore[arg-type]
    except SrtParseError as e:
        typer.echo(f"error: {e.code}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def convert(
    input: Optional[Path] = typer.Argument(None, help="Input .srt file (default: stdin, or '-')"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output file (default: stdout)"),
    fmt: str = typer.Option("csv", "--format", "-f", help="Output format: csv/jsonl"),
    encoding: Optional[str] = typer.Option(None, help="Input encoding (default: SRTCSV_INPUT_ENCODING or utf-8)"),
    on_error: Optional[str] = typer.Option(
        None,
        "--on-error",
        help="fail = abort on the first malformed block (default); skip = drop malformed blocks",
    ),
    log_level: Optional[str] = typer.Option(None, help="Console log level (default: SRTCSV_LOG_LEVEL or WARNING)"),
):
    """Parse an SRT document and write one record per cue."""
    cfg = load_config()
    logger = _setup(cfg, log_level)
    f = _normalize_format(fmt)
    mode = _normalize_on_error(on_error, cfg)

    res = _decode(input, encoding or cfg.input_encoding, mode)

    with open_output(out) as stream:
        n = WRITERS[f](res.subtitles, stream)

    logger.info("CONVERT_DONE rows=%d skipped=%d format=%s", n, len(res.skipped), f)


@app.command()
def check(
    input: Optional[Path] = typer.Argument(None, help="Input .srt file (default: stdin, or '-')"),
    encoding: Optional[str] = typer.Option(None, help="Input encoding"),
    log_level: Optional[str] = typer.Option(None, help="Console log level"),
):
    """Parse an SRT document and print a one-line summary."""
    cfg = load_config()
    _setup(cfg, log_level)

    res = _decode(input, encoding or cfg.input_encoding, "fail")
    subs = res.subtitles
    if not subs:
        typer.echo("cues=0")
        return
    typer.echo(f"cues={len(subs)} first_start_ms={subs[0].start_ms} last_end_ms={subs[-1].end_ms}")


if __name__ == "__main__":
    app()
