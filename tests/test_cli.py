import logging
from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from srtcsv.cli.main import app

runner = CliRunner()

FIXTURES = Path(__file__).resolve().parent / "fixtures"

SAMPLE = (FIXTURES / "two_blocks.srt").read_text(encoding="utf-8")

EXPECTED_CSV = (
    "index,start,end,text\n"
    '1,49174,52593,"- Is everything in place?\n- You\'re not to relieve me."\n'
    '2,52844,55471,"I know, but I felt like taking a shift."\n'
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for k in ("SRTCSV_LOG_LEVEL", "SRTCSV_LOG_PATH", "SRTCSV_INPUT_ENCODING", "SRTCSV_ON_ERROR"):
        monkeypatch.delenv(k, raising=False)
    yield
    # handlers hold streams that CliRunner closes after each invoke
    logger = logging.getLogger("srtcsv")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_convert_stdin_to_stdout() -> None:
    result = runner.invoke(app, ["convert"], input=SAMPLE)
    assert result.exit_code == 0, result.output
    assert result.stdout == EXPECTED_CSV


def test_convert_dash_reads_stdin_with_bom() -> None:
    result = runner.invoke(app, ["convert", "-"], input="\ufeff" + SAMPLE)
    assert result.exit_code == 0, result.output
    assert result.stdout == EXPECTED_CSV


def test_convert_file_to_file(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "out.csv"
    result = runner.invoke(app, ["convert", str(FIXTURES / "two_blocks.srt"), "--out", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == EXPECTED_CSV


def test_convert_jsonl() -> None:
    result = runner.invoke(app, ["convert", "--format", "jsonl"], input=SAMPLE)
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    assert '"start": "49174"' in lines[0]


def test_convert_bad_format() -> None:
    result = runner.invoke(app, ["convert", "--format", "xml"], input=SAMPLE)
    assert result.exit_code == 2


def test_convert_malformed_writes_nothing(tmp_path: Path) -> None:
    out = tmp_path / "out.csv"
    result = runner.invoke(app, ["convert", str(FIXTURES / "bad_arrow.srt"), "--out", str(out)])
    assert result.exit_code == 1
    assert "malformed_arrow" in result.output
    assert "index,start,end,text" not in result.output
    assert not out.exists()


def test_convert_skip_mode(tmp_path: Path) -> None:
    out = tmp_path / "out.csv"
    result = runner.invoke(
        app,
        ["convert", str(FIXTURES / "bad_arrow.srt"), "--out", str(out), "--on-error", "skip"],
    )
    assert result.exit_code == 0, result.output
    rows = out.read_text(encoding="utf-8").splitlines()
    assert rows == ["index,start,end,text", "1,1000,2000,First", "3,5000,6000,Third"]


def test_convert_skip_mode_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SRTCSV_ON_ERROR", "skip")
    out = tmp_path / "out.csv"
    result = runner.invoke(app, ["convert", str(FIXTURES / "bad_arrow.srt"), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert len(out.read_text(encoding="utf-8").splitlines()) == 3


def test_convert_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["convert", str(tmp_path / "nope.srt")])
    assert result.exit_code == 1
    assert "cannot read input" in result.output


def test_convert_writes_debug_log(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log = tmp_path / "debug.log"
    monkeypatch.setenv("SRTCSV_LOG_PATH", str(log))
    out = tmp_path / "out.csv"
    result = runner.invoke(app, ["convert", str(FIXTURES / "two_blocks.srt"), "-o", str(out)])
    assert result.exit_code == 0, result.output
    text = log.read_text(encoding="utf-8")
    assert "SRT_BLOCK index=1" in text
    assert "CONVERT_DONE rows=2" in text


def test_check_summary() -> None:
    result = runner.invoke(app, ["check"], input=SAMPLE)
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "cues=2 first_start_ms=49174 last_end_ms=55471"


def test_check_empty() -> None:
    result = runner.invoke(app, ["check"], input="")
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "cues=0"


def test_check_malformed() -> None:
    result = runner.invoke(app, ["check", str(FIXTURES / "bad_arrow.srt")])
    assert result.exit_code == 1
    assert "line 6" in result.output


def test_convert_very_long_index_reports_diagnostic() -> None:
    result = runner.invoke(app, ["convert"], input="9" * 5000 + "\n00:00:01,000 --> 00:00:02,000\nA\n")
    assert result.exit_code == 1
    assert "malformed_index" in result.output
    assert "index,start,end,text" not in result.output
