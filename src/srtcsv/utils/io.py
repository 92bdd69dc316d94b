import contextlib
import io
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: Optional[Path], encoding: str = "utf-8") -> str:
    # None or "-" means stdin; the whole input is read before parsing.
    if path is None or str(path) == "-":
        if not hasattr(sys.stdin, "buffer"):
            return sys.stdin.read()
        wrapper = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, newline="")
        try:
            return wrapper.read()
        finally:
            # leave sys.stdin.buffer open for the caller
            wrapper.detach()
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


@contextlib.contextmanager
def open_output(path: Optional[Path], encoding: str = "utf-8") -> Iterator[TextIO]:
    if path is None or str(path) == "-":
        yield sys.stdout
        sys.stdout.flush()
        return
    ensure_dir(path.parent)
    with open(path, "w", encoding=encoding, newline="") as f:
        yield f
