from __future__ import annotations

"""Functional test bootstrap for promptline.

Provides scripted line readers and recording writers so the answer engine
can be driven without a terminal, and isolates every test from ambient
configuration (environment variables, `config/` overrides and
`promptline_config.json`) by running it in a clean working directory.
"""

from typing import List, Tuple

import pytest

from promptline.errors import StreamError


class ScriptedReader:
    """LineReader that replays scripted lines and records how many it served."""

    def __init__(self, lines: List[str], chunk_size: int = 0) -> None:
        self._chunks: List[Tuple[bytes, bool]] = []
        for line in lines:
            data = line.rstrip("\n").encode("utf-8")
            if chunk_size > 0 and len(data) > chunk_size:
                parts = [data[i:i + chunk_size] for i in range(0, len(data), chunk_size)]
                for part in parts[:-1]:
                    self._chunks.append((part, True))
                self._chunks.append((parts[-1], False))
            else:
                self._chunks.append((data, False))
        self.reads = 0

    def read_line(self) -> Tuple[bytes, bool]:
        if not self._chunks:
            raise StreamError("unexpected end of input")
        self.reads += 1
        return self._chunks.pop(0)


class RecordingWriter:
    def __init__(self) -> None:
        self.writes: List[str] = []

    def write_text(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    @property
    def text(self) -> str:
        return "".join(self.writes)

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no PROMPTLINE_* overrides."""
    for key in ("PROMPTLINE_WRAP_WIDTH", "PROMPTLINE_INLINE_JOIN", "PROMPTLINE_ERROR_PREFIX", "PROMPTLINE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def make_reader():
    def _make(*lines: str, chunk_size: int = 0) -> ScriptedReader:
        return ScriptedReader(list(lines), chunk_size=chunk_size)

    return _make
