"""Functional tests for line input, text output and whitespace helpers."""

from __future__ import annotations

import io

import pytest

from promptline.errors import StreamError
from promptline.logic.text_io import (
    StreamLineReader,
    StreamWriter,
    read_full_line,
    say,
    say_trimmed,
    trailing_whitespace,
    trailing_whitespace_index,
)


class BrokenStream(io.StringIO):
    def readline(self, size=-1):
        raise OSError("device gone")

    def write(self, s):
        raise OSError("device gone")


def test_trailing_whitespace_index() -> None:
    assert trailing_whitespace_index("Name? ") == 5
    assert trailing_whitespace_index("Name?") == -1
    assert trailing_whitespace_index("   ") == 0
    assert trailing_whitespace_index("") == -1
    assert trailing_whitespace("Q:\t \n") == "\t \n"
    assert trailing_whitespace("Q:") == ""


def test_say_adds_newline_only_when_needed(writer) -> None:
    say(writer, "Continue? ")
    say(writer, "done")
    say(writer, "")
    assert writer.writes == ["Continue? ", "done\n", "\n"]


def test_say_trimmed_strips_then_terminates_line(writer) -> None:
    say_trimmed(writer, "item   \t")
    assert writer.writes == ["item\n"]


def test_stream_reader_strips_line_endings() -> None:
    reader = StreamLineReader(io.StringIO("one\r\ntwo\nthree"))
    assert reader.read_line() == (b"one", False)
    assert reader.read_line() == (b"two", False)
    assert reader.read_line() == (b"three", False)
    with pytest.raises(StreamError):
        reader.read_line()


def test_stream_reader_returns_partial_chunks_for_long_lines() -> None:
    reader = StreamLineReader(io.BytesIO(b"abcdefg\nh\n"), buffer_size=3)
    assert reader.read_line() == (b"abc", True)
    assert reader.read_line() == (b"def", True)
    assert reader.read_line() == (b"g", False)
    assert read_full_line(reader) == "h"


def test_read_full_line_assembles_and_decodes_utf8() -> None:
    reader = StreamLineReader(io.BytesIO("héllo wörld\n".encode("utf-8")), buffer_size=4)
    assert read_full_line(reader) == "héllo wörld"


def test_stream_reader_wraps_os_errors() -> None:
    with pytest.raises(StreamError) as exc:
        StreamLineReader(BrokenStream()).read_line()
    assert exc.value.code == "IO_STREAM_READ_FAILED"


def test_stream_writer_counts_and_wraps_errors() -> None:
    out = io.StringIO()
    assert StreamWriter(out).write_text("hi\n") == 3
    assert out.getvalue() == "hi\n"
    with pytest.raises(StreamError) as exc:
        StreamWriter(BrokenStream()).write_text("x")
    assert exc.value.code == "IO_STREAM_WRITE_FAILED"


def test_say_defaults_to_stdout(capsys) -> None:
    say(None, "hello")
    assert capsys.readouterr().out == "hello\n"
