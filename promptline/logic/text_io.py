"""Line input and text output collaborators.

The answer engine talks to the terminal only through two small interfaces:
- LineReader.read_line() -> (chunk, is_partial)
- TextWriter.write_text(text) -> characters written

Stream adapters over file-like objects are provided for both, together with
the `say` helpers that decide whether a trailing newline is needed.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, Callable, Optional, Protocol, Tuple

from promptline.errors import StreamError


logger = logging.getLogger(__name__)


class LineReader(Protocol):
    def read_line(self) -> Tuple[bytes, bool]:
        ...


class TextWriter(Protocol):
    def write_text(self, text: str) -> int:
        ...


class StreamLineReader:
    """Read lines from a text or binary stream in bounded chunks.

    A line longer than `buffer_size` is returned in several chunks, all but
    the last flagged as partial. End of input raises StreamError.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = 4096) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size

    def read_line(self) -> Tuple[bytes, bool]:
        try:
            chunk = self.stream.readline(self.buffer_size)
        except (OSError, ValueError) as exc:
            raise StreamError(f"failed to read input: {exc}", reason="stream_read") from exc
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if not chunk:
            logger.debug("stream_eof stream=%r", self.stream)
            raise StreamError("unexpected end of input", reason="stream_read")
        if chunk.endswith(b"\n"):
            chunk = chunk[:-1]
            if chunk.endswith(b"\r"):
                chunk = chunk[:-1]
            return chunk, False
        # A short read without newline is the final line of the stream
        return chunk, len(chunk) >= self.buffer_size


class StreamWriter:
    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream

    def write_text(self, text: str) -> int:
        try:
            count = self.stream.write(text)
            self.stream.flush()
        except OSError as exc:
            raise StreamError(f"failed to write output: {exc}", reason="stream_write") from exc
        return count if count is not None else len(text)


def default_reader() -> StreamLineReader:
    return StreamLineReader(sys.stdin)


def default_writer() -> StreamWriter:
    return StreamWriter(sys.stdout)


def read_full_line(reader: LineReader) -> str:
    """Assemble partial reads into one decoded line."""
    parts = []
    partial = True
    while partial:
        chunk, partial = reader.read_line()
        parts.append(chunk)
    return b"".join(parts).decode("utf-8", errors="replace")


def trailing_whitespace_index(s: str, is_space: Callable[[str], bool] = str.isspace) -> int:
    """Return the start index of the whitespace suffix of `s`, or -1 if none."""
    i = len(s)
    while i > 0 and is_space(s[i - 1]):
        i -= 1
    return i if i < len(s) else -1


def trailing_whitespace(s: str) -> str:
    i = trailing_whitespace_index(s)
    return s[i:] if i >= 0 else ""


def say(writer: Optional[TextWriter], msg: str) -> int:
    """Write `msg`, appending a newline unless it already ends in whitespace."""
    out = writer if writer is not None else default_writer()
    if msg and msg[-1].isspace():
        return out.write_text(msg)
    return out.write_text(msg + "\n")


def say_trimmed(writer: Optional[TextWriter], msg: str) -> int:
    return say(writer, msg.rstrip())


__all__ = [
    "LineReader",
    "TextWriter",
    "StreamLineReader",
    "StreamWriter",
    "default_reader",
    "default_writer",
    "read_full_line",
    "trailing_whitespace_index",
    "trailing_whitespace",
    "say",
    "say_trimmed",
]
