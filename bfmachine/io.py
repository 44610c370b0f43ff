from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ByteInput(Protocol):
    """Source of input bytes. `read_byte` returns None once exhausted."""

    def read_byte(self) -> int | None: ...


@runtime_checkable
class ByteOutput(Protocol):
    def write_byte(self, value: int) -> None: ...


class BytesInput:
    def __init__(self, data: bytes | bytearray | str = b"") -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> int | None:
        if self._pos >= len(self._data):
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> bytes:
        return self._data[self._pos :]


class BytesOutput:
    def __init__(self) -> None:
        self._buf = bytearray()

    def write_byte(self, value: int) -> None:
        self._buf.append(value)

    def getvalue(self) -> bytes:
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)


class StreamInput:
    """Reads one byte at a time from a binary stream (e.g. `sys.stdin.buffer`).

    If `echo` is given it is flushed before every blocking read so prompts
    written by the program are visible.
    """

    def __init__(self, stream: BinaryIO, *, echo: StreamOutput | None = None) -> None:
        self._stream = stream
        self._echo = echo

    def read_byte(self) -> int | None:
        if self._echo is not None:
            self._echo.flush()
        chunk = self._stream.read(1)
        if not chunk:
            return None
        return chunk[0]


class StreamOutput:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write_byte(self, value: int) -> None:
        self._stream.write(bytes((value,)))
        if value == 0x0A:
            self._stream.flush()

    def flush(self) -> None:
        self._stream.flush()
