from __future__ import annotations

import io

import pytest

from bfmachine.errors import InputExhausted
from bfmachine.io import ByteInput, ByteOutput, BytesInput, BytesOutput, StreamInput, StreamOutput
from bfmachine.machine import Machine


def test_bytes_input_reads_then_exhausts() -> None:
    inp = BytesInput(b"hi")
    assert inp.read_byte() == ord("h")
    assert inp.remaining == b"i"
    assert inp.read_byte() == ord("i")
    assert inp.read_byte() is None
    assert inp.consumed == 2


def test_bytes_input_encodes_text_as_utf8() -> None:
    inp = BytesInput("é")
    assert [inp.read_byte(), inp.read_byte(), inp.read_byte()] == [0xC3, 0xA9, None]


def test_adapters_satisfy_protocols() -> None:
    assert isinstance(BytesInput(), ByteInput)
    assert isinstance(StreamInput(io.BytesIO()), ByteInput)
    assert isinstance(BytesOutput(), ByteOutput)
    assert isinstance(StreamOutput(io.BytesIO()), ByteOutput)


class _FlushCounter(io.BytesIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


def test_stream_output_flushes_on_newline() -> None:
    sink = _FlushCounter()
    out = StreamOutput(sink)
    out.write_byte(ord("a"))
    assert sink.flushes == 0
    out.write_byte(0x0A)
    assert sink.flushes == 1
    assert sink.getvalue() == b"a\n"


def test_stream_input_flushes_echo_before_read() -> None:
    sink = _FlushCounter()
    inp = StreamInput(io.BytesIO(b"x"), echo=StreamOutput(sink))
    assert inp.read_byte() == ord("x")
    assert inp.read_byte() is None
    assert sink.flushes == 2


def test_machine_with_streams() -> None:
    sink = io.BytesIO()
    m = Machine(",[.,]", input=StreamInput(io.BytesIO(b"cat")), output=StreamOutput(sink))
    # No zero byte ends the loop, so the read after "t" exhausts input.
    with pytest.raises(InputExhausted):
        m.run()
    assert sink.getvalue() == b"cat"
