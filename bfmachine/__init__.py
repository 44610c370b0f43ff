from __future__ import annotations

from bfmachine.brackets import check_brackets, matching_close, matching_open
from bfmachine.errors import (
    BFError,
    ErrorKind,
    ExecutionCancelled,
    HeadOutOfBounds,
    InputExhausted,
    InvalidCharacter,
    MachineHalted,
    UnmatchedBracket,
)
from bfmachine.instructions import Instruction, Program
from bfmachine.io import ByteInput, ByteOutput, BytesInput, BytesOutput, StreamInput, StreamOutput
from bfmachine.machine import DEFAULT_TAPE_SIZE, Machine, run_source
from bfmachine.parser import parse
from bfmachine.schemas import ErrorReport, MachineSnapshot, MachineState, RunReport

__all__ = [
    "__version__",
    # Parsing
    "Instruction",
    "Program",
    "parse",
    # Brackets
    "check_brackets",
    "matching_close",
    "matching_open",
    # Machine
    "DEFAULT_TAPE_SIZE",
    "Machine",
    "MachineState",
    "run_source",
    # I/O
    "ByteInput",
    "ByteOutput",
    "BytesInput",
    "BytesOutput",
    "StreamInput",
    "StreamOutput",
    # Errors
    "BFError",
    "ErrorKind",
    "InvalidCharacter",
    "UnmatchedBracket",
    "HeadOutOfBounds",
    "InputExhausted",
    "MachineHalted",
    "ExecutionCancelled",
    # Schemas
    "RunReport",
    "MachineSnapshot",
    "ErrorReport",
]

__version__ = "0.1.0"
