from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bfmachine.errors import BFError, ErrorKind


class MachineState(str, Enum):
    RUNNING = "running"
    HALTED = "halted"


class RunReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    steps: int = Field(ge=0)
    output_bytes: int = Field(ge=0)
    input_bytes: int = Field(ge=0)
    head: int = Field(ge=0)
    pc: int = Field(ge=0)
    program_length: int = Field(ge=0)
    halted: bool

    @model_validator(mode="after")
    def _pc_within_program(self) -> "RunReport":
        if self.pc > self.program_length:
            raise ValueError("pc must not exceed program_length")
        return self


class MachineSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    pc: int = Field(ge=0)
    head: int = Field(ge=0)
    state: MachineState
    steps: int = Field(ge=0)
    # Source character of the next instruction; None once halted.
    instruction: str | None = None
    window_start: int = Field(ge=0)
    cells: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def _cells_are_bytes(self) -> "MachineSnapshot":
        if any(not 0 <= c <= 255 for c in self.cells):
            raise ValueError("cells must be in range 0..255")
        return self


class ErrorReport(BaseModel):
    kind: ErrorKind
    position: int
    message: str

    @classmethod
    def from_error(cls, err: BFError) -> "ErrorReport":
        return cls(kind=err.kind, position=err.position, message=str(err))
