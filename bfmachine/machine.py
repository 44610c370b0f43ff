from __future__ import annotations

import logging
from collections.abc import Callable

from bfmachine.brackets import matching_close, matching_open
from bfmachine.errors import ExecutionCancelled, HeadOutOfBounds, InputExhausted, MachineHalted
from bfmachine.instructions import Instruction, Program
from bfmachine.io import ByteInput, ByteOutput, BytesInput, BytesOutput
from bfmachine.parser import parse
from bfmachine.schemas import MachineSnapshot, MachineState, RunReport

logger = logging.getLogger(__name__)

DEFAULT_TAPE_SIZE = 30000


class Machine:
    """Fetch-execute loop over a fixed byte tape.

    A failing step raises before touching any state, so `pc` keeps pointing
    at the offending instruction and earlier effects stay in place.
    """

    def __init__(
        self,
        program: Program | str,
        *,
        tape_size: int = DEFAULT_TAPE_SIZE,
        input: ByteInput | None = None,
        output: ByteOutput | None = None,
    ) -> None:
        if tape_size < 1:
            raise ValueError("tape_size must be >= 1")
        if isinstance(program, str):
            program = parse(program)
        self.program = program
        self.input: ByteInput = input if input is not None else BytesInput()
        self.output: ByteOutput = output if output is not None else BytesOutput()

        self._tape = bytearray(tape_size)
        self._head = 0
        self._pc = 0
        self._steps = 0
        self._input_bytes = 0
        self._output_bytes = 0

        self._ops: dict[Instruction, Callable[[], None]] = {
            Instruction.MOVE_RIGHT: self._move_right,
            Instruction.MOVE_LEFT: self._move_left,
            Instruction.INCREMENT: self._increment,
            Instruction.DECREMENT: self._decrement,
            Instruction.OUTPUT: self._write,
            Instruction.INPUT: self._read,
            Instruction.LOOP_OPEN: self._jump_if_zero,
            Instruction.LOOP_CLOSE: self._jump_unless_zero,
        }

    @property
    def head(self) -> int:
        return self._head

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def capacity(self) -> int:
        return len(self._tape)

    @property
    def cell(self) -> int:
        return self._tape[self._head]

    @property
    def tape(self) -> memoryview:
        return memoryview(self._tape).toreadonly()

    @property
    def state(self) -> MachineState:
        if self._pc < len(self.program):
            return MachineState.RUNNING
        return MachineState.HALTED

    @property
    def halted(self) -> bool:
        return self.state is MachineState.HALTED

    def _move_right(self) -> None:
        if self._head + 1 >= len(self._tape):
            raise HeadOutOfBounds(head=self._head + 1, capacity=len(self._tape), position=self._pc)
        self._head += 1
        self._pc += 1

    def _move_left(self) -> None:
        if self._head == 0:
            raise HeadOutOfBounds(head=-1, capacity=len(self._tape), position=self._pc)
        self._head -= 1
        self._pc += 1

    def _increment(self) -> None:
        self._tape[self._head] = (self._tape[self._head] + 1) % 256
        self._pc += 1

    def _decrement(self) -> None:
        self._tape[self._head] = (self._tape[self._head] - 1) % 256
        self._pc += 1

    def _write(self) -> None:
        self.output.write_byte(self._tape[self._head])
        self._output_bytes += 1
        self._pc += 1

    def _read(self) -> None:
        value = self.input.read_byte()
        if value is None:
            raise InputExhausted(position=self._pc)
        self._tape[self._head] = value
        self._input_bytes += 1
        self._pc += 1

    def _jump_if_zero(self) -> None:
        if self._tape[self._head] == 0:
            target = matching_close(self.program, self._pc)
            logger.debug("skip loop %d -> %d", self._pc, target)
            self._pc = target
        else:
            self._pc += 1

    def _jump_unless_zero(self) -> None:
        if self._tape[self._head] != 0:
            target = matching_open(self.program, self._pc)
            logger.debug("repeat loop %d -> %d", self._pc, target)
            self._pc = target
        else:
            self._pc += 1

    def step(self) -> MachineState:
        if self._pc >= len(self.program):
            raise MachineHalted(f"program finished at pc={self._pc}")
        self._ops[self.program[self._pc]]()
        self._steps += 1
        return self.state

    def run(
        self,
        *,
        should_stop: Callable[[], bool] | None = None,
        max_steps: int | None = None,
    ) -> RunReport:
        """Step until the program counter runs off the end of the program.

        `should_stop` is polled between steps; `max_steps` caps the machine's
        total step count. Either one raises `ExecutionCancelled`.
        """
        logger.info(
            "run start: %d instructions, tape size %d", len(self.program), len(self._tape)
        )
        while self._pc < len(self.program):
            if max_steps is not None and self._steps >= max_steps:
                raise ExecutionCancelled(steps=self._steps, pc=self._pc)
            if should_stop is not None and should_stop():
                raise ExecutionCancelled(steps=self._steps, pc=self._pc)
            self.step()
        logger.info("run halted after %d steps", self._steps)
        return self.report()

    def report(self) -> RunReport:
        return RunReport(
            steps=self._steps,
            output_bytes=self._output_bytes,
            input_bytes=self._input_bytes,
            head=self._head,
            pc=self._pc,
            program_length=len(self.program),
            halted=self.halted,
        )

    def snapshot(self, *, window: int = 8) -> MachineSnapshot:
        start = max(0, self._head - window)
        end = min(len(self._tape), self._head + window + 1)
        instruction = self.program[self._pc].value if self._pc < len(self.program) else None
        return MachineSnapshot(
            pc=self._pc,
            head=self._head,
            state=self.state,
            steps=self._steps,
            instruction=instruction,
            window_start=start,
            cells=list(self._tape[start:end]),
        )


def run_source(
    source: str,
    *,
    input: bytes | str = b"",
    tape_size: int = DEFAULT_TAPE_SIZE,
) -> bytes:
    """Parse and run `source` against an in-memory input, returning the output bytes."""
    out = BytesOutput()
    Machine(source, tape_size=tape_size, input=BytesInput(input), output=out).run()
    return out.getvalue()
