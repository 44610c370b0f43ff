from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import overload


class Instruction(str, Enum):
    MOVE_RIGHT = ">"
    MOVE_LEFT = "<"
    INCREMENT = "+"
    DECREMENT = "-"
    OUTPUT = "."
    INPUT = ","
    LOOP_OPEN = "["
    LOOP_CLOSE = "]"


@dataclass(frozen=True, slots=True)
class Program:
    instructions: tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    @overload
    def __getitem__(self, index: int) -> Instruction: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Instruction, ...]: ...

    def __getitem__(self, index: int | slice) -> Instruction | tuple[Instruction, ...]:
        return self.instructions[index]

    def to_source(self) -> str:
        return "".join(i.value for i in self.instructions)
