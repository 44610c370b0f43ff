from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_CHARACTER = "invalid_character"
    UNMATCHED_BRACKET = "unmatched_bracket"
    HEAD_OUT_OF_BOUNDS = "head_out_of_bounds"
    INPUT_EXHAUSTED = "input_exhausted"


class BFError(Exception):
    """Base class for errors caused by the program being run.

    `position` is an index into the stripped source for parse errors and the
    program counter for runtime errors.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, position: int) -> None:
        self.position = position
        super().__init__(f"{self.kind.value} at position {position}: {message}")


class InvalidCharacter(BFError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, *, position: int) -> None:
        self.char = char
        super().__init__(f"unrecognized character {char!r}", position=position)


class UnmatchedBracket(BFError):
    kind = ErrorKind.UNMATCHED_BRACKET

    def __init__(self, bracket: str, *, position: int) -> None:
        self.bracket = bracket
        super().__init__(f"no partner for {bracket!r}", position=position)


class HeadOutOfBounds(BFError):
    kind = ErrorKind.HEAD_OUT_OF_BOUNDS

    def __init__(self, *, head: int, capacity: int, position: int) -> None:
        self.head = head
        self.capacity = capacity
        super().__init__(
            f"head would move to {head} outside tape [0, {capacity})", position=position
        )


class InputExhausted(BFError):
    kind = ErrorKind.INPUT_EXHAUSTED

    def __init__(self, *, position: int) -> None:
        super().__init__("input stream has no more bytes", position=position)


class MachineHalted(RuntimeError):
    pass


class ExecutionCancelled(RuntimeError):
    def __init__(self, *, steps: int, pc: int) -> None:
        self.steps = steps
        self.pc = pc
        super().__init__(f"execution cancelled after {steps} steps at pc={pc}")
