from __future__ import annotations

from bfmachine.errors import UnmatchedBracket
from bfmachine.instructions import Instruction, Program


def matching_close(program: Program, open_position: int) -> int:
    """Return the position of the `]` that closes the `[` at `open_position`."""
    if program[open_position] is not Instruction.LOOP_OPEN:
        raise ValueError(f"no '[' at position {open_position}")

    depth = 0
    for pos in range(open_position + 1, len(program)):
        instr = program[pos]
        if instr is Instruction.LOOP_OPEN:
            depth += 1
        elif instr is Instruction.LOOP_CLOSE:
            if depth == 0:
                return pos
            depth -= 1
    raise UnmatchedBracket("[", position=open_position)


def matching_open(program: Program, close_position: int) -> int:
    """Return the position of the `[` that opens the `]` at `close_position`."""
    if program[close_position] is not Instruction.LOOP_CLOSE:
        raise ValueError(f"no ']' at position {close_position}")

    depth = 0
    for pos in range(close_position - 1, -1, -1):
        instr = program[pos]
        if instr is Instruction.LOOP_CLOSE:
            depth += 1
        elif instr is Instruction.LOOP_OPEN:
            if depth == 0:
                return pos
            depth -= 1
    raise UnmatchedBracket("]", position=close_position)


def check_brackets(program: Program) -> None:
    # Positions of currently unclosed '['; only the innermost is reported.
    open_positions: list[int] = []
    for pos, instr in enumerate(program):
        if instr is Instruction.LOOP_OPEN:
            open_positions.append(pos)
        elif instr is Instruction.LOOP_CLOSE:
            if not open_positions:
                raise UnmatchedBracket("]", position=pos)
            open_positions.pop()
    if open_positions:
        raise UnmatchedBracket("[", position=open_positions[-1])
