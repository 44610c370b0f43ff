from __future__ import annotations

import logging

from bfmachine.brackets import check_brackets
from bfmachine.errors import InvalidCharacter
from bfmachine.instructions import Instruction, Program

logger = logging.getLogger(__name__)

_TABLE: dict[str, Instruction] = {i.value: i for i in Instruction}


def parse(source: str) -> Program:
    # Only the ends are trimmed; whitespace between commands is rejected.
    text = source.strip()

    instructions: list[Instruction] = []
    for pos, ch in enumerate(text):
        instr = _TABLE.get(ch)
        if instr is None:
            raise InvalidCharacter(ch, position=pos)
        instructions.append(instr)

    program = Program(tuple(instructions))
    check_brackets(program)
    logger.debug("parsed %d instructions", len(program))
    return program
