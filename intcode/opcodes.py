from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from intcode.errors import UnknownOpcode, UnknownParameterMode


class Opcode(int, Enum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE_BASE = 9
    HALT = 99


class ParameterMode(int, Enum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


# Number of parameters following each opcode.
ARITY: dict[Opcode, int] = {
    Opcode.ADD: 3,
    Opcode.MULTIPLY: 3,
    Opcode.INPUT: 1,
    Opcode.OUTPUT: 1,
    Opcode.JUMP_IF_TRUE: 2,
    Opcode.JUMP_IF_FALSE: 2,
    Opcode.LESS_THAN: 3,
    Opcode.EQUALS: 3,
    Opcode.ADJUST_RELATIVE_BASE: 1,
    Opcode.HALT: 0,
}


@dataclass(frozen=True, slots=True)
class Instruction:
    opcode: Opcode
    modes: tuple[ParameterMode, ...]
    address: int

    @property
    def arity(self) -> int:
        return len(self.modes)

    @property
    def width(self) -> int:
        return 1 + len(self.modes)


def decode(value: int, *, address: int) -> Instruction:
    """Split an instruction word into its opcode and per-parameter modes.

    The two low decimal digits select the opcode; each higher digit, least
    significant first, is the mode of the next parameter. Missing digits
    mean position mode.
    """
    if value < 0:
        raise UnknownOpcode(value, address=address, word=value)
    try:
        opcode = Opcode(value % 100)
    except ValueError as e:
        raise UnknownOpcode(value % 100, address=address, word=value) from e

    digits = value // 100
    modes: list[ParameterMode] = []
    for _ in range(ARITY[opcode]):
        digit = digits % 10
        digits //= 10
        try:
            modes.append(ParameterMode(digit))
        except ValueError as e:
            raise UnknownParameterMode(digit, address=address) from e
    return Instruction(opcode=opcode, modes=tuple(modes), address=address)
