from enum import Enum

from svm.common.hwconf import NUMBER_OF_REGISTERS, WORD_MASK


class Register(Enum):
    A = 'A'
    B = 'B'
    C = 'C'
    M = 'M'
    SP = 'SP'   # Stack pointer
    PC = 'PC'   # Program counter
    BP = 'BP'
    FLAGS = 'FLAGS'


REGISTER_INDICES = {
    Register.A: 0,
    Register.B: 1,
    Register.C: 2,
    Register.M: 3,
    Register.SP: 4,
    Register.PC: 5,
    Register.BP: 6,
    Register.FLAGS: 7
}

REGISTERS_BY_INDEX = {index: reg for reg, index in REGISTER_INDICES.items()}


def from_index(index: int) -> Register | None:
    return REGISTERS_BY_INDEX.get(index)


class RegisterFile:
    cells: list[int]

    def __init__(self):
        self.cells = [0] * NUMBER_OF_REGISTERS

    def __getitem__(self, reg: Register) -> int:
        return self.cells[REGISTER_INDICES[reg]]

    def __setitem__(self, reg: Register, value: int):
        self.cells[REGISTER_INDICES[reg]] = value & WORD_MASK

    def items(self):
        return [(reg, self[reg]) for reg in REGISTER_INDICES]
