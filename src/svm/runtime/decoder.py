'''
Instruction word layout (16 bits, little-endian in memory):

    [ operand : 8 | opcode : 8 ]

    PSH    operand = 8-bit immediate
    POP    operand = xxxx RRRR, register index in the low nibble
    ADS    no operand
    SIG    operand = signal code
'''

from dataclasses import dataclass
from typing import Callable

import svm.common.ops as ops
from svm.common.errors import DecodeError
from svm.runtime.registers import Register, REGISTER_INDICES, from_index


def check_byte(name: str, value: int):
    if value < 0 or value > 0xFF:
        raise ValueError(f'{name} 0x{value:X} does not fit in 8 bits')


@dataclass(frozen=True)
class Nop:
    pass


@dataclass(frozen=True)
class Push:
    immediate: int

    def __post_init__(self):
        check_byte('immediate', self.immediate)


@dataclass(frozen=True)
class PopRegister:
    register: Register


@dataclass(frozen=True)
class AddStack:
    pass


@dataclass(frozen=True)
class AddRegister:
    # Reserved, no opcode is assigned yet
    target: Register
    source: Register


@dataclass(frozen=True)
class Signal:
    code: int

    def __post_init__(self):
        check_byte('signal code', self.code)


Operation = Nop | Push | PopRegister | AddStack | AddRegister | Signal


def decode_register(operand: int, strict: bool) -> PopRegister:
    if strict and operand & 0xF0:
        raise DecodeError(f'reserved bits set in register operand 0x{operand:X}', register=operand)

    index = operand & 0x0F
    reg = from_index(index)

    if reg is None:
        raise DecodeError(f'unknown register 0x{index:X}', register=index)

    return PopRegister(reg)


DECODERS: dict[int, Callable[[int, bool], Operation]] = {
    ops.NOP: lambda _, __: Nop(),
    ops.PSH: lambda operand, _: Push(operand),
    ops.POP: decode_register,
    ops.ADS: lambda _, __: AddStack(),
    ops.SIG: lambda operand, _: Signal(operand)
}


def decode(word: int, strict: bool = False) -> Operation:
    opcode = word & 0xFF
    operand = (word >> 8) & 0xFF

    decoder = DECODERS.get(opcode)

    if decoder is None:
        raise DecodeError(f'unknown operator 0x{opcode:X}', opcode=opcode)

    return decoder(operand, strict)


def encode(op: Operation) -> int:
    match op:
        case Nop():
            return ops.NOP
        case Push(immediate):
            return ops.PSH | (immediate << 8)
        case PopRegister(register):
            return ops.POP | (REGISTER_INDICES[register] << 8)
        case AddStack():
            return ops.ADS
        case Signal(code):
            return ops.SIG | (code << 8)

    raise DecodeError(f'no opcode assigned to {op}')
