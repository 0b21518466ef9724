import logging as lg
from typing import Callable

import svm.runtime.decoder as dec
from svm.runtime.decoder import Operation
from svm.runtime.memory import Memory
from svm.runtime.registers import Register, RegisterFile
from svm.common.errors import StackUnderflow, MemoryFault, UnknownSignal
from svm.common.hwconf import MEMORY_SIZE, WORD_SIZE, WORD_MASK


# Handlers get the CPU itself and raise VMError on failure
SignalHandler = Callable[['CPU'], None]


class CPU():
    memory: Memory
    registers: RegisterFile
    _halt: bool
    handlers: dict[int, SignalHandler]

    def __init__(self, memory_size: int = MEMORY_SIZE, strict: bool = False):
        self.memory = Memory(memory_size)
        self.registers = RegisterFile()
        self._halt = False
        self.handlers = {}
        self.strict = strict    # Reject reserved operand bits

    # - Helpers - #

    def debug_dump(self):
        state = [f'{reg.value}:{val:X}' for reg, val in self.registers.items()]
        lg.debug(' '.join(state))

    @property
    def halt(self) -> bool:
        return self._halt

    def stop(self):
        # Once set, the halt flag stays set
        self._halt = True

    def get_register(self, reg: Register) -> int:
        return self.registers[reg]

    def set_register(self, reg: Register, val: int):
        self.registers[reg] = val

    def define_handler(self, code: int, handler: SignalHandler):
        if code < 0 or code > 0xFF:
            raise ValueError(f'Signal code 0x{code:X} out of range')

        lg.debug(f'Handler for signal 0x{code:X} defined')
        self.handlers[code] = handler

    def push(self, val: int):
        sp = self.registers[Register.SP]
        self.memory.write2(sp, val)
        self.registers[Register.SP] = sp + WORD_SIZE

    def pop(self) -> int:
        sp = self.registers[Register.SP]

        if sp < WORD_SIZE:
            raise StackUnderflow(sp)

        self.registers[Register.SP] = sp - WORD_SIZE

        try:
            return self.memory.read2(sp - WORD_SIZE)
        except MemoryFault:
            self.registers[Register.SP] = sp
            raise

    # - Operations - #

    def nop(self, op: dec.Nop):
        pass

    def psh(self, op: dec.Push):
        self.push(op.immediate)

    def pop_register(self, op: dec.PopRegister):
        self.registers[op.register] = self.pop()

    def add_stack(self, op: dec.AddStack):
        # No rollback: operands already popped stay popped if push faults
        a = self.pop()
        b = self.pop()
        self.push((a + b) & WORD_MASK)

    def add_register(self, op: dec.AddRegister):
        total = self.registers[op.target] + self.registers[op.source]
        self.registers[op.target] = total & WORD_MASK

    def signal(self, op: dec.Signal):
        handler = self.handlers.get(op.code)

        if handler is None:
            raise UnknownSignal(op.code)

        lg.debug(f'SIGNAL 0x{op.code:X}')
        handler(self)

    HANDLERS = {
        dec.Nop: nop,
        dec.Push: psh,
        dec.PopRegister: pop_register,
        dec.AddStack: add_stack,
        dec.AddRegister: add_register,
        dec.Signal: signal
    }

    # -- Implementation -- #

    def fetch(self) -> int:
        pc = self.registers[Register.PC]
        word = self.memory.read2(pc)
        self.registers[Register.PC] = pc + WORD_SIZE
        return word

    def execute(self, op: Operation):
        handler = self.HANDLERS[type(op)]
        handler(self, op)

    def step(self):
        word = self.fetch()
        op = dec.decode(word, self.strict)
        lg.debug(f'EXEC {op}')
        self.execute(op)


def signal_halt(cpu: CPU):
    cpu.stop()
