# Emulated linear memory

from svm.common.hwconf import MEMORY_SIZE, BYTE_MASK, WORD_MASK
from svm.common.errors import MemoryFault


class Memory:
    ''' Fixed-capacity byte space, 16-bit values are little-endian '''

    def __init__(self, size: int = MEMORY_SIZE):
        self.size = size
        self.bytes = bytearray(size)

    def __len__(self) -> int:
        return self.size

    def check(self, kind: str, addr: int, length: int = 1):
        if addr < 0 or addr + length > self.size:
            raise MemoryFault(kind, addr)

    def read(self, addr: int) -> int:
        self.check('read', addr)
        return self.bytes[addr]

    def write(self, addr: int, value: int):
        self.check('write', addr)
        self.bytes[addr] = value & BYTE_MASK

    def read2(self, addr: int) -> int:
        self.check('read', addr, 2)
        return self.bytes[addr] | (self.bytes[addr + 1] << 8)

    def write2(self, addr: int, value: int):
        self.check('write', addr, 2)
        value &= WORD_MASK
        self.bytes[addr] = value & BYTE_MASK
        self.bytes[addr + 1] = value >> 8

    def load(self, program: bytes, origin: int = 0):
        # Nothing is copied unless the whole program fits
        self.check('write', origin, len(program))
        self.bytes[origin:origin + len(program)] = program

    def dump(self, addr: int, length: int) -> bytes:
        self.check('read', addr, length)
        return bytes(self.bytes[addr:addr + length])
