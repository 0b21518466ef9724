import pytest

from svm.runtime.memory import Memory
from svm.common.errors import MemoryFault
from svm.common.hwconf import MEMORY_SIZE


def test_zero_filled():
    memory = Memory()
    assert len(memory) == MEMORY_SIZE
    assert memory.dump(0, MEMORY_SIZE) == bytes(MEMORY_SIZE)


def test_byte_access():
    memory = Memory(16)
    memory.write(15, 0xAB)
    assert memory.read(15) == 0xAB

    with pytest.raises(MemoryFault) as e:
        memory.read(16)

    assert e.value.address == 16
    assert e.value.kind == 'read'

    with pytest.raises(MemoryFault):
        memory.write(16, 0x01)

    assert memory.dump(0, 16) == bytes(15) + b'\xab'


def test_word_is_little_endian():
    memory = Memory(16)
    memory.write2(4, 0x1234)
    assert memory.read(4) == 0x34
    assert memory.read(5) == 0x12
    assert memory.read2(4) == 0x1234


def test_word_at_last_offsets():
    memory = Memory(16)
    memory.write2(14, 0xBEEF)
    assert memory.read2(14) == 0xBEEF


def test_word_past_end_does_not_mutate():
    memory = Memory(16)
    memory.write(15, 0x77)

    with pytest.raises(MemoryFault) as e:
        memory.write2(15, 0xFFFF)

    assert e.value.kind == 'write'
    assert e.value.address == 15
    assert memory.read(15) == 0x77

    with pytest.raises(MemoryFault):
        memory.read2(15)


def test_load():
    memory = Memory(16)
    memory.load(b'\x01\x02\x03', 13)
    assert memory.dump(13, 3) == b'\x01\x02\x03'


def test_load_exact_fit():
    memory = Memory(4)
    memory.load(b'\x01\x02\x03\x04')
    assert memory.dump(0, 4) == b'\x01\x02\x03\x04'


def test_load_overflow_is_rejected():
    memory = Memory(16)

    with pytest.raises(MemoryFault) as e:
        memory.load(b'\xff' * 4, 13)

    assert e.value.address == 13
    assert memory.dump(0, 16) == bytes(16)
