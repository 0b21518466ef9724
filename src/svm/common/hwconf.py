# Memory
MEMORY_SIZE = 8 * 1024
PROGRAM_BASE = 0x0000
WORD_SIZE = 2
WORD_MASK = 0xFFFF
BYTE_MASK = 0xFF

# Registers
NUMBER_OF_REGISTERS = 8

# Signals
HALT_SIGNAL = 0xF0
