# Opcode occupies the low byte of an instruction word,
# the operand byte is the high one
NOP = 0x00  # no effect
PSH = 0x01  # U8 -> [SP++]
POP = 0x02  # [--SP] -> R1
ADS = 0x03  # [--SP] + [--SP] -> [SP++]

# Host-bound
SIG = 0xF0  # handlers[U8](cpu)
