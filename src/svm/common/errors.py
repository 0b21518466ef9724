class VMError(Exception):
    pass


class DecodeError(VMError):
    def __init__(self, message: str, opcode: int | None = None, register: int | None = None):
        super().__init__(message)
        self.opcode = opcode
        self.register = register


class MemoryFault(VMError):
    def __init__(self, kind: str, address: int):
        super().__init__(f'memory {kind} fault @ 0x{address:X}')
        self.kind = kind
        self.address = address


class StackUnderflow(VMError):
    def __init__(self, sp: int):
        super().__init__(f'stack underflow (SP=0x{sp:X})')
        self.sp = sp


class UnknownSignal(VMError):
    def __init__(self, code: int):
        super().__init__(f'unknown signal 0x{code:X}')
        self.code = code


class StepLimitExceeded(VMError):
    def __init__(self, steps: int):
        super().__init__(f'no halt after {steps} steps')
        self.steps = steps


class AssemblyError(VMError):
    def __init__(self, token: str, line: int):
        super().__init__(f'invalid byte token "{token}" at line {line}')
        self.token = token
        self.line = line
