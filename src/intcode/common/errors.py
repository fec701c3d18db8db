class ExecutionError(Exception):
    pass


class AddressError(ExecutionError):
    def __init__(self, addr: int):
        super().__init__(f'Negative memory address {addr}')
        self.addr = addr


class InvalidOpcode(ExecutionError):
    def __init__(self, word: int, ip: int | None = None):
        where = '' if ip is None else f' at {ip}'
        super().__init__(f'Invalid opcode in word {word}{where}')
        self.word = word
        self.ip = ip


class InvalidMode(ExecutionError):
    pass


class BudgetExhausted(ExecutionError):
    def __init__(self, steps: int):
        super().__init__(f'Step budget of {steps} exhausted')
        self.steps = steps


class InputExhausted(ExecutionError):
    pass


class RingStalled(ExecutionError):
    pass


class ProgramSyntaxError(Exception):
    pass


class AsmError(Exception):
    pass
