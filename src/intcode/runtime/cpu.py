import logging as lg
from enum import Enum
from typing import Callable, Iterable, Mapping, NamedTuple

from intcode.common.errors import AddressError, BudgetExhausted, InvalidMode
from intcode.common.ops import Op, Mode
from intcode.runtime.memory import Memory
from intcode.runtime.channels import Channel
import intcode.runtime.decoder as decoder


class RunState(Enum):
    RUNNING = 'running'
    AWAITING_INPUT = 'awaiting-input'
    TERMINATED = 'terminated'


class Param(NamedTuple):
    mode: Mode
    operand: int


def resolve_address(param: Param, relative_base: int) -> int:
    if param.mode == Mode.POSITION:
        return param.operand

    if param.mode == Mode.RELATIVE:
        return relative_base + param.operand

    raise InvalidMode(f'Immediate operand {param.operand} used as a write target')


def resolve_value(param: Param, memory: Memory, relative_base: int) -> int:
    if param.mode == Mode.IMMEDIATE:
        return param.operand

    return memory.read(resolve_address(param, relative_base))


Params = list[Param]


class Engine:
    ip: int             # Instruction pointer
    rb: int             # Relative base
    state: RunState
    steps: int          # Instructions completed so far, suspensions excluded

    def __init__(
        self,
        program: Iterable[int],
        patches: Mapping[int, int] | None = None,
        inputs: Iterable[int] = ()
    ):
        self.memory = Memory(program)   # Owned copy of the program
        self.inputs = Channel(inputs)
        self.outputs = Channel()

        self.ip = 0
        self.rb = 0
        self.state = RunState.RUNNING
        self.steps = 0

        if patches:
            for addr, value in patches.items():
                self.memory.write(addr, value)

    # - Helpers - #

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'IP': self.ip,
            'RB': self.rb,
            'ST': self.state.value,
            'IN': len(self.inputs),
            'OUT': len(self.outputs)
        }.items()]

        lg.debug(' '.join(state))

    def value(self, param: Param) -> int:
        return resolve_value(param, self.memory, self.rb)

    def store(self, param: Param, value: int):
        self.memory.write(resolve_address(param, self.rb), value)

    def arithm_triple(self, params: Params, op: Callable[[int, int], int]):
        a = self.value(params[0])
        b = self.value(params[1])
        self.store(params[2], op(a, b))

    def jump_if(self, params: Params, predicate: Callable[[int], bool]) -> int | None:
        cond = self.value(params[0])
        target = self.value(params[1])

        if not predicate(cond):
            return None

        if target < 0:
            raise AddressError(target)

        return target

    def fetch(self) -> tuple[Op, Params]:
        word = self.memory.read(self.ip)
        op, modes = decoder.decode(word, self.ip)

        params = [
            Param(mode, self.memory.read(self.ip + 1 + i))
            for i, mode in enumerate(modes)
        ]

        return op, params

    # - Operations - #
    # A handler returns the next IP, or None to fall through to the next instruction

    def add(self, params: Params):
        self.arithm_triple(params, lambda a, b: a + b)

    def mul(self, params: Params):
        self.arithm_triple(params, lambda a, b: a * b)

    def inp(self, params: Params):
        addr = resolve_address(params[0], self.rb)
        value = self.inputs.pop()

        if value is None:
            if self.state != RunState.AWAITING_INPUT:
                lg.debug(f'Suspended on input at {self.ip}')

            self.state = RunState.AWAITING_INPUT
            return self.ip

        self.memory.write(addr, value)
        self.state = RunState.RUNNING

    def out(self, params: Params):
        self.outputs.push(self.value(params[0]))

    def jt(self, params: Params):
        return self.jump_if(params, lambda cond: cond != 0)

    def jf(self, params: Params):
        return self.jump_if(params, lambda cond: cond == 0)

    def lt(self, params: Params):
        self.arithm_triple(params, lambda a, b: 1 if a < b else 0)

    def eq(self, params: Params):
        self.arithm_triple(params, lambda a, b: 1 if a == b else 0)

    def arb(self, params: Params):
        self.rb += self.value(params[0])

    def hlt(self, params: Params):
        self.state = RunState.TERMINATED
        lg.info(f'Execution halted after {self.steps + 1} steps')
        return self.ip

    HANDLERS = {
        Op.ADD: add,
        Op.MUL: mul,
        Op.IN: inp,
        Op.OUT: out,
        Op.JT: jt,
        Op.JF: jf,
        Op.LT: lt,
        Op.EQ: eq,
        Op.ARB: arb,
        Op.HLT: hlt
    }

    # - Host interface - #

    def step(self) -> RunState:
        if self.state == RunState.TERMINATED:
            return self.state

        op, params = self.fetch()
        lg.debug(f'{self.ip}: {op.name} {[(p.mode.name, p.operand) for p in params]}')

        handler = self.HANDLERS[op]
        next_ip = handler(self, params)

        # A suspended input is retried later and counts once, when it completes
        if self.state != RunState.AWAITING_INPUT:
            self.steps += 1

        self.ip = self.ip + 1 + len(params) if next_ip is None else next_ip
        return self.state

    def feed_input(self, value: int):
        self.inputs.push(value)

        if self.state == RunState.AWAITING_INPUT:
            lg.debug(f'Resumed at {self.ip} with input {value}')
            self.state = RunState.RUNNING

    def feed_inputs(self, values: Iterable[int]):
        for value in values:
            self.feed_input(value)

    def drain_output(self) -> int | None:
        return self.outputs.pop()

    def drain_outputs(self) -> list[int]:
        return self.outputs.drain()

    def run_to_suspension(self, max_steps: int | None = None) -> RunState:
        executed = 0

        while self.state == RunState.RUNNING:
            if max_steps is not None and executed >= max_steps:
                self.debug_dump()
                raise BudgetExhausted(max_steps)

            self.step()
            executed += 1

        self.debug_dump()
        return self.state

    def is_terminated(self) -> bool:
        return self.state == RunState.TERMINATED

    def is_awaiting_input(self) -> bool:
        return self.state == RunState.AWAITING_INPUT
