''' Growable memory tape '''

from typing import Iterable

from intcode.common.errors import AddressError


class Memory:
    cells: list[int]

    def __init__(self, program: Iterable[int]):
        self.cells = list(program)

    def __len__(self) -> int:
        return len(self.cells)

    def ensure(self, addr: int):
        if addr < 0:
            raise AddressError(addr)

        if addr >= len(self.cells):
            self.cells.extend([0] * (addr + 1 - len(self.cells)))

    def read(self, addr: int) -> int:
        self.ensure(addr)
        return self.cells[addr]

    def write(self, addr: int, value: int):
        self.ensure(addr)
        self.cells[addr] = value

    def snapshot(self) -> list[int]:
        return list(self.cells)
