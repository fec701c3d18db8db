import pytest

from intcode.common.errors import AddressError
from intcode.runtime.memory import Memory


def test_read_loaded_program():
    memory = Memory([1, 0, 0, 0, 99])
    assert len(memory) == 5
    assert memory.read(4) == 99


def test_read_beyond_bounds_grows_with_zeros():
    memory = Memory([1, 2, 3])
    assert memory.read(10) == 0
    assert len(memory) == 11
    assert memory.snapshot() == [1, 2, 3] + [0] * 8


def test_write_beyond_bounds_grows():
    memory = Memory([7])
    memory.write(4, -5)
    assert memory.snapshot() == [7, 0, 0, 0, -5]


def test_growth_never_shrinks():
    memory = Memory([])
    memory.read(100)
    memory.write(3, 1)
    memory.read(50)
    assert len(memory) == 101


def test_negative_address_fails():
    memory = Memory([1, 2, 3])

    with pytest.raises(AddressError):
        memory.read(-1)

    with pytest.raises(AddressError):
        memory.write(-3, 0)

    assert memory.snapshot() == [1, 2, 3]


def test_program_is_copied():
    program = [1, 2, 3]
    memory = Memory(program)
    memory.write(0, 42)
    assert program == [1, 2, 3]
