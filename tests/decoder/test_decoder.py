import pytest

from intcode.common.errors import InvalidMode, InvalidOpcode
from intcode.common.ops import Op, Mode
import intcode.runtime.decoder as decoder


P = Mode.POSITION
I = Mode.IMMEDIATE
R = Mode.RELATIVE


def test_opcode_only():
    assert decoder.decode(1) == (Op.ADD, [P, P, P])
    assert decoder.decode(99) == (Op.HLT, [])


def test_modes_least_significant_first():
    assert decoder.decode(1002) == (Op.MUL, [P, I, P])
    assert decoder.decode(21101) == (Op.ADD, [I, I, R])
    assert decoder.decode(204) == (Op.OUT, [R])


def test_missing_digits_default_to_position():
    assert decoder.decode_modes(105, 2) == [I, P]


def test_extra_digits_ignored():
    assert decoder.decode(10099) == (Op.HLT, [])


def test_decoding_is_repeatable():
    first = decoder.decode(1205)
    assert all(decoder.decode(1205) == first for _ in range(10))
    assert first == (Op.JT, [R, I])


@pytest.mark.parametrize('word', [0, 10, 98, 100, 1042, -1, -99])
def test_invalid_opcode(word):
    with pytest.raises(InvalidOpcode):
        decoder.decode(word)


def test_invalid_mode_digit():
    with pytest.raises(InvalidMode):
        decoder.decode(301)


def test_encode_inverts_decode():
    for word in [1, 1002, 21101, 204, 1105, 99, 203]:
        op, modes = decoder.decode(word)
        assert decoder.encode(op, modes) == word
