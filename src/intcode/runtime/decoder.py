''' Instruction word decoder '''

from intcode.common.conf import OPCODE_BASE, MODE_BASE
from intcode.common.errors import InvalidOpcode, InvalidMode
from intcode.common.ops import Op, Mode, PARAM_COUNT


def decode_opcode(word: int, ip: int | None = None) -> Op:
    if word < 0:
        raise InvalidOpcode(word, ip)

    try:
        return Op(word % OPCODE_BASE)
    except ValueError:
        raise InvalidOpcode(word, ip) from None


def decode_modes(word: int, count: int) -> list[Mode]:
    '''
    Modes for the first `count` parameters, least significant digit first.
    Missing digits default to POSITION.
    '''
    digits = word // OPCODE_BASE
    modes = []

    for i in range(count):
        digit = digits % MODE_BASE
        digits //= MODE_BASE

        try:
            modes.append(Mode(digit))
        except ValueError:
            raise InvalidMode(f'Invalid mode {digit} for parameter {i} in word {word}') from None

    return modes


def decode(word: int, ip: int | None = None) -> tuple[Op, list[Mode]]:
    op = decode_opcode(word, ip)
    return op, decode_modes(word, PARAM_COUNT[op])


def encode(op: Op, modes: list[Mode]) -> int:
    word = int(op)
    scale = OPCODE_BASE

    for mode in modes:
        word += int(mode) * scale
        scale *= MODE_BASE

    return word
