from enum import IntEnum


class Op(IntEnum):
    ADD = 1     # A1 +  A2 -> D3
    MUL = 2     # A1 *  A2 -> D3
    IN = 3      # input -> D1, suspend if input is empty
    OUT = 4     # A1 -> output
    JT = 5      # if A1 .ne 0 jmp A2
    JF = 6      # if A1 .eq 0 jmp A2
    LT = 7      # A1 .lt A2 -> D3
    EQ = 8      # A1 .eq A2 -> D3
    ARB = 9     # RB + A1 -> RB
    HLT = 99    # terminate


class Mode(IntEnum):
    POSITION = 0    # M[P]
    IMMEDIATE = 1   # P
    RELATIVE = 2    # M[RB + P]


PARAM_COUNT = {
    Op.ADD: 3,
    Op.MUL: 3,
    Op.IN: 1,
    Op.OUT: 1,
    Op.JT: 2,
    Op.JF: 2,
    Op.LT: 3,
    Op.EQ: 3,
    Op.ARB: 1,
    Op.HLT: 0
}

# Index of the parameter that names a destination cell
WRITE_PARAM = {
    Op.ADD: 2,
    Op.MUL: 2,
    Op.IN: 0,
    Op.LT: 2,
    Op.EQ: 2
}

MNEMONICS = {
    'add': Op.ADD,
    'mul': Op.MUL,
    'in': Op.IN,
    'out': Op.OUT,
    'jt': Op.JT,
    'jf': Op.JF,
    'lt': Op.LT,
    'eq': Op.EQ,
    'arb': Op.ARB,
    'hlt': Op.HLT
}

NAMES = {op: name for name, op in MNEMONICS.items()}
