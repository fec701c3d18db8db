# type: ignore
''' Assembler grammar '''

import pyparsing as pp

from intcode.common.ops import Mode, MNEMONICS, PARAM_COUNT
from intcode.loader.fpp import FPP, Operand


comment = pp.Regex('//[^\n]*')

keyword = pp.MatchFirst([pp.Keyword(k) for k in [*MNEMONICS, 'DW']])
id = ~keyword + pp.Word(pp.alphas + '_', pp.alphanums + '_')

s_const = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
value = s_const | id

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))


def g_operand(prefix, mode, body=value):
    expr = body if prefix is None else pp.Suppress(prefix) + body
    return expr.copy().set_parse_action(lambda r: Operand(mode, r[0]))


immediate = g_operand('#', Mode.IMMEDIATE)
relative = g_operand('@', Mode.RELATIVE, s_const)
position = g_operand(None, Mode.POSITION)

operand = immediate | relative | position


def g_cmd(literal, op):
    expr = pp.Suppress(pp.Keyword(literal))

    for _ in range(PARAM_COUNT[op]):
        expr = expr + operand

    return expr.set_parse_action(lambda r: (FPP.issue_instruction, (op, list(r))))


asm_cmd = pp.MatchFirst([g_cmd(literal, op) for literal, op in MNEMONICS.items()])

dw = (pp.Suppress(pp.Keyword('DW')) + pp.OneOrMore(~label + value)) \
    .set_parse_action(lambda r: (FPP.issue_data, list(r)))

statement = label | asm_cmd | dw

program = pp.ZeroOrMore(statement)
program.ignore(comment)
