''' Linear sweep disassembler producing assembler syntax '''

from pathlib import Path
import logging as lg

import click

from intcode.common.errors import ExecutionError
from intcode.common.ops import Mode, NAMES, PARAM_COUNT, WRITE_PARAM
from intcode.loader.program import load_program
import intcode.runtime.decoder as decoder


PREFIXES = {
    Mode.POSITION: '',
    Mode.IMMEDIATE: '#',
    Mode.RELATIVE: '@'
}


def render_instruction(program: list[int], addr: int) -> str | None:
    try:
        op, modes = decoder.decode(program[addr], addr)
    except ExecutionError:
        return None

    if addr + PARAM_COUNT[op] >= len(program):
        return None

    # Words the assembler would not reproduce stay data
    if decoder.encode(op, modes) != program[addr]:
        return None

    write_param = WRITE_PARAM.get(op)

    if write_param is not None and modes[write_param] == Mode.IMMEDIATE:
        return None

    operands = [
        f'{PREFIXES[mode]}{program[addr + 1 + i]}'
        for i, mode in enumerate(modes)
    ]

    return ' '.join([NAMES[op], *operands])


def disassemble(program: list[int]) -> list[str]:
    lines = []
    addr = 0

    while addr < len(program):
        text = render_instruction(program, addr)
        width = 1

        if text is None:
            text = f'DW {program[addr]}'
        else:
            width += PARAM_COUNT[decoder.decode_opcode(program[addr])]

        lines.append(f'{text:<32}// {addr}')
        addr += width

    lg.debug(f'Disassembled {len(program)} words into {len(lines)} lines')
    return lines


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('program_filename', type=Path)
def disassemble_cmd(verbose: bool, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)

    for line in disassemble(load_program(program_filename)):
        click.echo(line)


if __name__ == '__main__':
    disassemble_cmd()
