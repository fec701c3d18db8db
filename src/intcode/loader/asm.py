from pathlib import Path
import logging as lg

import click
import pyparsing as pp

from intcode.common.errors import AsmError
from intcode.loader.fpp import FPP
from intcode.loader.program import format_program
import intcode.loader.grammar as grammar


def assemble(source: str) -> list[int]:
    # First pass
    first_pass = FPP()

    try:
        actions = grammar.program.parse_string(source, parse_all=True)
    except pp.ParseException as e:
        raise AsmError(f'Syntax error at line {e.lineno}, column {e.col}: {e.line.strip()}') from e

    for (func, arg) in actions:
        func(first_pass, arg)

    # Second pass
    words = first_pass.resolve()
    lg.info(f'Assembled {len(words)} words, {len(first_pass.label_dict)} labels')
    return words


def assemble_file(filepath: str | Path) -> list[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.info(f'Processing {filepath}')
    return assemble(filepath.read_text())


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=Path)
@click.argument('output', type=Path)
def compile(verbose: bool, source: Path, output: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE ASM')

    words = assemble_file(source)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(format_program(words) + '\n')


if __name__ == '__main__':
    compile()
