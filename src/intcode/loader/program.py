''' Comma-separated program text '''

from pathlib import Path
import logging as lg

import pyparsing as pp

from intcode.common.conf import PROGRAM_SEPARATOR
from intcode.common.errors import ProgramSyntaxError


word = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
program = word + pp.ZeroOrMore(pp.Suppress(PROGRAM_SEPARATOR) + word)


def parse_program(text: str) -> list[int]:
    try:
        words = program.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise ProgramSyntaxError(f'Bad program text at line {e.lineno}, column {e.col}') from e

    return list(words)


def load_program(path: str | Path) -> list[int]:
    if isinstance(path, str):
        path = Path(path)

    lg.debug(f'Loading program {path}')
    return parse_program(path.read_text())


def format_program(words: list[int]) -> str:
    return PROGRAM_SEPARATOR.join(str(w) for w in words)
