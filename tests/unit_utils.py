from pathlib import Path

from intcode.loader.program import load_program as parse_file


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def load_program(filename: str) -> list[int]:
    return parse_file(find_file(f'testdata/{filename}'))
