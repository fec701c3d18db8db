''' Chains of engines wired output-to-input '''

import sys
from pathlib import Path
import logging as lg
from itertools import permutations
from typing import Iterable, Sequence

import click

from intcode.common.errors import ExecutionError, RingStalled
from intcode.loader.program import load_program
from intcode.runtime.cpu import Engine


class Ring:
    '''
    One engine per phase setting, all running their own copy of the program.

    Engines are driven cooperatively in a fixed order: an engine only runs
    while its predecessor is suspended or terminated, so results are
    deterministic.
    '''
    engines: list[Engine]

    def __init__(self, program: Sequence[int], phases: Iterable[int]):
        self.engines = []

        for phase in phases:
            engine = Engine(program)
            engine.feed_input(phase)
            self.engines.append(engine)

        if not self.engines:
            raise ValueError('A ring needs at least one engine')

    @property
    def last(self) -> Engine:
        return self.engines[-1]

    def run_round(self, signal: int | None) -> tuple[int | None, bool]:
        '''
        Runs every live engine once. `signal` goes into the first engine;
        each engine forwards only its own most recent output. Returns the
        value forwarded by the last engine (None if it emitted nothing).
        '''
        progressed = False
        forward = signal

        for i, engine in enumerate(self.engines):
            if engine.is_terminated():
                forward = None
                continue

            if forward is not None:
                lg.debug(f'Routing {forward} into engine {i}')
                engine.feed_input(forward)

            engine.run_to_suspension()
            outputs = engine.drain_outputs()
            forward = outputs[-1] if outputs else None

            if outputs or engine.is_terminated():
                progressed = True

        return forward, progressed

    def run_pipeline(self, seed: int = 0) -> int | None:
        result, _ = self.run_round(seed)
        lg.info(f'Pipeline of {len(self.engines)} produced {result}')
        return result

    def run_feedback(self, seed: int = 0) -> int | None:
        signal: int | None = seed
        result: int | None = None
        rounds = 0

        while not self.last.is_terminated():
            signal, progressed = self.run_round(signal)
            rounds += 1

            if signal is not None:
                result = signal

            if not progressed:
                raise RingStalled(f'No engine made progress in round {rounds}')

        lg.info(f'Feedback ring of {len(self.engines)} produced {result} in {rounds} rounds')
        return result


def run_pipeline(program: Sequence[int], phases: Iterable[int], seed: int = 0) -> int | None:
    return Ring(program, phases).run_pipeline(seed)


def run_feedback(program: Sequence[int], phases: Iterable[int], seed: int = 0) -> int | None:
    return Ring(program, phases).run_feedback(seed)


def best_phase_setting(
    program: Sequence[int],
    phase_values: Iterable[int],
    feedback: bool,
    seed: int = 0
) -> tuple[int | None, tuple[int, ...]]:
    run = run_feedback if feedback else run_pipeline
    best: tuple[int | None, tuple[int, ...]] = (None, ())

    for phases in permutations(phase_values):
        signal = run(program, phases, seed)

        if signal is not None and (best[0] is None or signal > best[0]):
            best = (signal, phases)

    return best


def parse_phases(ctx, param, value: str) -> list[int]:
    try:
        return [int(p) for p in value.split(',')]
    except ValueError:
        raise click.BadParameter(f'Expected comma separated integers, got {value}')


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--phases', required=True, callback=parse_phases, help='Comma separated phase settings')
@click.option('--seed', type=int, default=0, help='Signal fed into the first engine')
@click.option('--feedback/--linear', default=True, help='Close the chain into a ring')
@click.option('--search', is_flag=True, help='Try every ordering of the phases')
@click.argument('program_filename', type=Path)
def amplify(verbose: bool, phases: list[int], seed: int, feedback: bool, search: bool, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE RING')

    program = load_program(program_filename)

    try:
        if search:
            signal, best = best_phase_setting(program, phases, feedback, seed)
            click.echo(f'{signal} {",".join(str(p) for p in best)}')
        elif feedback:
            click.echo(run_feedback(program, phases, seed))
        else:
            click.echo(run_pipeline(program, phases, seed))

    except ExecutionError as e:
        lg.info(f'Ring halted on error {e}')
        sys.exit(1)


if __name__ == '__main__':
    amplify()
