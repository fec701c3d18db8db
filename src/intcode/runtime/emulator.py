import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable, Mapping, Tuple

import click

from intcode.common.errors import BudgetExhausted, ExecutionError, InputExhausted
from intcode.loader.program import load_program
from intcode.runtime.cpu import Engine


EXIT_HALT = 0
EXIT_INPUT_STARVED = 2
EXIT_KEYBOARD = 3
EXIT_BUDGET = 4
EXIT_EXEC_ERROR = 100


def execute(
    program: Iterable[int],
    inputs: Iterable[int] = (),
    max_steps: int | None = None,
    patches: Mapping[int, int] | None = None
) -> list[int]:
    engine = Engine(program, patches=patches, inputs=inputs)
    engine.run_to_suspension(max_steps)

    if engine.is_awaiting_input():
        raise InputExhausted(f'Program is waiting for input at {engine.ip}')

    return engine.drain_outputs()


def interact(engine: Engine, max_steps: int | None = None):
    while True:
        engine.run_to_suspension(max_steps)

        for value in engine.drain_outputs():
            click.echo(value)

        if engine.is_terminated():
            return

        engine.feed_input(click.prompt('input', type=int))


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Input value, may be repeated')
@click.option('--interactive', is_flag=True, help='Prompt for input whenever the program waits for it')
@click.option('--max-steps', type=int, default=None, help='Abort after this many instructions')
@click.argument('program_filename', type=Path)
def run(verbose: bool, inputs: Tuple[int], interactive: bool, max_steps: int | None, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTCODE VM')

    try:
        program = load_program(program_filename)

        if interactive:
            engine = Engine(program, inputs=inputs)
            interact(engine, max_steps)
        else:
            for value in execute(program, inputs, max_steps):
                click.echo(value)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except InputExhausted as e:
        lg.info(f'Execution suspended: {e}')
        sys.exit(EXIT_INPUT_STARVED)

    except BudgetExhausted as e:
        lg.info(f'Execution aborted: {e}')
        sys.exit(EXIT_BUDGET)

    except (KeyboardInterrupt, click.Abort):
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except ExecutionError as e:
        lg.info(f'Execution halted on error {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
