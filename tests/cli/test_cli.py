from click.testing import CliRunner

from intcode.loader.asm import compile
from intcode.loader.disasm import disassemble_cmd
from intcode.loader.program import load_program
from intcode.runtime.emulator import run, EXIT_HALT, EXIT_INPUT_STARVED, EXIT_BUDGET, EXIT_EXEC_ERROR
from intcode.runtime.orchestrator import amplify

import unit_utils


def stdout_lines(result):
    return result.stdout.strip().splitlines()


def test_run_with_inputs():
    result = CliRunner().invoke(run, ['-i', '9', str(unit_utils.find_file('testdata/compare8.ic'))])
    assert result.exit_code == EXIT_HALT
    assert stdout_lines(result) == ['1001']


def test_run_starved():
    result = CliRunner().invoke(run, [str(unit_utils.find_file('testdata/compare8.ic'))])
    assert result.exit_code == EXIT_INPUT_STARVED


def test_run_budget(tmp_path):
    program = tmp_path / 'loop.ic'
    program.write_text('1105,1,0\n')
    result = CliRunner().invoke(run, ['--max-steps', '10', str(program)])
    assert result.exit_code == EXIT_BUDGET


def test_run_invalid_opcode(tmp_path):
    program = tmp_path / 'bad.ic'
    program.write_text('42\n')
    result = CliRunner().invoke(run, [str(program)])
    assert result.exit_code == EXIT_EXEC_ERROR


def test_run_interactive(tmp_path):
    source = unit_utils.find_file('testdata/countdown.icasm')
    binary = tmp_path / 'countdown.ic'

    result = CliRunner().invoke(compile, [str(source), str(binary)])
    assert result.exit_code == 0
    assert load_program(binary) == [3, 12, 4, 12, 1001, 12, -1, 12, 1005, 12, 2, 99, 0]

    result = CliRunner().invoke(run, ['--interactive', str(binary)], input='2\n')
    assert result.exit_code == EXIT_HALT
    assert stdout_lines(result)[-2:] == ['2', '1']


def test_disassemble_command():
    result = CliRunner().invoke(disassemble_cmd, [str(unit_utils.find_file('testdata/quine.ic'))])
    assert result.exit_code == 0
    assert stdout_lines(result)[0].startswith('arb #1')


def test_amplify_feedback():
    program = str(unit_utils.find_file('testdata/amp_feedback.ic'))
    result = CliRunner().invoke(amplify, ['--phases', '9,8,7,6,5', program])
    assert result.exit_code == 0
    assert stdout_lines(result) == ['139629729']


def test_amplify_linear_search():
    program = str(unit_utils.find_file('testdata/amp_linear.ic'))
    result = CliRunner().invoke(amplify, ['--linear', '--search', '--phases', '0,1,2,3,4', program])
    assert result.exit_code == 0
    assert stdout_lines(result) == ['43210 4,3,2,1,0']


def test_amplify_bad_phases():
    program = str(unit_utils.find_file('testdata/amp_linear.ic'))
    result = CliRunner().invoke(amplify, ['--phases', '1,x', program])
    assert result.exit_code == 2
