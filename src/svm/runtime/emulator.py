import sys
from pathlib import Path
import logging as lg

import click

from svm.common.hwconf import HALT_SIGNAL, PROGRAM_BASE
from svm.common.errors import VMError, StepLimitExceeded
from svm.runtime.registers import Register
import svm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def run(proc: cpu.CPU, max_steps: int | None = None) -> int:
    steps = 0

    while not proc.halt:
        if max_steps is not None and steps >= max_steps:
            raise StepLimitExceeded(steps)

        proc.step()
        steps += 1

        if lg.getLogger().isEnabledFor(lg.DEBUG):
            proc.debug_dump()

    lg.info(f'Execution halted after {steps} steps')
    return steps


def execute(program: bytes, origin: int = PROGRAM_BASE, max_steps: int | None = None) -> cpu.CPU:
    proc = cpu.CPU()
    proc.define_handler(HALT_SIGNAL, cpu.signal_halt)
    proc.memory.load(program, origin)
    proc.set_register(Register.PC, origin)

    run(proc, max_steps)
    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--origin', type=int, default=PROGRAM_BASE, help='Load offset of the program')
@click.option('--max-steps', type=int, default=None, help='Abort after this many steps')
@click.argument('rom_filename', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(verbose: bool, origin: int, max_steps: int | None, rom_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SVM')

    try:
        rom = rom_filename.read_bytes()
    except OSError as e:
        raise click.FileError(str(rom_filename), hint=e.strerror)

    try:
        proc = execute(rom, origin, max_steps)

    except VMError as e:
        lg.error(f'Execution halted on error: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    click.echo(f'A = {proc.get_register(Register.A)}')
    sys.exit(EXIT_HALT)


if __name__ == '__main__':
    main()
