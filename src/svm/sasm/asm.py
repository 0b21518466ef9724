''' Hex-token assembler: "01 0A 03 00" -> b'\x01\x0a\x03\x00' '''

import sys
import logging as lg
from pathlib import Path
from typing import Tuple, BinaryIO

import click
import pyparsing as pp

from svm.common.errors import AssemblyError


def on_fail(s: str, loc: int, r: pp.ParseResults):
    raise AssemblyError(r[0], pp.lineno(loc, s))


comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)
hex_byte = pp.Regex(r'[0-9A-Fa-f]{1,2}(?!\S)').set_parse_action(lambda r: int(r[0], 16))

# Fail on anything else
unknown = pp.Regex(r'\S+').set_parse_action(on_fail)

program = pp.ZeroOrMore(comment | hex_byte | unknown)


def assemble(text: str) -> bytes:
    values = program.parse_string(text, parse_all=True)
    return bytes(values.as_list())


def assemble_files(sources: list[Path]) -> bytes:
    bytestr = bytearray()

    for source in sources:
        lg.info(f'Processing {source}')
        bytestr += assemble(source.read_text())

    return bytes(bytestr)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-o', '--output', type=click.File('wb'), default='-', help='Binary file, stdout by default')
@click.argument('sources', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(verbose: bool, output: BinaryIO, sources: Tuple[Path, ...]):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO, stream=sys.stderr)
    lg.info('SVM ASM')

    try:
        bytestr = assemble_files(list(sources))
    except AssemblyError as e:
        raise click.ClickException(str(e))

    lg.debug(f'{len(bytestr)} bytes assembled')
    output.write(bytestr)


if __name__ == '__main__':
    main()
