import sys
from pathlib import Path
import logging as lg

import click

from dvdvm.disasm.faults import LoggingSink
from dvdvm.disasm.recompile import recompile
from dvdvm.disasm.settings import DisasmSettings, load_settings
import dvdvm.loader.program as loader


EXIT_OK = 0
EXIT_FAULTS = 2
EXIT_INPUT_ERROR = 100

INPUT_FORMATS = {
    'auto': None,
    'hex': True,
    'binary': False,
}


def disassemble(input: Path, listing: bool | None, settings: DisasmSettings) -> tuple[str, int]:
    program = loader.load_file(input, listing)
    sink = LoggingSink()
    text = recompile(program, sink, settings)

    if sink.count:
        lg.info(f'{sink.count} decode faults in {len(program)} commands')

    return text, sink.count


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-f', '--format', 'input_format', type=click.Choice(list(INPUT_FORMATS)),
              default='auto', help='Input format, guessed from the suffix by default')
@click.option('-c', '--config', type=Path, help='TOML settings file')
@click.option('--abbrev', is_flag=True, help='Use abbreviated system register names')
@click.option('--strict', is_flag=True, help='Exit with an error status on decode faults')
@click.argument('input', type=Path)
@click.argument('output', type=Path, required=False)
def run(
    verbose: bool,
    input_format: str,
    config: Path | None,
    abbrev: bool,
    strict: bool,
    input: Path,
    output: Path | None
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('DVD NAV DISASM')

    try:
        settings = load_settings(config) if config else DisasmSettings()

        # Flags only switch options on, a config file may have done so already
        settings.update(
            abbreviate_registers=True if abbrev else None,
            strict=True if strict else None
        )

        text, faults = disassemble(input, INPUT_FORMATS[input_format], settings)

    except (UserWarning, OSError) as e:
        lg.error(f'Cannot disassemble {input}: {e}')
        sys.exit(EXIT_INPUT_ERROR)

    if output is None:
        click.echo(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + '\n')

    if settings.strict and faults:
        sys.exit(EXIT_FAULTS)

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    run()
