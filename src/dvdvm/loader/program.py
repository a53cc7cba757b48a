import logging as lg
from pathlib import Path

import pyparsing as pp

from dvdvm.disasm.command import Command, Program, COMMAND_SIZE
import dvdvm.loader.grammar as grammar


LISTING_SUFFIXES = {'.hex', '.txt'}


def load_binary(data: bytes) -> Program:
    if len(data) % COMMAND_SIZE:
        raise UserWarning(
            f'Command table size {len(data)} is not a multiple of {COMMAND_SIZE}'
        )

    return [
        Command.from_bytes(data[offset:offset + COMMAND_SIZE])
        for offset in range(0, len(data), COMMAND_SIZE)
    ]


def load_listing(text: str) -> Program:
    try:
        results = grammar.program.parse_string(text, parse_all=True)
    except pp.ParseException as e:
        raise UserWarning(f'Cannot parse listing at line {e.lineno}: {e.line.strip()!r}')

    return list(results)


def is_listing(path: Path) -> bool:
    return path.suffix.lower() in LISTING_SUFFIXES


def load_file(path: Path, listing: bool | None = None) -> Program:
    if listing is None:
        listing = is_listing(path)

    lg.debug(f'Loading {"listing" if listing else "binary"} {path}')

    if listing:
        try:
            text = path.read_text()
        except UnicodeDecodeError as e:
            raise UserWarning(f'Listing {path} is not text: {e}')

        program = load_listing(text)
    else:
        program = load_binary(path.read_bytes())

    lg.debug(f'Loaded {len(program)} commands')
    return program
