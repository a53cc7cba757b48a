import logging as lg
from pathlib import Path
import tomllib


class DisasmSettings:
    abbreviate_registers: bool
    strict: bool

    def __init__(self):
        self.abbreviate_registers = False
        self.strict = False

    def update(
        self,
        abbreviate_registers: bool | None = None,
        strict: bool | None = None
    ):
        if abbreviate_registers is not None:
            self.abbreviate_registers = abbreviate_registers

        if strict is not None:
            self.strict = strict

        return self


SETTINGS_KEYS = {'abbreviate_registers', 'strict'}


def load_settings(path: Path) -> DisasmSettings:
    lg.debug(f'Loading settings from {path}')

    try:
        config = tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise UserWarning(f'Malformed settings file {path}: {e}')

    section = config.get('disasm', {})

    if not isinstance(section, dict):
        raise UserWarning(f'Expected a [disasm] table in {path}')

    unknown = set(section) - SETTINGS_KEYS

    if unknown:
        raise UserWarning(f'Unknown settings in {path}: {", ".join(sorted(unknown))}')

    for key, value in section.items():
        if not isinstance(value, bool):
            raise UserWarning(f'Setting {key} must be true or false, got {value!r}')

    return DisasmSettings().update(**section)
