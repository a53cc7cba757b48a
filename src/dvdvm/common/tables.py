from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class RegisterTable:
    names: tuple[str, ...]
    abbreviations: tuple[str, ...]

    def __post_init__(self):
        if len(self.names) != len(self.abbreviations):
            raise UserWarning(
                f'Register table mismatch: {len(self.names)} names, '
                f'{len(self.abbreviations)} abbreviations'
            )

    def __len__(self) -> int:
        return len(self.names)

    def name(self, index: int, abbreviated: bool = False) -> str:
        if abbreviated and self.abbreviations[index]:
            return self.abbreviations[index]

        return self.names[index]


@dataclass(frozen=True)
class SymbolTable:
    symbols: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 0 <= index < len(self.symbols)

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]


def symbols(items: Sequence[str]) -> SymbolTable:
    return SymbolTable(tuple(items))


SYSTEM_REGISTERS = RegisterTable(
    names=(
        'Menu Description Language Code',
        'Audio Stream Number',
        'Sub-picture Stream Number',
        'Angle Number',
        'Title Track Number',
        'VTS Title Track Number',
        'VTS PGC Number',
        'PTT Number for One_Sequential_PGC_Title',
        'Highlighted Button Number',
        'Navigation Timer',
        'Title PGC Number for Navigation Timer',
        'Audio Mixing Mode for Karaoke',
        'Country Code for Parental Management',
        'Parental Level',
        'Player Configurations for Video',
        'Player Configurations for Audio',
        'Initial Language Code for Audio',
        'Initial Language Code Extension for Audio',
        'Initial Language Code for Sub-picture',
        'Initial Language Code Extension for Sub-picture',
        'Player Regional Code',
        'Reserved 21',
        'Reserved 22',
        'Reserved 23',
    ),
    abbreviations=(
        '',
        'ASTN',
        'SPSTN',
        'AGLN',
        'TTN',
        'VTS_TTN',
        'TT_PGCN',
        'PTTN',
        'HL_BTNN',
        'NVTMR',
        'NV_PGCN',
        '',
        'CC_PLT',
        'PLT',
        '',
        '',
        '',
        '',
        '',
        '',
        '',
        '',
        '',
        '',
    )
)

# Index 0 is "no condition"
COMPARE_OPS = symbols(['', '&', '==', '!=', '>=', '>', '<=', '<'])

# Index 0 is "no operation"
SET_OPS = symbols([
    '', '=', '<->', '+=', '-=', '*=', '/=', '%=', 'rnd', '&=', '|=', '^='
])

# Linksub targets, indexed by the 8-bit link op
LINKS = symbols([
    'LinkNoLink', 'LinkTopC', 'LinkNextC', 'LinkPrevC',
    '', 'LinkTopPG', 'LinkNextPG', 'LinkPrevPG',
    '', 'LinkTopPGC', 'LinkNextPGC', 'LinkPrevPGC',
    'LinkGoUpPGC', 'LinkTailPGC', '', '',
    'RSM'
])

GENERAL_REGISTER_COUNT = 16
