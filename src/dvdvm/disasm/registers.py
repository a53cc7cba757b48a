from dataclasses import dataclass
from typing import Literal

from dvdvm.common.tables import SYSTEM_REGISTERS, GENERAL_REGISTER_COUNT
from dvdvm.common.text import to_hex
from dvdvm.disasm.command import DecodeContext
from dvdvm.disasm.faults import FaultKind


SYSTEM_FLAG = 0x80
INDEX_MASK = 0x7F


@dataclass(frozen=True)
class RegisterRef:
    bank: Literal['system', 'general']
    index: int

    @classmethod
    def from_code(cls, code: int) -> 'RegisterRef':
        if code & SYSTEM_FLAG:
            return cls('system', code & INDEX_MASK)

        return cls('general', code & INDEX_MASK)

    def is_valid(self) -> bool:
        if self.bank == 'system':
            return self.index < len(SYSTEM_REGISTERS)

        return self.index < GENERAL_REGISTER_COUNT


def system_reg(ctx: DecodeContext, reg: int) -> str:
    if not RegisterRef('system', reg).is_valid():
        return ctx.fault(FaultKind.UNKNOWN_REGISTER, 'system register', reg)

    name = SYSTEM_REGISTERS.name(reg, ctx.settings.abbreviate_registers)
    return f'{name} (SPRM:{reg})'


def g_reg(ctx: DecodeContext, reg: int) -> str:
    if not RegisterRef('general', reg).is_valid():
        return ctx.fault(FaultKind.UNKNOWN_REGISTER, 'general register', reg)

    return f'g[{to_hex(reg)}]'


def reg(ctx: DecodeContext, code: int) -> str:
    ref = RegisterRef.from_code(code)

    if ref.bank == 'system':
        return system_reg(ctx, ref.index)

    return g_reg(ctx, ref.index)
