'''
Operand decoding: an immediate value or a register reference,
selected by a mode flag. The three variants differ in where the
fields sit relative to `start`.
'''

from dvdvm.common.text import to_hex, isprint, bit2str
from dvdvm.disasm.command import DecodeContext
import dvdvm.disasm.registers as regs


def immediate(value: int) -> str:
    code = to_hex(value)

    if isprint(value & 0xFF) and isprint((value >> 8) & 0xFF):
        code += f' ("{bit2str(value)}")'

    return code


def reg_or_data(ctx: DecodeContext, is_immediate: bool, start: int) -> str:
    if is_immediate:
        return immediate(ctx.bits(start, 16))

    return regs.reg(ctx, ctx.bits(start - 8, 8))


def reg_or_data_2(ctx: DecodeContext, is_immediate: bool, start: int) -> str:
    # General registers only, 4-bit index
    if is_immediate:
        return to_hex(ctx.bits(start - 1, 7))

    return f'g[{to_hex(ctx.bits(start - 4, 4))}]'


def reg_or_data_3(ctx: DecodeContext, is_immediate: bool, start: int) -> str:
    if is_immediate:
        return immediate(ctx.bits(start, 16))

    return regs.reg(ctx, ctx.bits(start, 8))
