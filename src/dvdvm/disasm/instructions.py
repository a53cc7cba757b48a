from dvdvm.common.tables import SET_OPS, LINKS
from dvdvm.common.text import to_hex
from dvdvm.disasm.command import DecodeContext
from dvdvm.disasm.faults import FaultKind
from dvdvm.disasm.operands import reg_or_data, reg_or_data_2, reg_or_data_3
import dvdvm.disasm.registers as regs


SUB_OP = (51, 4)
SET_OP = (59, 4)
SET_IMMEDIATE = 60
BUTTON = (15, 6)

NOP = 'NOP'

# Fixed system registers touched by the system set instructions
SPRM_HIGHLIGHTED_BUTTON = 8
SPRM_NAV_TIMER = 9
SPRM_NAV_TIMER_PGC = 10


def set_op(ctx: DecodeContext, op: int) -> str:
    if op not in SET_OPS:
        return ctx.fault(FaultKind.UNKNOWN_SET_OP, 'set op', op)

    return f' {SET_OPS[op]} '


# - Special - #

def special(ctx: DecodeContext) -> str:
    op = ctx.bits(*SUB_OP)

    match op:
        case 0:
            return NOP
        case 1:
            return f'Goto {ctx.bits(7, 8)}'
        case 2:
            return 'Break'
        case 3:
            return f'SetTmpPML {ctx.bits(11, 4)}, Goto {ctx.bits(7, 8)}'
        case _:
            return ctx.fault(FaultKind.UNKNOWN_SPECIAL_OP, 'special op', op)


# - Links - #

def linksub(ctx: DecodeContext) -> str:
    linkop = ctx.bits(7, 8)
    button = ctx.bits(*BUTTON)

    # Reserved slots have no name
    if linkop not in LINKS or not LINKS[linkop]:
        return ctx.fault(FaultKind.UNKNOWN_LINK_OP, 'linksub op', linkop)

    return f'{LINKS[linkop]} (button {button})'


def link(ctx: DecodeContext, optional: bool) -> str:
    op = ctx.bits(*SUB_OP)
    code = ', ' if optional and op else ''

    match op:
        case 0:
            if not optional:
                ctx.fault(FaultKind.UNKNOWN_LINK_OP, 'mandatory link is a no-op', op)
        case 1:
            code += linksub(ctx)
        case 4:
            code += f'LinkPGCN {ctx.bits(14, 15)}'
        case 5:
            code += f'LinkPTT {ctx.bits(9, 10)} (button {ctx.bits(*BUTTON)})'
        case 6:
            code += f'LinkPGN {ctx.bits(6, 7)} (button {ctx.bits(*BUTTON)})'
        case 7:
            code += f'LinkCN {ctx.bits(7, 8)} (button {ctx.bits(*BUTTON)})'
        case _:
            ctx.fault(FaultKind.UNKNOWN_LINK_OP, 'link op', op)

    return code


# - Jumps and calls - #

def jump_ss(ctx: DecodeContext) -> str:
    target = ctx.bits(23, 2)

    match target:
        case 0:
            return 'JumpSS FP'
        case 1:
            return f'JumpSS VMGM (menu {ctx.bits(19, 4)})'
        case 2:
            vts = ctx.bits(30, 7)
            title = ctx.bits(38, 7)
            menu = ctx.bits(19, 4)
            return f'JumpSS VTSM (vts {vts}, title {title}, menu {menu})'
        case 3:
            return f'JumpSS VMGM (pgc {ctx.bits(46, 15)})'
        case _:
            return ctx.fault(FaultKind.UNKNOWN_JUMP_OP, 'JumpSS target', target)


def call_ss(ctx: DecodeContext) -> str:
    target = ctx.bits(23, 2)
    rsm_cell = ctx.bits(31, 8)

    match target:
        case 0:
            return f'CallSS FP (rsm_cell {rsm_cell})'
        case 1:
            return f'CallSS VMGM (menu {ctx.bits(19, 4)}, rsm_cell {rsm_cell})'
        case 2:
            return f'CallSS VTSM (menu {ctx.bits(19, 4)}, rsm_cell {rsm_cell})'
        case 3:
            return f'CallSS VMGM (pgc {ctx.bits(46, 15)}, rsm_cell {rsm_cell})'
        case _:
            return ctx.fault(FaultKind.UNKNOWN_JUMP_OP, 'CallSS target', target)


def jump(ctx: DecodeContext) -> str:
    op = ctx.bits(*SUB_OP)

    match op:
        case 1:
            return 'Stop'
        case 2:
            return f'JumpTT {ctx.bits(22, 7)}'
        case 3:
            return f'JumpVTS_TT {ctx.bits(22, 7)}'
        case 5:
            return f'JumpVTS_PTT {ctx.bits(22, 7)}:{ctx.bits(41, 10)}'
        case 6:
            return jump_ss(ctx)
        case 8:
            return call_ss(ctx)
        case _:
            return ctx.fault(FaultKind.UNKNOWN_JUMP_OP, 'jump op', op)


# - System parameters - #

def system_set(ctx: DecodeContext) -> str:
    op = ctx.bits(59, 4)
    immediate = ctx.flag(SET_IMMEDIATE)
    code = ''

    match op:
        case 1:
            # Audio, sub-picture and angle streams, each one optional
            for i in range(1, 4):
                start = 47 - i * 8

                if ctx.flag(start):
                    code += regs.system_reg(ctx, i)
                    code += ' = '
                    code += reg_or_data_2(ctx, immediate, start)
                    code += '; '
        case 2:
            code += regs.system_reg(ctx, SPRM_NAV_TIMER)
            code += ' = '
            code += reg_or_data(ctx, immediate, 47)
            code += '; '
            code += regs.system_reg(ctx, SPRM_NAV_TIMER_PGC)
            code += f' = {ctx.bits(30, 15)};'
        case 3:
            code += 'SetMode '
            code += 'Counter ' if ctx.flag(23) else 'Register '
            code += regs.g_reg(ctx, ctx.bits(19, 4))
            code += set_op(ctx, 0x01)
            code += reg_or_data(ctx, immediate, 47)
        case 6:
            code += regs.system_reg(ctx, SPRM_HIGHLIGHTED_BUTTON)

            if immediate:
                code += f' = {to_hex(ctx.bits(31, 16))} (button no {ctx.bits(31, 6)});'
            else:
                code += f' = g[{to_hex(ctx.bits(19, 4))}];'
        case _:
            # No set form exists for SPRM11 (karaoke mixing mode)
            ctx.fault(FaultKind.UNKNOWN_SYSTEM_SET_OP, 'system set op', op)

    return code


# - General parameters - #

def set_version_1(ctx: DecodeContext) -> str:
    op = ctx.bits(*SET_OP)

    if not op:
        return NOP

    code = regs.g_reg(ctx, ctx.bits(35, 4))
    code += set_op(ctx, op)
    code += reg_or_data(ctx, ctx.flag(SET_IMMEDIATE), 31)
    return code + ';'


def set_version_2(ctx: DecodeContext) -> str:
    op = ctx.bits(*SET_OP)

    if not op:
        return NOP

    code = regs.g_reg(ctx, ctx.bits(51, 4))
    code += set_op(ctx, op)
    code += reg_or_data(ctx, ctx.flag(SET_IMMEDIATE), 47)
    return code + ';'


def set_version_3(ctx: DecodeContext) -> str:
    op = ctx.bits(*SET_OP)

    if not op:
        return NOP

    code = regs.g_reg(ctx, ctx.bits(51, 4))
    code += set_op(ctx, op)
    code += reg_or_data_3(ctx, ctx.flag(SET_IMMEDIATE), 47)
    return code + ';'
