from dvdvm.common.tables import COMPARE_OPS
from dvdvm.disasm.command import DecodeContext
from dvdvm.disasm.faults import FaultKind
from dvdvm.disasm.operands import reg_or_data
import dvdvm.disasm.registers as regs


COMPARE_OP = (54, 3)
COMPARE_IMMEDIATE = 55
SET_IMMEDIATE = 60


def cmp_op(ctx: DecodeContext, op: int) -> str:
    if op not in COMPARE_OPS:
        return ctx.fault(FaultKind.UNKNOWN_COMPARE_OP, 'compare op', op)

    return f' {COMPARE_OPS[op]} '


def condition(lhs: str, op_symbol: str, rhs: str) -> str:
    return f'if ({lhs}{op_symbol}{rhs}) '


def if_version_1(ctx: DecodeContext) -> str:
    op = ctx.bits(*COMPARE_OP)

    if not op:
        return ''

    lhs = regs.g_reg(ctx, ctx.bits(39, 8))
    op_symbol = cmp_op(ctx, op)
    rhs = reg_or_data(ctx, ctx.flag(COMPARE_IMMEDIATE), 31)
    return condition(lhs, op_symbol, rhs)


def if_version_2(ctx: DecodeContext) -> str:
    op = ctx.bits(*COMPARE_OP)

    if not op:
        return ''

    lhs = regs.reg(ctx, ctx.bits(15, 8))
    op_symbol = cmp_op(ctx, op)
    rhs = regs.reg(ctx, ctx.bits(7, 8))
    return condition(lhs, op_symbol, rhs)


def if_version_3(ctx: DecodeContext) -> str:
    op = ctx.bits(*COMPARE_OP)

    if not op:
        return ''

    lhs = regs.g_reg(ctx, ctx.bits(43, 4))
    op_symbol = cmp_op(ctx, op)
    rhs = reg_or_data(ctx, ctx.flag(COMPARE_IMMEDIATE), 15)
    return condition(lhs, op_symbol, rhs)


def if_version_4(ctx: DecodeContext) -> str:
    op = ctx.bits(*COMPARE_OP)

    if not op:
        return ''

    lhs = regs.g_reg(ctx, ctx.bits(51, 4))
    op_symbol = cmp_op(ctx, op)
    rhs = reg_or_data(ctx, ctx.flag(COMPARE_IMMEDIATE), 31)
    return condition(lhs, op_symbol, rhs)


def if_version_5(ctx: DecodeContext) -> str:
    op = ctx.bits(*COMPARE_OP)

    if not op:
        return ''

    if ctx.flag(SET_IMMEDIATE):
        lhs = regs.g_reg(ctx, ctx.bits(31, 8))
        op_symbol = cmp_op(ctx, op)
        rhs = regs.reg(ctx, ctx.bits(23, 8))
        return condition(lhs, op_symbol, rhs)

    return if_version_1(ctx)
