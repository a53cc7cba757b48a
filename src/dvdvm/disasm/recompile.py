import logging as lg
from typing import Callable, Iterable

import dvdvm.disasm.conditions as cond
import dvdvm.disasm.instructions as ins
from dvdvm.disasm.command import Command, DecodeContext
from dvdvm.disasm.faults import FaultKind, FaultSink, LoggingSink
from dvdvm.disasm.settings import DisasmSettings


INSTRUCTION_CLASS = (63, 3)
JUMP_FLAG = 60

INDENT = '  '


# - Instruction classes - #

def special(ctx: DecodeContext) -> str:
    return cond.if_version_1(ctx) + ins.special(ctx)


def jump_or_link(ctx: DecodeContext) -> str:
    if ctx.flag(JUMP_FLAG):
        return cond.if_version_2(ctx) + ins.jump(ctx)

    return cond.if_version_1(ctx) + ins.link(ctx, optional=False)


def system_set(ctx: DecodeContext) -> str:
    code = cond.if_version_2(ctx)
    code += ins.system_set(ctx)
    code += ins.link(ctx, optional=True)
    return code


def general_set(ctx: DecodeContext) -> str:
    code = cond.if_version_3(ctx)
    code += ins.set_version_1(ctx)
    code += ins.link(ctx, optional=True)
    return code


def set_compare_linksub(ctx: DecodeContext) -> str:
    code = ins.set_version_2(ctx)
    code += ', '
    code += cond.if_version_4(ctx)
    code += ins.linksub(ctx)
    return code


def compare_set_linksub(ctx: DecodeContext) -> str:
    # Condition guards both the set and the link
    code = cond.if_version_5(ctx)
    code += '{ '
    code += ins.set_version_3(ctx)
    code += ', '
    code += ins.linksub(ctx)
    code += ' }'
    return code


def compare_set_always_linksub(ctx: DecodeContext) -> str:
    # Condition guards the set only
    code = cond.if_version_5(ctx)
    code += '{ '
    code += ins.set_version_3(ctx)
    code += ' } '
    code += ins.linksub(ctx)
    return code


HANDLERS: dict[int, Callable[[DecodeContext], str]] = {
    0: special,
    1: jump_or_link,
    2: system_set,
    3: general_set,
    4: set_compare_linksub,
    5: compare_set_linksub,
    6: compare_set_always_linksub,
}


# -- Implementation -- #

def recompile_command(
    command: Command,
    sink: FaultSink | None = None,
    settings: DisasmSettings | None = None
) -> str:
    ctx = DecodeContext(
        command,
        sink if sink is not None else LoggingSink(),
        settings if settings is not None else DisasmSettings()
    )

    kind = ctx.bits(*INSTRUCTION_CLASS)
    handler = HANDLERS.get(kind)

    if handler is None:
        return ctx.fault(FaultKind.UNKNOWN_INSTRUCTION_CLASS, 'instruction class', kind)

    return handler(ctx)


def recompile(
    program: Iterable[Command],
    sink: FaultSink | None = None,
    settings: DisasmSettings | None = None
) -> str:
    if sink is None:
        sink = LoggingSink()

    lines = []

    for number, command in enumerate(program, start=1):
        lg.debug(f'{number:4}: {command}')
        lines.append(recompile_command(command, sink, settings))

    return INDENT + f'\n{INDENT}'.join(lines)
