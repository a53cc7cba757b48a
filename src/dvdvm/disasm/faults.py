import logging as lg
from dataclasses import dataclass
from enum import Enum


class FaultKind(Enum):
    BIT_RANGE_OUT_OF_BOUNDS = 'BitRangeOutOfBounds'
    UNKNOWN_INSTRUCTION_CLASS = 'UnknownInstructionClass'
    UNKNOWN_SPECIAL_OP = 'UnknownSpecialOp'
    UNKNOWN_LINK_OP = 'UnknownLinkOp'
    UNKNOWN_JUMP_OP = 'UnknownJumpOp'
    UNKNOWN_SYSTEM_SET_OP = 'UnknownSystemSetOp'
    UNKNOWN_REGISTER = 'UnknownRegister'
    UNKNOWN_COMPARE_OP = 'UnknownCompareOp'
    UNKNOWN_SET_OP = 'UnknownSetOp'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Fault:
    kind: FaultKind
    field: str
    value: int | None = None

    def __str__(self) -> str:
        if self.value is None:
            return f'{self.kind}: {self.field}'

        return f'{self.kind}: {self.field} ({self.value})'


class FaultSink:
    ''' Receives decoding faults; must never interrupt decoding '''

    def report(self, fault: Fault):
        raise NotImplementedError()


class CollectingSink(FaultSink):
    faults: list[Fault]

    def __init__(self):
        self.faults = []

    def report(self, fault: Fault):
        self.faults.append(fault)

    def kinds(self) -> list[FaultKind]:
        return [f.kind for f in self.faults]

    def clear(self):
        self.faults.clear()


class LoggingSink(FaultSink):
    count: int

    def __init__(self):
        self.count = 0

    def report(self, fault: Fault):
        self.count += 1
        lg.warning(f'Decode fault {fault}')
