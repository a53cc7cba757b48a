from dataclasses import dataclass, field

from dvdvm.disasm.faults import Fault, FaultKind, FaultSink, LoggingSink
from dvdvm.disasm.settings import DisasmSettings


COMMAND_SIZE = 8    # Bytes per navigation command
COMMAND_BITS = COMMAND_SIZE * 8
MAX_FIELD_WIDTH = 32


@dataclass(frozen=True)
class Command:
    word: int

    def __post_init__(self):
        if not isinstance(self.word, int) or not 0 <= self.word < (1 << COMMAND_BITS):
            raise UserWarning(f'Command word out of range: {self.word!r}')

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | list[int]) -> 'Command':
        if len(data) != COMMAND_SIZE:
            raise UserWarning(f'Command must be {COMMAND_SIZE} bytes, got {len(data)}')

        return cls(int.from_bytes(bytes(data), 'big'))

    def to_bytes(self) -> bytes:
        return self.word.to_bytes(COMMAND_SIZE, 'big')

    def __str__(self) -> str:
        return ' '.join(f'{b:02X}' for b in self.to_bytes())


Program = list[Command]


def extract(word: int, start: int, count: int, sink: FaultSink) -> int:
    ''' Unsigned field of `count` bits from bit `start` down to `start - count + 1` '''

    if count == 0:
        return 0

    if start - count < -1 or count < 0 or start < 0 or count > MAX_FIELD_WIDTH \
            or start > COMMAND_BITS - 1:
        sink.report(Fault(FaultKind.BIT_RANGE_OUT_OF_BOUNDS, f'bits({start}, {count})', start))
        return 0

    return (word >> (start - count + 1)) & ((1 << count) - 1)


@dataclass
class DecodeContext:
    command: Command
    sink: FaultSink = field(default_factory=LoggingSink)
    settings: DisasmSettings = field(default_factory=DisasmSettings)

    def bits(self, start: int, count: int) -> int:
        return extract(self.command.word, start, count, self.sink)

    def flag(self, bit: int) -> bool:
        return self.bits(bit, 1) == 1

    def fault(self, kind: FaultKind, field: str, value: int | None = None) -> str:
        self.sink.report(Fault(kind, field, value))
        return ''
