from dvdvm.disasm.faults import CollectingSink, FaultKind, LoggingSink
from dvdvm.disasm.recompile import recompile, recompile_command
from dvdvm.disasm.settings import DisasmSettings

from unit_utils import decode, from_hex
from fixtures import sink  # noqa: F401


def test_play_title():
    # 001 1 00000000 0010 ... 0000001 ...
    assert decode('3002000000010000') == ('JumpTT 1', [])


def test_unknown_class():
    assert decode('e000000000000000') == ('', [FaultKind.UNKNOWN_INSTRUCTION_CLASS])
    assert decode('ffffffffffffffff') == ('', [FaultKind.UNKNOWN_INSTRUCTION_CLASS])


def test_deterministic(sink):  # noqa: F811
    cmd = from_hex('a1a385010002000b')
    assert recompile_command(cmd, sink) == recompile_command(cmd, sink)


def test_listing(sink):  # noqa: F811
    program = [from_hex('3002000000010000'), from_hex('0001000000000005')]
    assert recompile(program, sink) == '  JumpTT 1\n  Goto 5'
    assert sink.faults == []


def test_faults_do_not_stop_listing(sink):  # noqa: F811
    program = [
        from_hex('e000000000000000'),
        from_hex('3004000000010000'),
        from_hex('0001000000000005'),
    ]

    assert recompile(program, sink) == '  \n  \n  Goto 5'
    assert sink.kinds() == [FaultKind.UNKNOWN_INSTRUCTION_CLASS, FaultKind.UNKNOWN_JUMP_OP]


def test_empty_program(sink):  # noqa: F811
    assert recompile([], sink) == '  '


def test_settings_reach_registers(sink):  # noqa: F811
    settings = DisasmSettings().update(abbreviate_registers=True)
    cmd = from_hex('3032000000018102')
    assert recompile_command(cmd, sink, settings) == 'if (ASTN (SPRM:1) != g[0x2]) JumpTT 1'


def test_logging_sink(caplog):
    sink = LoggingSink()
    recompile([from_hex('0005000000000000')], sink)
    assert sink.count == 1
    assert 'UnknownSpecialOp: special op (5)' in caplog.text


def test_default_sink_logs(caplog):
    assert recompile_command(from_hex('e000000000000000')) == ''
    assert 'UnknownInstructionClass' in caplog.text


def test_collecting_sink_clear():
    sink = CollectingSink()
    recompile_command(from_hex('e000000000000000'), sink)
    sink.clear()
    assert sink.faults == []
