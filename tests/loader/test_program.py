import pytest

import dvdvm.loader.program as loader

from unit_utils import find_file, from_hex


def test_load_binary():
    program = loader.load_binary(bytes.fromhex('3002000000010000' '0001000000000005'))
    assert program == [from_hex('3002000000010000'), from_hex('0001000000000005')]
    assert loader.load_binary(b'') == []


def test_load_binary_partial_record():
    with pytest.raises(UserWarning):
        loader.load_binary(bytes(9))


def test_load_listing():
    program = loader.load_listing(
        '// comment only line\n'
        '30 02 00 00 00 01 00 00 // bytes\n'
        '0x0001000000000005\n'
        'a000000000000001'
    )

    assert program == [
        from_hex('3002000000010000'),
        from_hex('0001000000000005'),
        from_hex('a000000000000001'),
    ]


def test_load_listing_errors():
    with pytest.raises(UserWarning, match='Cannot parse listing'):
        loader.load_listing('30 02 00 00 00 01 00 00\nJumpTT 1\n')

    with pytest.raises(UserWarning):
        loader.load_listing('30 02 00')


def test_load_file():
    program = loader.load_file(find_file('testdata/listings/menu.hex'))
    assert len(program) == 7
    assert program[5] == from_hex('c171040200030001')


def test_load_file_forced_binary(tmp_path):
    path = tmp_path / 'vmgm.hex'
    path.write_bytes(bytes.fromhex('3002000000010000'))
    assert loader.load_file(path, listing=False) == [from_hex('3002000000010000')]


def test_load_file_not_text(tmp_path):
    path = tmp_path / 'table.hex'
    path.write_bytes(bytes.fromhex('30020000000100ff'))

    with pytest.raises(UserWarning, match='not text'):
        loader.load_file(path)
