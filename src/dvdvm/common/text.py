def to_hex(value: int) -> str:
    return f'0x{value:x}'


def isprint(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


def bit2str(value: int) -> str:
    ''' Two characters from a 16-bit value, high byte first '''
    return chr((value >> 8) & 0xFF) + chr(value & 0xFF)
