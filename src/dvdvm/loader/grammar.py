''' Hex listing grammar: one navigation command per statement '''

import pyparsing as pp

from dvdvm.disasm.command import Command, COMMAND_SIZE


def to_command(tokens: pp.ParseResults) -> Command:
    return Command.from_bytes([int(b, 16) for b in tokens])


comment = pp.Suppress(pp.Literal('//') + pp.rest_of_line)

word = pp.Regex(r'(0[xX])?[0-9A-Fa-f]{16}\b').set_parse_action(lambda r: Command(int(r[0], 16)))
byte = pp.Regex(r'[0-9A-Fa-f]{2}\b')
byte_command = (byte * COMMAND_SIZE).set_parse_action(to_command)

statement = word | byte_command
program = pp.ZeroOrMore(statement)
program.ignore(comment)
