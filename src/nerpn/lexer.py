from functools import reduce
from decimal import Decimal
import operator

import regex

from .util import InvalidNumber
from .ops import OPERATORS, CONSTANTS, KEY_OPERATORS


class Lexer:
    '''
    Lexer for the NeRPN *regular* grammar, and resolver of its tokens.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Number, the only kind of literal. No exponents, no thousands separators.
    NUMBER = r'''
              [+-]?
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              )|(?:
                  # .2, -.2
                  [+-]?
                  \.
                  \d+
              )
              '''

    KEY_OPERATOR = r'(?:' + r'|'.join(map(regex.escape, KEY_OPERATORS)) + r')'
    # A chunk of input between spaces. Key operators trailing it were typed
    # after it, so stand on their own; a leading one is a sign or an operator.
    CHUNK = r'''
             (?<token>
                 .+?
             )
             (?<trailing>
                 ''' + KEY_OPERATOR + r'''
             )*
             '''
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Operators first, then constants, then numbers.
    OPERATOR = 'operator'
    CONSTANT = 'constant'
    NUMBER_KIND = 'number'

    def lex(self, line):
        '''
        Take a line and yield all tokens, in order.
        '''
        cls = type(self)
        for chunk in regex.split(cls.SPACE, line.strip()):
            if not chunk:
                continue
            if chunk in OPERATORS or chunk in CONSTANTS:
                yield chunk
                continue
            match = regex.fullmatch(cls.CHUNK, chunk, flags=cls.FLAGS)
            yield match.group('token')
            yield from match.captures('trailing')

    def isnumber(self, token):
        '''
        Return True if token is a valid numeral.
        '''
        return regex.fullmatch(type(self).NUMBER, token,
                               flags=type(self).FLAGS) is not None

    def resolve(self, token):
        '''
        Resolve a token to a (kind, payload) pair.

        Kind is one of OPERATOR, CONSTANT or NUMBER_KIND; payload is the Op,
        or the value to push.
        '''
        cls = type(self)
        if token in OPERATORS:
            return cls.OPERATOR, OPERATORS[token]
        elif token in CONSTANTS:
            return cls.CONSTANT, CONSTANTS[token]
        elif self.isnumber(token):
            return cls.NUMBER_KIND, self.parse_number(token)
        raise InvalidNumber('"{}" is not a valid value!'.format(token))

    def parse_number(self, token):
        '''
        Convert a numeral to a value, keeping every digit typed.
        '''
        return Decimal(token)


# No numeral can ever shadow an operator or a constant.
assert not [key
            for key
            in list(OPERATORS) + list(CONSTANTS)
            if Lexer().isnumber(key)]
