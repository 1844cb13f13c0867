'''
NeRPN lexer tests
'''

from decimal import Decimal
import math

import regex

from nerpn.ops import Op, OPERATORS, CONSTANTS
from nerpn.util import InvalidNumber
from nerpn.lexer import Lexer

from pytest import raises, mark


def test_spaces_separate_tokens():
    l = Lexer()
    assert list(l.lex('  1.5   -2\t- \n')) == ['1.5', '-2', '-']


def test_empty_line():
    l = Lexer()
    assert list(l.lex('')) == []
    assert list(l.lex('   \n')) == []


def test_trailing_key_operators_split_off():
    l = Lexer()
    assert list(l.lex('2 3+')) == ['2', '3', '+']
    assert list(l.lex('5!')) == ['5', '!']
    assert list(l.lex('3+*')) == ['3', '+', '*']
    assert list(l.lex('E-')) == ['E', '-']


def test_leading_sign_kept():
    l = Lexer()
    assert list(l.lex('-2 +.5')) == ['-2', '+.5']
    assert list(l.lex('-5-')) == ['-5', '-']


def test_words_kept_whole():
    l = Lexer()
    assert list(l.lex('expn1 en1 sqrt')) == ['expn1', 'en1', 'sqrt']


def test_resolve_operators():
    l = Lexer()
    assert l.resolve('+') == (Lexer.OPERATOR, Op.ADD)
    assert l.resolve('^') == (Lexer.OPERATOR, Op.POW)
    assert l.resolve('pow') == (Lexer.OPERATOR, Op.POW)
    assert l.resolve('c') == (Lexer.OPERATOR, Op.CLEAR)
    assert l.resolve('del') == (Lexer.OPERATOR, Op.DELETE)


def test_resolve_is_case_sensitive():
    l = Lexer()
    assert l.resolve('e') == (Lexer.OPERATOR, Op.E)
    assert l.resolve('E') == (Lexer.CONSTANT, Decimal(math.e))
    assert l.resolve('PI') == (Lexer.CONSTANT, Decimal(math.pi))
    with raises(InvalidNumber):
        l.resolve('Pi')
    with raises(InvalidNumber):
        l.resolve('SQRT')


@mark.parametrize('token, expected', [
    ('0', Decimal(0)),
    ('42', Decimal(42)),
    ('-1.50', Decimal('-1.50')),
    ('+3', Decimal(3)),
    ('.5', Decimal('0.5')),
    ('-.5', Decimal('-0.5')),
    ('1.', Decimal(1)),
])
def test_resolve_numbers(token, expected):
    l = Lexer()
    kind, parsed = l.resolve(token)
    assert kind == Lexer.NUMBER_KIND
    assert parsed == expected


def test_resolve_keeps_scale():
    l = Lexer()
    _, parsed = l.resolve('1.50')
    assert parsed.as_tuple().exponent == -2


@mark.parametrize('token', [
    '1e5', '1E5', '1,000', '1_000', '1.2.3', '--1', 'abc', '.', '',
    '0x10', 'inf', 'NaN',
])
def test_resolve_invalid(token):
    l = Lexer()
    with raises(InvalidNumber, match=regex.escape('"{}"'.format(token))):
        l.resolve(token)


def test_no_numeral_shadows_catalog():
    l = Lexer()
    assert not [key for key in OPERATORS if l.isnumber(key)]
    assert not [key for key in CONSTANTS if l.isnumber(key)]
