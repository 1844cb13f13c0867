'''
Values the machine computes with.

A value is a plain decimal.Decimal: arbitrary precision, with an explicit
exponent (the negated scale). Exact operations run in an unbounded context;
division rounds to decimal128 precision. Transcendental functions go through
float, and are therefore only as precise as a double.
'''

from decimal import (Decimal, Context, ROUND_HALF_EVEN, ROUND_CEILING,
                     ROUND_FLOOR, MAX_PREC, MAX_EMAX, MIN_EMIN)
import decimal
import math


_TRAPS = [decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow]

# Wide enough that sums, products and integral powers never round.
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=_TRAPS)
# decimal128 precision
DIVISION = Context(prec=34, rounding=ROUND_HALF_EVEN,
                   Emax=MAX_EMAX, Emin=MIN_EMIN, traps=_TRAPS)
# decimal64 precision
DISPLAY = Context(prec=16, rounding=ROUND_HALF_EVEN,
                  Emax=MAX_EMAX, Emin=MIN_EMIN, traps=_TRAPS)

# Largest exponent exact exponentiation accepts.
MAX_EXACT_EXPONENT = 999999999

ZERO = Decimal(0)
ONE = Decimal(1)
TEN = Decimal(10)


def scale(value):
    '''
    Number of fractional digits; negative for values like 1E+3.
    '''
    return -value.as_tuple().exponent


def is_integer(value):
    '''
    True if value carries no fractional digits.

    1.0 is *not* an integer here: its scale is 1.
    '''
    return scale(value) <= 0


def from_float(number):
    '''
    Exact decimal expansion of a float result.
    '''
    if math.isnan(number):
        raise ValueError('not a number')
    if math.isinf(number):
        raise OverflowError('infinite')
    return Decimal(number)


def to_float(value):
    return float(value)


def add(y, x):
    return EXACT.add(y, x)


def subtract(y, x):
    return EXACT.subtract(y, x)


def multiply(y, x):
    return EXACT.multiply(y, x)


def divide(y, x):
    '''
    y / x, rounded to 34 significant digits.
    '''
    if x == ZERO:
        raise ZeroDivisionError('{} / {}'.format(y, x))
    return DIVISION.divide(y, x)


def remainder(y, x):
    '''
    y % x, truncating: the result takes the sign of y.
    '''
    if x == ZERO:
        raise ZeroDivisionError('{} % {}'.format(y, x))
    return EXACT.remainder(y, x)


def maximum(y, x):
    return EXACT.max(y, x)


def minimum(y, x):
    return EXACT.min(y, x)


def power(y, x):
    '''
    y ^ x.

    Integral exponents are computed exactly, or to division precision when
    negative. Anything else goes through float.
    '''
    if not is_integer(x):
        return from_float(math.pow(to_float(y), to_float(x)))
    if x == ZERO:
        return ONE
    if abs(x) > MAX_EXACT_EXPONENT:
        raise OverflowError('exponent {} too large'.format(x))
    if x > ZERO:
        return EXACT.power(y, x)
    if y == ZERO:
        raise ZeroDivisionError('{} ^ {}'.format(y, x))
    return DIVISION.power(y, x)


def hypot(y, x):
    return from_float(math.hypot(to_float(x), to_float(y)))


def absolute(x):
    return EXACT.abs(x)


def negate(x):
    return EXACT.minus(x)


def ceil(x):
    return x.quantize(ONE, rounding=ROUND_CEILING, context=EXACT)


def floor(x):
    return x.quantize(ONE, rounding=ROUND_FLOOR, context=EXACT)


def factorial(x):
    '''
    x! for integral, non-negative x.
    '''
    if x < ZERO:
        raise ValueError('factorial of negative {}'.format(x))
    return Decimal(math.factorial(int(x)))


def for_display(value):
    '''
    Value rounded to 16 significant digits, for display only.
    '''
    return DISPLAY.plus(value)
