'''
NeRPN: a minimalistic RPN calculator.

Arbitrary precision decimal arithmetic on an operand stack, the usual
transcendental functions (through float, so only as precise as a double), and
a handful of stack operators and display modes. Not intended to be
Turing-complete!

Tokens are operators, constants (E, PI) or plain decimal numerals, tried in
that order:

    > 2 3 + 4 *
    x: 20
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .ops import Op, DisplayMode
from .util import (RPNError, StackUnderflow, DivisionByZero, RequiresInteger,
                   InvalidNumber, InvalidOperand, NumericOverflow,
                   UnknownOperation)


__all__ = ('Machine', 'Lexer', 'CLI', 'Op', 'DisplayMode',
           'RPNError', 'StackUnderflow', 'DivisionByZero', 'RequiresInteger',
           'InvalidNumber', 'InvalidOperand', 'NumericOverflow',
           'UnknownOperation')
