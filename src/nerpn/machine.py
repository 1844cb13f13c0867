from functools import wraps
import logging
import random
import math

from . import value
from .util import (StackUnderflow, RequiresInteger, UnknownOperation,
                   wrap_user_errors)
from .ops import Op, DisplayMode, DISPLAY_MODES
from .stack import Stack
from .lexer import Lexer
from .formatter import format_entry


logger = logging.getLogger(__name__)


def _approximate(f):
    '''
    Lift a float function to values. Only as precise as a double.
    '''
    @wraps(f)
    def wrapped(*args):
        return value.from_float(f(*map(value.to_float, args)))
    return wrapped


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them: operators are applied to the stack, constants
    and numbers are pushed onto it.

    Holds no global state, but is not safe to feed from more than one thread
    at a time; callers serialize.
    '''

    DEFAULT_DISPLAY_MODE = DisplayMode.STD

    # y and x, in that order, to the value replacing them.
    BINARY = {
        Op.ADD: value.add,
        Op.SUBT: value.subtract,
        Op.MULT: value.multiply,
        Op.DIV: value.divide,
        Op.MOD: value.remainder,
        Op.POW: value.power,
        Op.HYP: value.hypot,
        Op.MAX: value.maximum,
        Op.MIN: value.minimum,
    }

    # Exact, x to the value replacing it.
    UNARY = {
        Op.ABS: value.absolute,
        Op.NEG: value.negate,
        Op.CEIL: value.ceil,
        Op.FLOOR: value.floor,
    }

    # Through float, x to the value replacing it.
    MATH = {
        Op.ACOS: _approximate(math.acos),
        Op.ASIN: _approximate(math.asin),
        Op.ATAN: _approximate(math.atan),
        Op.CBRT: _approximate(math.cbrt),
        Op.COS: _approximate(math.cos),
        Op.COSH: _approximate(math.cosh),
        Op.DEG: _approximate(math.degrees),
        Op.E: _approximate(math.exp),
        Op.EN1: _approximate(math.expm1),
        Op.LN: _approximate(math.log),
        Op.LOG: _approximate(math.log10),
        Op.RAD: _approximate(math.radians),
        Op.SIN: _approximate(math.sin),
        Op.SINH: _approximate(math.sinh),
        Op.SQRT: _approximate(math.sqrt),
        Op.TAN: _approximate(math.tan),
        Op.TANH: _approximate(math.tanh),
    }

    def __init__(self, display_mode=None):
        '''
        Create empty stack machine.

        :param display_mode: DisplayMode to start in.
        '''
        self.stack = Stack()
        self.display_mode = display_mode or type(self).DEFAULT_DISPLAY_MODE
        self.lexer = Lexer()

    # ------------------------------------------------------------------
    # What the outside world sees
    # ------------------------------------------------------------------

    def feed(self, line):
        '''
        Push every token on a line, stopping at the first bad one.
        '''
        for token in self.lexer.lex(line):
            self.push_token(token)

    def push_token(self, token):
        '''
        Run an operator, or push a constant or number.

        Raises InvalidNumber if token is none of these.
        '''
        kind, payload = self.lexer.resolve(token)
        if kind == Lexer.OPERATOR:
            self.dispatch(payload)
        else:
            self.push_value(payload)

    def push_value(self, number):
        logger.debug('push %s', number)
        self.stack.push(number)

    def pop(self):
        return self.stack.pop()

    def peek(self):
        return self.stack.peek()

    def stack_height(self):
        return self.stack.height()

    def formatted_entry(self, index):
        '''
        Entry index from the bottom, formatted per display mode.

        None if there is no such entry.
        '''
        entry = self.stack.entry_at(index)
        if entry is None:
            return None
        return format_entry(entry, self.display_mode)

    def formatted_top(self, n):
        '''
        Topmost n entries (fewer if the stack is shorter), deepest first.
        '''
        height = self.stack.height()
        return [self.formatted_entry(index)
                for index
                in range(max(height - n, 0), height)]

    def stack_snapshot_text(self):
        '''
        Whole stack, one "<depth>: <value>" line per entry, bottom first.

        Values are shown unrounded, whatever the display mode.
        '''
        height = self.stack.height()
        return ''.join('{}: {}\n'.format(height - index, entry)
                       for index, entry
                       in enumerate(self.stack))

    __str__ = stack_snapshot_text

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    @classmethod
    def arity(cls, op):
        '''
        Minimum number of stack elements op needs.
        '''
        if op in DISPLAY_MODES:
            return 0
        elif op in cls.BINARY:
            return 2
        elif op in cls.UNARY or op in cls.MATH:
            return 1
        elif op in cls.ARITIES:
            return cls.ARITIES[op]
        raise UnknownOperation('Unknown operation {!r}.'.format(op))

    def dispatch(self, op):
        '''
        Run op on the stack, once it's known to be tall enough.

        Returns False if op had nothing to act on (only del on an empty
        stack), True otherwise.
        '''
        cls = type(self)
        logger.debug('%s on %d element(s)', op, self.stack.height())
        try:
            self.stack.require(cls.arity(op))
        except StackUnderflow:
            logger.debug('%s rejected, stack too short', op)
            raise
        if op in DISPLAY_MODES:
            self.display_mode = DISPLAY_MODES[op]
        elif op in cls.FUNCTIONS:
            return cls.FUNCTIONS[op](self) is not False
        elif op in cls.UNARY:
            self._apply(op, cls.UNARY[op], 1)
        elif op in cls.MATH:
            self._apply(op, cls.MATH[op], 1)
        else:
            self._apply(op, cls.BINARY[op], 2)
        return True

    @wrap_user_errors('{1}')
    def _apply(self, op, f, arity):
        '''
        Replace the topmost arity values with f of them.

        Nothing is popped until f succeeds. If you don't keep the order,
        you'll do 2**9 when you say 9 2 ^ instead of 9**2.
        '''
        args = self.stack.top(arity)
        result = f(*args)
        for _ in range(arity):
            self.stack.pop()
        self.push_value(result)

    def fact(self):
        '''
        x! for integral, non-negative x.
        '''
        if not value.is_integer(self.stack.peek()):
            raise RequiresInteger(
                'Last element must be an integer for this operation!')
        self._apply(Op.FACT, value.factorial, 1)

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def delete(self):
        '''
        Drop the element at the top of stack, if any.
        '''
        if not self.stack.height():
            return False
        self.stack.pop()

    def dup(self):
        '''
        Duplicate element at top of stack.
        '''
        self.push_value(self.stack.peek())

    def swap(self):
        '''
        Swap two elements at top of stack.
        '''
        self.stack.swap_top_with(1)

    def rot(self):
        '''
        Pull the third element from the top up to the top. Always three deep.
        '''
        self.push_value(self.stack.remove_at_depth(2))

    def rand(self):
        '''
        Push a random number in [0, 1).
        '''
        self.push_value(value.from_float(random.random()))  # nosec B311

    # Composite operations, run step by step. A step failing leaves the
    # stack as the previous steps left it.

    def inv(self):
        '''
        1/x
        '''
        self.push_value(value.ONE)
        self.stack.swap_top_with(1)
        self.dispatch(Op.DIV)

    def exp(self):
        '''
        10^x
        '''
        self.push_value(value.TEN)
        self.stack.swap_top_with(1)
        self.dispatch(Op.POW)

    def expn1(self):
        '''
        Invert 10, then raise it to x: 0.1^x.
        '''
        self.push_value(value.TEN)
        self.dispatch(Op.INV)
        self.stack.swap_top_with(1)
        self.dispatch(Op.POW)

    def root(self):
        '''
        y^(1/x)
        '''
        self.dispatch(Op.INV)
        self.dispatch(Op.POW)

    # Operations that aren't plain functions of x and y.
    FUNCTIONS = {
        Op.FACT: fact,
        Op.CLEAR: clear,
        Op.DELETE: delete,
        Op.DUP: dup,
        Op.SWAP: swap,
        Op.ROT: rot,
        Op.RAND: rand,
        Op.INV: inv,
        Op.EXP: exp,
        Op.EXPN1: expn1,
        Op.ROOT: root,
    }
    # Their minimum stack heights. c refuses an empty stack; del doesn't.
    ARITIES = {
        Op.FACT: 1,
        Op.CLEAR: 1,
        Op.DELETE: 0,
        Op.DUP: 1,
        Op.SWAP: 2,
        Op.ROT: 3,
        Op.RAND: 0,
        Op.INV: 1,
        Op.EXP: 1,
        Op.EXPN1: 1,
        Op.ROOT: 2,
    }

    # No operation goes undispatched.
    assert not (set(Op) ^ (DISPLAY_MODES.keys() | FUNCTIONS.keys() |
                           UNARY.keys() | MATH.keys() | BINARY.keys()))
    assert FUNCTIONS.keys() == ARITIES.keys()
