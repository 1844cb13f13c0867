'''
The machine's closed vocabulary: operations, display modes, and the tables
mapping input text onto them.
'''

from enum import Enum, unique
from types import MappingProxyType
from decimal import Decimal
import math


@unique
class Op(Enum):
    '''
    Every operation the machine knows. The value is its canonical token.
    '''
    ABS = 'abs'
    ACOS = 'acos'
    ADD = '+'
    ASIN = 'asin'
    ATAN = 'atan'
    CBRT = 'cbrt'
    CEIL = 'ceil'
    CLEAR = 'c'
    COS = 'cos'
    COSH = 'cosh'
    DEG = 'deg'
    DELETE = 'del'
    DIV = '/'
    DUP = 'dup'
    E = 'e'  # e^x
    EN1 = 'en1'  # e^x - 1
    ENG = 'eng'
    EXP = 'exp'  # 10^x
    EXPN1 = 'expn1'
    FACT = '!'
    FIX = 'fix'
    FLOOR = 'floor'
    HYP = 'hyp'
    INV = 'inv'
    LN = 'ln'
    LOG = 'log'
    MAX = 'max'
    MIN = 'min'
    MOD = '%'
    MULT = '*'
    NEG = 'neg'
    POW = '^'
    RAD = 'rad'
    RAND = 'rand'
    ROOT = 'root'
    ROT = 'rot'
    SCI = 'sci'
    SIN = 'sin'
    SINH = 'sinh'
    SQRT = 'sqrt'
    STD = 'std'
    SUBT = '-'
    SWAP = 'swap'
    TAN = 'tan'
    TANH = 'tanh'

    def __str__(self):
        return self.value


class DisplayMode(Enum):
    STD = 'std'
    FIX = 'fix'
    SCI = 'sci'
    ENG = 'eng'

    def __str__(self):
        return self.value


# Operators typed as a single key, submitted as soon as they are typed.
KEY_OPERATORS = '!%*+-/^'

# Text (case sensitive) to operation.
OPERATORS = MappingProxyType(dict(
    {op.value: op for op in Op},
    # Longhand for ^
    pow=Op.POW,
))

# Text (case sensitive) to value. The exact expansions of the doubles.
CONSTANTS = MappingProxyType({
    'E': Decimal(math.e),
    'PI': Decimal(math.pi),
})

# Operations that only pick how the stack is shown.
DISPLAY_MODES = MappingProxyType({
    Op.STD: DisplayMode.STD,
    Op.FIX: DisplayMode.FIX,
    Op.SCI: DisplayMode.SCI,
    Op.ENG: DisplayMode.ENG,
})

assert not [key for key in KEY_OPERATORS if key not in OPERATORS]
