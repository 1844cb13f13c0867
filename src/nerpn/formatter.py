'''
Rendering of stack values as text.

Values are rounded to 16 significant digits before they are shown, so the
long exact expansions of float results stay readable. The stored value is
never touched.
'''

from .ops import DisplayMode
from .value import for_display


def _standard(value):
    return str(value)


def _fixed(value):
    return format(value, 'f')


def _scientific(value):
    return format(value, 'E')


def _engineering(value):
    return value.to_eng_string()


FORMATTERS = {
    DisplayMode.STD: _standard,
    DisplayMode.FIX: _fixed,
    DisplayMode.SCI: _scientific,
    DisplayMode.ENG: _engineering,
}


def format_entry(value, mode):
    '''
    Format value for display in mode.
    '''
    return FORMATTERS[mode](for_display(value))
