from .util import StackUnderflow


class Stack:
    '''
    Operand stack, bottom first.

    Anything that looks below the top checks the height first, and raises
    StackUnderflow rather than IndexError.
    '''

    def __init__(self):
        self._items = []

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        '''
        Iterate bottom to top.
        '''
        return iter(self._items)

    def height(self):
        return len(self._items)

    def require(self, n):
        '''
        Raise StackUnderflow unless at least n elements are stacked.
        '''
        if len(self._items) < n:
            raise StackUnderflow(
                'Too few elements on stack! Need {}, have {}.'.format(
                    n, len(self._items)))

    def push(self, value):
        self._items.append(value)

    def pop(self):
        self.require(1)
        return self._items.pop()

    def peek(self):
        self.require(1)
        return self._items[-1]

    def top(self, n):
        '''
        Return the topmost n elements without popping, deepest first.

        So top(2) is [y, x].
        '''
        self.require(n)
        if not n:
            return []
        return self._items[-n:]

    def entry_at(self, index):
        '''
        Element at index counted from the bottom, or None if out of range.
        '''
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def remove_at_depth(self, depth):
        '''
        Remove and return the element depth below the top; 0 is the top.
        '''
        self.require(depth + 1)
        return self._items.pop(-1 - depth)

    def swap_top_with(self, depth):
        '''
        Exchange the top element with the one depth below it.
        '''
        self.require(depth + 1)
        if depth == 0:
            return
        items = self._items
        items[-1], items[-1 - depth] = items[-1 - depth], items[-1]

    def clear(self):
        self._items.clear()
