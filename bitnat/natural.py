# natural.py - Persistent natural numbers as shared chains of bits
import functools

import attr

from .bits import Bit
from .error_types import InvalidArgument, Underflow

__all__ = [
    'Natural',
    'ZERO',
    'ONE',
    'make',
    'to_int',
    'compare',
    'add',
    'subtract',
    'multiply',
    'power',
    'increment',
    'decrement',
]

def _is_operand(other):
    return other is None or isinstance(other, Natural)

@functools.total_ordering
@attr.s(frozen=True, slots=True, eq=False, repr=False)
class Natural:
    '''A natural number as a linked chain of bits { tail : head }

    The value of a node is 2 * tail + head (we are in base two), i.e.
        { None : 0 }                  = 0
        { { None : 0 } : 1 }          = 1
        { { { None : 0 } : 1 } : 0 }  = 2

    Nodes are never mutated so tails may be shared by any number of values.
    Build new values with `make' (or `Natural.make') which keeps ZERO and ONE canonical.
    Natural(tail, head) itself refuses a missing or ZERO tail once those two
    constants exist.
    '''
    tail = attr.ib()
    head = attr.ib(validator=attr.validators.instance_of(Bit))

    @tail.validator
    def _check_tail(self, attribute, value):
        if value is None or value is ZERO:
            if _constants_built:
                raise InvalidArgument(
                    'Natural({!r}, ...) is not canonical, use make()'.format(value))
        elif not isinstance(value, Natural):
            raise TypeError('tail must be a Natural, got {}'.format(type(value).__name__))

    @staticmethod
    def make(tail, head):
        return make(tail, head)

    @staticmethod
    def from_int(i):
        '''Build the Natural for the non-negative int `i' by repeated halving
        '''
        if not isinstance(i, int):
            raise TypeError('Natural.from_int expects an int, got {}'.format(type(i).__name__))
        if i < 0:
            raise InvalidArgument('Cannot build a Natural from negative int {}'.format(i))

        heads = []
        while i:
            heads.append(Bit.of(i))
            i >>= 1
        return _build(ZERO, heads)

    @staticmethod
    def from_bits(s):
        '''Parse a string of binary digits, most significant first
        >>> str(Natural.from_bits('101'))
        '101'
        '''
        if not s:
            raise InvalidArgument('Cannot build a Natural from an empty bit string')

        n = ZERO
        for c in s:
            try:
                n = make(n, Bit(c))
            except ValueError:
                raise InvalidArgument('{!r} is not a binary digit in {!r}'.format(c, s)) from None
        return n

    def to_int(self):
        return to_int(self)

    def increment(self):
        return increment(self)

    def decrement(self):
        return decrement(self)

    def bits(self):
        '''Iterate over the bits of this Natural, least significant first
        '''
        n = self
        while n is not ZERO:
            yield n.head
            n = n.tail

    def bit_length(self):
        return sum(1 for _ in self.bits())

    # ---------
    # operators
    # ---------

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return multiply(self, other)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None or not _is_operand(exponent):
            return NotImplemented
        return power(self, exponent)

    def __eq__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self):
        return hash(to_int(self))

    def __bool__(self):
        return self is not ZERO

    def __int__(self):
        return to_int(self)

    # values are immutable, copies would only break the identity of ZERO and ONE
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __str__(self):
        return ''.join(str(b) for b in reversed(list(self.bits()))) or '0'

    def __repr__(self):
        return 'Natural({!r})'.format(str(self))

_constants_built = False
ZERO = Natural(None, Bit.ZERO)
ONE = Natural(ZERO, Bit.ONE)
_constants_built = True

def make(tail, head):
    '''The single constructor for Naturals

    A node whose tail is ZERO collapses to ZERO or ONE, so no other node
    ever has ZERO as its tail.
    '''
    if tail is None:
        raise InvalidArgument('Only ZERO has no tail')
    if tail is ZERO:
        return ZERO if head is Bit.ZERO else ONE
    return Natural(tail, head)

def to_int(n):
    i = 0
    for shift, b in enumerate(n.bits()):
        i |= int(b) << shift
    return i

def compare(x, y):
    '''Three-way comparison of two Naturals, either of which may be None

    negative means x < y
    positive means x > y
    zero means x == y
    two Nones are equal, otherwise None is always smaller

    Walks both chains from the least significant bit, a difference in the
    tails always outweighs a difference in the heads.
    '''
    heads = 0
    while x is not y:
        if x is None:
            return -1
        elif y is None:
            return 1
        elif x is ZERO:
            return -1
        elif y is ZERO:
            return 1
        elif x.head is not y.head:
            heads = 1 if x.head is Bit.ONE else -1
        x, y = x.tail, y.tail
    return heads

def _require(op, *args):
    for a in args:
        if a is None:
            raise InvalidArgument('None argument in {}'.format(op))
        if not isinstance(a, Natural):
            raise TypeError('{} expects Natural arguments, got {}'.format(op, type(a).__name__))

def add(x, y):
    _require('addition', x, y)
    return _add(x, y)

def subtract(x, y):
    '''x - y, raising Underflow when y > x
    '''
    _require('subtraction', x, y)
    return _subtract(x, y)

def multiply(x, y):
    _require('multiplication', x, y)
    return _multiply(x, y)

def power(x, y):
    '''x to the power y, where power(x, ZERO) is ONE for all x (including ZERO)
    '''
    _require('power', x, y)
    return _power(x, y)

def increment(n):
    return add(n, ONE)

def decrement(n):
    return subtract(n, ONE)

def _build(rest, heads):
    '''Stack `heads' (least significant first) on top of `rest'
    '''
    for h in reversed(heads):
        rest = make(rest, h)
    return rest

# x + y  = { xtail : xhead } + { ytail : yhead }
#        = (2 * xtail + xhead) + (2 * ytail + yhead)
#        = 2 * (xtail + ytail) + (xhead + yhead)
#
# Once either side runs out (with nothing carried) the rest of the other
# side is reused as is.
def _add(x, y):
    heads = []
    carry = 0
    while True:
        if carry and x is ZERO:
            x, carry = ONE, 0
        elif carry and y is ZERO:
            y, carry = ONE, 0

        if x is ZERO:
            return _build(y, heads)
        elif y is ZERO:
            return _build(x, heads)

        s = int(x.head) + int(y.head) + carry
        heads.append(Bit.of(s))
        carry = s >> 1
        x, y = x.tail, y.tail

# x - y  = (2 * xtail + xhead) - (2 * ytail + yhead)
#        = 2 * (xtail - ytail) + (xhead - yhead)
#
# a borrow is subtracting ONE more from the tails.
def _subtract(x, y):
    heads = []
    borrow = 0
    while True:
        if borrow and y is ZERO:
            y, borrow = ONE, 0

        if not borrow:
            if x is y:
                return _build(ZERO, heads)
            elif y is ZERO:
                return _build(x, heads)

        if x is ZERO:
            raise Underflow('Cannot subtract greater natural from lesser natural')

        d = int(x.head) - int(y.head) - borrow
        heads.append(Bit.of(d))
        borrow = 1 if d < 0 else 0
        x, y = x.tail, y.tail

# x * y = x * (2 * ytail + yhead)
#       = 2 * (x * ytail) + x * yhead
def _multiply(x, y):
    if x is ZERO or y is ZERO:
        return ZERO
    elif x is ONE:
        return y
    elif y is ONE:
        return x

    result = ZERO
    for b in reversed(list(y.bits())):
        result = make(result, Bit.ZERO)
        if b is Bit.ONE:
            result = _add(result, x)
    return result

# x^y = x^(2 * ytail + yhead)
#     = x^ytail * x^ytail * x^yhead
def _power(x, y):
    result = ONE
    for b in reversed(list(y.bits())):
        result = _multiply(result, result)
        if b is Bit.ONE:
            result = _multiply(result, x)
    return result
