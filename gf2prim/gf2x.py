"""This module supports arithmetic with fixed-width polynomials over GF(2).

Polynomials over GF(2) are represented as nonnegative integers.
The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0.

Function PolyRing creates polynomial types for a given representation width W.
Only the W lowest coefficients are kept: bits of a product beyond the width are
silently lost, hence degrees should stay well below W/2 for multiplication to be exact.
Integer operands are accepted if they fit in W bits, otherwise ValueError is raised.

The operators +, -, *, % are overloaded, as well as == and !=.
Polynomials are immutable values.

NB: the degree of the zero polynomial is 0 (not -1), as for the constant polynomial 1.
"""

WIDTH = 64

def add(a, b):
    """Add polynomials a and b."""
    poly = _ring(a, b)
    return poly(poly(a).value ^ poly(b).value)

def mul(a, b):
    """Multiply polynomials a and b, truncated to the width of the ring."""
    poly = _ring(a, b)
    return poly(_mul(poly(a).value, poly(b).value, poly.mask))

def _mul(a, b, mask):
    c = 0
    i = 0
    while a:
        if a & 1:
            c ^= b << i
        a >>= 1
        i += 1
    return c & mask

def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    poly = _ring(a, b)
    return poly(_mod(poly(a).value, poly(b).value))

def _mod(a, b):
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')
    if b == 1:
        return 0
    n = _degree(b)
    m = _degree(a)
    i = m - n
    while i >= 0:
        a ^= b << i
        d = _degree(a)
        i -= m - d  # skip positions where the leading bit is already absent
        m = d
    return a

def degree(a):
    """Degree of polynomial a (0 if a is zero)."""
    return _degree(_value(a))

def _degree(a):
    return max(a.bit_length() - 1, 0)

def to_terms(a, x='x'):
    """Convert polynomial a to a string with sum of powers of x."""
    return _to_terms(_value(a), x)

def _to_terms(a, x='x'):
    if a == 0:
        return '0'
    p = ''
    for i in range(a.bit_length(), -1, -1):
        if (a >> i) & 1:
            if i == 0:
                p += '+1'    # x^0 = 1
            elif i == 1:
                p += f'+{x}' # x^1 = x
            else:
                p += f'+{x}^{i}'
    return p[1:]

def from_terms(s, x='x', width=WIDTH):
    """Convert string s with sum of powers of x to a polynomial."""
    return PolyRing(width)(_from_terms(s, x))

def _from_terms(s, x='x'):
    s = "".join(s.split()) # remove all whitespace
    a = 0
    for term in s.split('+'):
        if term == '0':
            t = 0
        elif term == '1':
            t = 1 # 2^0
        elif term == x:
            t = 2 # 2^1
        elif term.startswith(f'{x}^'):
            t = 1 << int(term[len(x)+1:], base=0)
        else: # illegal term
            raise ValueError('ill formatted polynomial')
        if a & t: # repeated term
            raise ValueError('ill formatted polynomial')
        else:
            a ^= t
    return a

def to_bits(a, n=None):
    """Convert polynomial a to a bit string in increasing degree order.

    The string has length n, which defaults to degree(a)+1.
    """
    a = _value(a)
    if n is None:
        n = _degree(a) + 1
    return ''.join('1' if (a >> i) & 1 else '0' for i in range(n))

def _from_bits(s):
    if not s or s.strip('01'):
        raise ValueError('ill formatted bit string')
    return int(s[::-1], 2)

def _value(a):
    if isinstance(a, Polynomial):
        return a.value
    return PolyRing()(a).value

def _ring(a, b):
    """Return the polynomial type for operands a and b."""
    if isinstance(a, Polynomial):
        if isinstance(b, Polynomial) and b.width != a.width:
            raise TypeError('polynomials of different widths')
        return type(a)
    if isinstance(b, Polynomial):
        return type(b)
    return PolyRing()

# Calls to PolyRing with identical width return the same class.
_ring_cache = {}
def PolyRing(width=WIDTH):
    """Create type for polynomials over GF(2) of given representation width."""
    if width in _ring_cache:
        return _ring_cache[width]

    if width < 2:
        raise ValueError('width must be at least 2')
    GF2X = type(f'GF2X{width}', (Polynomial,), {'__slots__':()})
    GF2X.width = width
    GF2X.mask = (1 << width) - 1
    _ring_cache[width] = GF2X
    return GF2X

class Polynomial:
    """Polynomials over GF(2) represented as nonnegative integers of bounded width.

    Invariant: value is an int with 0 <= value < 2^width.
    """

    __slots__ = 'value'

    width = None  # set by PolyRing
    mask = None

    def __init__(self, value, x='x'):
        if isinstance(value, Polynomial):
            if value.width != self.width:
                raise TypeError('polynomials of different widths')
            value = value.value
        elif isinstance(value, str):
            value = _from_terms(value, x)
        elif not isinstance(value, int):
            raise TypeError('polynomial value must be an int')
        if not 0 <= value <= self.mask:
            raise ValueError(f'polynomial does not fit in {self.width} bits')
        self.value = value

    @classmethod
    def from_bits(cls, s):
        """Convert bit string s in increasing degree order to a polynomial."""
        return cls(_from_bits(s))

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return _degree(self.value)

    def _operand(self, other):
        """Return value of other as element of this ring, or None for foreign types."""
        if isinstance(other, (Polynomial, int)):
            return type(self)(other).value
        return None

    def __int__(self):
        return self.value

    def __add__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(self.value ^ other)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __mul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(_mul(self.value, other, self.mask))

    __rmul__ = __mul__

    def __mod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(_mod(self.value, other))

    def __rmod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return type(self)(_mod(other, self.value))

    def __repr__(self):
        return _to_terms(self.value)

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial):
            return self.width == other.width and self.value == other.value

        if isinstance(other, int):
            return self.value == other

        return NotImplemented

    def __ne__(self, other):
        """Negated equality testing."""
        if isinstance(other, Polynomial):
            return self.width != other.width or self.value != other.value

        if isinstance(other, int):
            return self.value != other

        return NotImplemented

    def __hash__(self):
        """Hash value."""
        return hash((type(self), self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
