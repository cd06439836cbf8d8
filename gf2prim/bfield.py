"""This module supports Galois (finite) fields of characteristic 2.

Function GF enumerates the elements of GF(2^d) for a primitive polynomial of degree d.
The elements are listed as 0, 1, x, x^2, ..., x^(2^d-2), all reduced modulo the given
polynomial. The position of a nonzero element in this list is thus one more than its
discrete logarithm to base x.
"""

import logging
import numpy as np
from gf2prim import gf2x


def find_field_elements(p):
    """Return the list of all elements of GF(2)[x]/(p) as powers of x.

    The polynomial p is assumed to be primitive. Otherwise, the list returned is
    incomplete, which can be detected with is_complete().
    """
    if not isinstance(p, gf2x.Polynomial):
        p = gf2x.PolyRing()(p)
    poly = type(p)
    one = poly(1)
    alpha = poly(2)
    size = 2**p.degree()
    elements = [poly(0), one]
    c = alpha
    while c != one and len(elements) < size:
        elements.append(c)
        c = (c * alpha) % p
    return elements


def is_complete(elements, p):
    """Test if elements are exactly the 2^d distinct residues modulo p of degree d."""
    d = gf2x.degree(p)
    if len(elements) != 2**d:
        return False

    if len(set(elements)) != len(elements):
        return False

    return all(gf2x.degree(a) < d for a in elements)


def to_array(elements, n=None):
    """Return 0/1 matrix of coefficients with one row per element, in increasing degree order.

    The number of columns is n, which defaults to one more than the maximum degree.
    """
    if n is None:
        n = max((gf2x.degree(a) for a in elements), default=0) + 1
    a = np.array([[(int(v) >> i) & 1 for i in range(n)] for v in elements], dtype=np.uint8)
    return a.reshape(len(elements), n)


class BinaryField:
    """Finite field GF(2^d) given by a primitive modulus of degree d."""

    __slots__ = 'modulus', 'ext_deg', 'order', 'elements'

    def __init__(self, modulus, elements):
        self.modulus = modulus
        self.ext_deg = modulus.degree()
        self.order = len(elements)
        self.elements = elements

    def __len__(self):
        return self.order

    def __iter__(self):
        return iter(self.elements)

    def __repr__(self):
        return f'GF(2^{self.ext_deg})'


# Calls to GF with identical modulus return the same field.
_field_cache = {}
def GF(modulus):
    """Create a Galois (finite) field for given primitive polynomial.

    Primitivity of the modulus is not verified, but an incomplete field is logged.
    """
    if not isinstance(modulus, gf2x.Polynomial):
        modulus = gf2x.PolyRing()(modulus)

    if modulus in _field_cache:
        return _field_cache[modulus]

    elements = find_field_elements(modulus)
    if not is_complete(elements, modulus):
        logging.warning(f'{modulus} is not primitive: only {len(elements)} of '
                        f'{2**modulus.degree()} field elements found')
    field = BinaryField(modulus, tuple(elements))
    _field_cache[modulus] = field
    return field
