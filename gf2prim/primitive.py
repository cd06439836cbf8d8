"""This module tests polynomials over GF(2) for primitivity.

A polynomial p of degree d is primitive if x has multiplicative order 2^d-1
modulo p, that is, if x generates the multiplicative group of GF(2)[x]/(p).

All functions assume p is irreducible. This precondition is not verified.
For a reducible p the outcome is unspecified, but the computations still terminate.
"""

import logging
from gf2prim import gf2x


def multiplicative_order(p):
    """Return the multiplicative order of x modulo p, for p of degree at least 2.

    The powers of x are computed one by one, hence the running time is O(2^d) for degree d.
    Return None if x^k != 1 for all 0 < k < 2^d (impossible if p is irreducible).
    """
    if not isinstance(p, gf2x.Polynomial):
        p = gf2x.PolyRing()(p)
    d = p.degree()
    if d < 2:
        raise ValueError('degree of modulus must be at least 2')

    group_order = 2**d - 1
    alpha = type(p)(2)
    c = alpha
    k = 1
    while c != 1:
        if k == group_order:
            return None

        c = (c * alpha) % p
        k += 1
    return k


def is_primitive(p):
    """Test polynomial p for primitivity, assuming p is irreducible."""
    if not isinstance(p, gf2x.Polynomial):
        p = gf2x.PolyRing()(p)
    d = p.degree()
    if d < 2:
        return False

    group_order = 2**d - 1
    k = multiplicative_order(p)
    logging.debug(f'Order of x modulo {p} is {k}, group order is {group_order}')
    return k == group_order


def find_primitive(candidates):
    """Return the first primitive polynomial among the given candidates, if any.

    Each candidate is assumed to be irreducible.
    """
    for p in candidates:
        if is_primitive(p):
            return p

        logging.debug(f'Candidate {p} is not primitive')
    return None
