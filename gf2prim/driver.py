"""This module finds a primitive polynomial among given candidates and reports its field.

Polynomials are read and displayed as bit strings in increasing degree order,
e.g., '1100001' stands for the polynomial 1 + x + x^6.
"""

import sys
import logging
from gf2prim import gf2x
from gf2prim import primitive
from gf2prim import bfield


def check_degree(deg, width=gf2x.WIDTH):
    """Check that polynomials of degree deg can be multiplied exactly in the given width."""
    if deg < 1:
        raise ValueError('degree must be positive')

    if 2*deg >= width:
        raise ValueError(f'degree {deg} too large for width {width}')


def parse_candidate(s, deg, width=gf2x.WIDTH):
    """Parse bit string s in increasing degree order as a polynomial of degree deg."""
    check_degree(deg, width)
    s = s.strip()
    if len(s) != deg + 1 or s[-1] != '1' or s.strip('01'):
        raise ValueError('Invalid polynomial input!')

    return gf2x.PolyRing(width).from_bits(s)


def read_candidates(lines, deg, width=gf2x.WIDTH):
    """Parse all nonblank lines as candidate polynomials of degree deg."""
    return [parse_candidate(line, deg, width) for line in lines if line.strip()]


def format_polynomial(a, deg=None):
    """Return bit string of a up to degree deg (default degree of a)."""
    if deg is None:
        deg = gf2x.degree(a)
    return gf2x.to_bits(a, deg + 1)


def format_field(elements):
    """Return one line per element, all padded to the maximum degree."""
    rows = bfield.to_array(elements)
    return '\n'.join(''.join(map(str, row)) for row in rows)


def run(candidates, file=sys.stdout):
    """Find the first primitive candidate and print the elements of its field.

    Return the field, or None if none of the candidates is primitive.
    """
    p = primitive.find_primitive(candidates)
    if p is None:
        print('None of the candidate polynomials are primitive.', file=file)
        return None

    logging.info(f'Found primitive polynomial {p}')
    field = bfield.GF(p)
    print(f'Found primitive polynomial: {format_polynomial(p)}', file=file)
    print(f'Field size: {field.order}', file=file)
    print('Field elements:', file=file)
    print('-' * 34, file=file)
    print(format_field(field.elements), file=file)
    print('-' * 34, file=file)
    return field
