"""gf2prim is a Python package for primitive polynomials over GF(2).

Polynomials over GF(2) are represented by fixed-width bit vectors, with
addition, carry-less multiplication, and reduction modulo a polynomial
provided by module gf2x via Python's operator overloading.

A polynomial p of degree d is primitive if x generates the multiplicative
group of GF(2)[x]/(p), see module primitive. Given a primitive polynomial,
module bfield lists all elements of the field GF(2^d) as successive powers of x.

All polynomials passed as moduli are assumed to be irreducible over GF(2).
This is not verified.

Run python -m gf2prim to find a primitive polynomial among given candidates
and print the elements of the corresponding field.
"""

__version__ = '0.1.0'
__license__ = 'MIT License'

import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments of gf2prim."""
    parser = argparse.ArgumentParser(prog='gf2prim', add_help=False,
                                     description='Find a primitive polynomial among candidates '
                                                 'and list the elements of GF(2^d).')

    group = parser.add_argument_group('gf2prim help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print gf2prim version number and exit')
    group.add_argument('-h', '--help', action='store_true',
                       help='print this help message and exit')

    group = parser.add_argument_group('gf2prim input')
    group.add_argument('-d', '--degree', type=int, metavar='d',
                       help='degree d of the candidate polynomials')
    group.add_argument('candidates', nargs='*', metavar='bits',
                       help='candidate polynomial as d+1 bits in increasing degree order '
                            '(read from stdin if none given)')

    group = parser.add_argument_group('gf2prim configuration')
    group.add_argument('-w', '--width', type=int, metavar='w',
                       help='representation width w in bits, 2d<w')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(width=64, log_level='warning')
    return parser


def set_log_level(log_level='warning', no_log=False):
    """Set logging level by name, only the first letter of the name is used."""
    if no_log:
        logging.basicConfig(level=logging.CRITICAL)
        return

    ch = log_level[0].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
    level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
             logging.CRITICAL)[int(ch)]
    if sys.flags.dev_mode:
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stderr)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
