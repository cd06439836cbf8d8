"""Command line interface of gf2prim.

Example usage, for three candidates of degree 6:

    python -m gf2prim -d6 1000001 1001001 1100001

which reports 1100001 (that is, 1 + x + x^6) as primitive, followed by all 64 elements of GF(2^6).
If no candidates are given, they are read from stdin, one per line.
"""

import sys
import logging
import gf2prim
from gf2prim import driver


def main(argv=None, stdin=None, stdout=None):
    """Run gf2prim with given command line arguments, return exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = gf2prim.get_arg_parser()
    options = parser.parse_args(argv)
    if options.VERSION:
        print(f'gf2prim {gf2prim.__version__}', file=stdout)
        return 0

    if options.help:
        parser.print_help(file=stdout)
        return 0

    gf2prim.set_log_level(options.log_level, options.no_log)
    logging.debug(f'Options: {options}')
    try:
        deg = options.degree
        if deg is None:
            print('Polynomials are displayed in degree increasing order.\n', file=stdout)
            print('Enter degree of polynomials you want to use to generate the field: ',
                  end='', file=stdout, flush=True)
            deg = int(stdin.readline())
        driver.check_degree(deg, options.width)
        lines = options.candidates
        if not lines:
            print('Enter polynomials in binary format in increasing degree order '
                  'separately on new lines:', file=stdout, flush=True)
            lines = stdin
        candidates = driver.read_candidates(lines, deg, options.width)
    except ValueError as exc:
        print(exc, file=stdout)
        return 1

    driver.run(candidates, file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
