"""
GF(2^m) Addition Table Generator

Prints the exponent-form addition table of GF(2^m):
row i, column j holds k with α^i + α^j = α^k (-1 when the sum is zero).

Usage:
    python -m gfgen              # GF(2^3), p(X) = 1 + X + X^3
    python -m gfgen <m>          # default primitive polynomial for m
    python -m gfgen <m> <poly>   # poly as binary, hex, decimal or "0,1,3"
"""

import sys

from .binary_poly import PRIMITIVE_POLYS, parse_poly_input, poly_str
from .galois_field import GaloisField

DEFAULT_M = 3


def format_add_table(gf):
    """Render gf's addition table as tab-separated text."""
    n = gf.n
    lines = ["i\\j\t|" + "\t".join(str(j) for j in range(n))]
    lines.append("--------" * gf.field_size)
    for i in range(n):
        row = "\t".join(str(gf.lookup_sum(i, j)) for j in range(n))
        lines.append(f"{i}\t|{row}")
    return "\n".join(lines)


def print_add_table(gf):
    print(f"GF(2^{gf.m}) addition table, p(X) = {poly_str(gf.primitive_poly, 'X')}")
    print(format_add_table(gf))


def print_usage(prog):
    print(f"Usage: {prog} [m] [primitive_poly]")
    print()
    print("Arguments:")
    print(f"  m               Field degree of GF(2^m) (default {DEFAULT_M})")
    print("  primitive_poly  Binary (1011, 0b1011), hex (0xb), decimal (11)")
    print("                  or term list (0,1,3); LSB is the constant term")
    print(f"                  Defaults exist for m = {min(PRIMITIVE_POLYS)}..{max(PRIMITIVE_POLYS)}")
    print()
    print("Examples:")
    print(f"  {prog}             # GF(2^3) with 1 + X + X^3")
    print(f"  {prog} 4           # GF(2^4) with 1 + X + X^4")
    print(f"  {prog} 3 0,2,3     # GF(2^3) with 1 + X^2 + X^3")


def main(argv=None):
    """Command line entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    prog = "gfgen"

    if any(arg in ['-h', '--help', 'help'] for arg in argv):
        print_usage(prog)
        return 0

    if len(argv) > 2:
        print(f"Too many arguments: {' '.join(argv)}")
        print(f"Use '{prog} --help' for usage information.")
        return 1

    try:
        m = int(argv[0]) if argv else DEFAULT_M
        primitive_poly = parse_poly_input(argv[1]) if len(argv) == 2 else None
    except ValueError as e:
        print(f"Invalid argument: {e}")
        print(f"Use '{prog} --help' for usage information.")
        return 1

    try:
        gf = GaloisField(m, primitive_poly)
    except ValueError as e:
        # GaloisFieldError, or no default polynomial for m
        print(f"Error: {e}")
        return 1

    print_add_table(gf)
    return 0

