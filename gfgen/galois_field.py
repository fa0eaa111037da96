"""
GF(2^m) addition table in exponent form

For a primitive element α of GF(2^m), add_table[i][j] = k means
α^i + α^j = α^k. Since α^i + α^i = 0 and zero has no power representation,
the diagonal holds SENTINEL (-1).

Construction:
    1. exp_table[e]  : α^e as a binary polynomial, e = 0 .. 2^m - 2
                       (multiply the previous entry by X, reduce mod p(X))
    2. log_table[p]  : inverse of exp_table, indexed by the polynomial value
    3. add_table[i,j]: log_table[exp_table[i] + exp_table[j]]

Primitivity of p(X) is not checked up front: a non-primitive polynomial
repeats elements in exp_table, so some sum has no exponent and
PolynomialNotFound is raised instead of returning a wrong table.
"""

import numpy as np

from .binary_poly import (
    PRIMITIVE_POLYS, X, add, as_poly, monomial, multiply, poly_str, remainder,
)
from .errors import InvalidFieldSize, PolynomialNotFound

# add_table value for α^i + α^i = 0
SENTINEL = -1

# Working integer width: 2^m has to fit an unsigned 64-bit word
WORD_BITS = np.iinfo(np.uint64).bits


def field_size_for(m):
    """Return 2^m, refusing degrees whose field size overflows a uint64."""
    if m < 1:
        raise InvalidFieldSize(m, f"Field degree must be positive, got m={m}")
    if m >= WORD_BITS:
        raise InvalidFieldSize(m)
    return 1 << m


def _table_dtype(field_size):
    # smallest signed type holding both SENTINEL and the largest exponent
    return np.min_scalar_type(-max(field_size - 2, 1))


# ============================================================================
# EXPONENT TABLE
# ============================================================================

def build_exp_table(m, primitive_poly, field_size):
    """Polynomial representation of α^0 .. α^(field_size - 2)."""
    exp_table = [0] * (field_size - 1)

    # trivial cases: α^e = X^e while e < m
    for exp in range(m):
        exp_table[exp] = monomial(exp)

    # the other cases: multiply the previous exponent by X, reduce mod p(X)
    for exp in range(m, field_size - 1):
        exp_table[exp] = remainder(multiply(exp_table[exp - 1], X), primitive_poly)

    return exp_table


def build_log_table(exp_table, m):
    """
    Inverse of exp_table, indexed by the polynomial restricted to degrees 0..m.

    Entries with no exponent hold -1. When a polynomial appears more than
    once (non-primitive p(X)) the first exponent wins. The zero polynomial
    is never registered.
    """
    log_table = np.full(1 << (m + 1), -1, dtype=_table_dtype(1 << m))
    for exp, poly in enumerate(exp_table):
        key = add(poly, 0, m)
        if key and log_table[key] < 0:
            log_table[key] = exp
    return log_table


def find_exponent(poly, log_table, m):
    """
    Return e such that exp_table[e] == poly (compared on degrees 0..m).

    Raises:
        PolynomialNotFound: no exponent represents poly
    """
    exp = int(log_table[add(poly, 0, m)])
    if exp < 0:
        raise PolynomialNotFound(poly, m)
    return exp


# ============================================================================
# ADDITION TABLE
# ============================================================================

def build_add_table(exp_table, log_table, m):
    """
    Build the read-only (2^m - 1) x (2^m - 1) addition table.

    Every off-diagonal sum must map back to an exponent; the first cell
    (row-major) that does not raises PolynomialNotFound.
    """
    size = len(exp_table)
    polys = np.array([add(p, 0, m) for p in exp_table], dtype=np.uint64)

    # sums[i, j] = exp_table[i] + exp_table[j]
    sums = np.bitwise_xor.outer(polys, polys)
    add_table = log_table[sums.astype(np.intp)]

    off_diagonal = ~np.eye(size, dtype=bool)
    missing = np.argwhere((add_table < 0) & off_diagonal)
    if len(missing):
        i, j = missing[0]
        # raises PolynomialNotFound for the offending sum
        find_exponent(add(exp_table[i], exp_table[j], m), log_table, m)

    np.fill_diagonal(add_table, SENTINEL)
    add_table.flags.writeable = False
    return add_table


# ============================================================================
# FIELD
# ============================================================================

class GaloisField:
    """
    Galois Field GF(2^m) with a precomputed exponent-form addition table.

    The constructor does all the work and either returns a complete field or
    raises; afterwards every table is read-only, so one instance can be
    shared freely.

    Example:
        >>> gf = GaloisField(3, {0: 1, 1: 1, 3: 1})    # 1 + X + X^3
        >>> gf.lookup_sum(0, 1)                        # 1 + α = α^3
        3
    """

    def __init__(self, m, primitive_poly=None):
        self.field_size = field_size_for(m)
        if primitive_poly is None:
            if m in PRIMITIVE_POLYS:
                primitive_poly = PRIMITIVE_POLYS[m]
            else:
                raise ValueError(f"No default primitive polynomial for m={m}")
        self.m = m
        self.primitive_poly = as_poly(primitive_poly)
        self.n = self.field_size - 1  # 2^m - 1

        exp_table = build_exp_table(m, self.primitive_poly, self.field_size)
        self._log_table = build_log_table(exp_table, m)
        self._add_table = build_add_table(exp_table, self._log_table, m)
        self._exp_table = tuple(exp_table)

    @classmethod
    def construct(cls, m, primitive_poly=None):
        return cls(m, primitive_poly)

    def __repr__(self):
        return (
            f"GaloisField(m={self.m}, "
            f"primitive_poly={poly_str(self.primitive_poly, 'X')!r})"
        )

    @property
    def add_table(self):
        """Read-only ndarray, add_table[i, j] = exponent of α^i + α^j."""
        return self._add_table

    @property
    def exp_table(self):
        return self._exp_table

    def lookup_sum(self, i, j):
        """Exponent k with α^i + α^j = α^k, or SENTINEL when i == j."""
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(
                f"Exponents must lie in [0, {self.n - 1}], got ({i}, {j})"
            )
        return int(self._add_table[i, j])

    def power_to_poly(self, power):
        """Polynomial representation of α^power"""
        return self._exp_table[power % self.n]

    def poly_to_power(self, poly):
        """
        Convert polynomial representation to power representation

        Returns:
            k such that poly = α^k, or None if poly is 0
        """
        poly = as_poly(poly)
        if poly == 0:
            return None  # 0 has no power representation

        if poly >= self.field_size:
            raise ValueError(f"Value {poly} exceeds field size {self.n}")

        return find_exponent(poly, self._log_table, self.m)


def construct_galois_field(m, primitive_poly=None):
    """Build GF(2^m) from m and a primitive polynomial (mapping or int)."""
    return GaloisField.construct(m, primitive_poly)
