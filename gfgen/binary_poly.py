"""
Binary-coefficient polynomial arithmetic for GF(2^m)

Polynomials are stored as non-negative ints: bit d is the coefficient of x^d
(LSB = constant term), e.g. 0b1011 = 1 + x + x^3.

Callers may also pass the sparse {degree: coefficient} mapping form; use
from_terms() / to_terms() to move between the two.
"""

from typing import Dict, Mapping, Union

PolyLike = Union[int, Mapping[int, int]]

# Primitive polynomials for each field (represented as integers, LSB = constant term)
PRIMITIVE_POLYS = {
    1: 0b11,                   # 1 + X
    2: 0b111,                  # 1 + X + X^2
    3: 0b1011,                 # 1 + X + X^3
    4: 0b10011,                # 1 + X + X^4
    5: 0b100101,               # 1 + X^2 + X^5
    6: 0b1000011,              # 1 + X + X^6
    7: 0b10001001,             # 1 + X^3 + X^7
    8: 0b100011101,            # 1 + X^2 + X^3 + X^4 + X^8
    9: 0b1000010001,           # 1 + X^4 + X^9
    10: 0b10000001001,         # 1 + X^3 + X^10
    11: 0b100000000101,        # 1 + X^2 + X^11
    12: 0x1053,                # 1 + X + X^4 + X^6 + X^12
    13: 0x201B,                # 1 + X + X^3 + X^4 + X^13
    14: 0x4443,                # 1 + X + X^6 + X^10 + X^14
    15: 0x8003,                # 1 + X + X^15
    16: 0x1100B,               # 1 + X + X^3 + X^12 + X^16
}

# X, the indeterminate
X = 0b10


# ------------------------------------------------------------
# Representation
# ------------------------------------------------------------
def monomial(degree: int) -> int:
    """x^degree with coefficient 1."""
    if degree < 0:
        raise ValueError(f"negative degree {degree}")
    return 1 << degree


def from_terms(terms: Mapping[int, int]) -> int:
    """
    Build a polynomial from a sparse {degree: coefficient} mapping.

    Zero coefficients are accepted and dropped; anything other than 0/1 is
    rejected because only binary coefficients are supported.
    """
    poly = 0
    for deg, coef in terms.items():
        if deg < 0:
            raise ValueError(f"negative degree {deg}")
        if coef not in (0, 1):
            raise ValueError(
                f"coefficient of x^{deg} must be 0 or 1, got {coef}"
            )
        if coef:
            poly |= 1 << deg
    return poly


def to_terms(poly: int) -> Dict[int, int]:
    """Sparse {degree: 1} mapping of the nonzero terms of poly."""
    return {deg: 1 for deg in range(poly.bit_length()) if (poly >> deg) & 1}


def as_poly(value: PolyLike) -> int:
    """Accept either representation and return the int form."""
    if isinstance(value, Mapping):
        return from_terms(value)
    poly = int(value)
    if poly < 0:
        raise ValueError(f"polynomial value must be non-negative, got {poly}")
    return poly


# ------------------------------------------------------------
# Arithmetic
# ------------------------------------------------------------
def max_degree(poly: int) -> int:
    """Highest degree with a nonzero coefficient (0 for the zero polynomial)."""
    if poly == 0:
        return 0
    return poly.bit_length() - 1


def multiply(p1: int, p2: int) -> int:
    """p1 * p2 with binary coefficients (carry-less)."""
    r = 0
    while p2:
        if p2 & 1:
            r ^= p1
        p1 <<= 1
        p2 >>= 1
    return r


def add(p1: int, p2: int, m: int) -> int:
    """
    p1 + p2 over degrees 0..m only.

    Both operands are expected to be reduced already (terms within 0..m);
    anything above x^m is discarded, so this is not a general adder.
    """
    return (p1 ^ p2) & ((1 << (m + 1)) - 1)


def remainder(p1: int, p2: int) -> int:
    """GF(2) polynomial long division: return p1 mod p2."""
    if p2 == 0:
        raise ValueError("divisor polynomial is zero")
    deg_div = max_degree(p2)
    r = p1
    while r and max_degree(r) >= deg_div:
        shift = max_degree(r) - deg_div
        r ^= p2 << shift
    return r


# ------------------------------------------------------------
# Presentation helpers
# ------------------------------------------------------------
def poly_str(poly: int, symbol: str = "x") -> str:
    """Convert polynomial value to readable string like '1 + x + x^3'"""
    if poly == 0:
        return "0"

    terms = []
    for deg in range(poly.bit_length()):
        if poly & (1 << deg):
            if deg == 0:
                terms.append("1")
            elif deg == 1:
                terms.append(symbol)
            else:
                terms.append(f"{symbol}^{deg}")

    return " + ".join(terms)


def parse_poly_input(poly_str: str) -> int:
    """
    Parse polynomial input string to integer value

    Supports formats:
    - Binary string: "1011", "0b1011"
    - Hex string: "0x0b"
    - Term list: "0,1,3" (degrees of the nonzero terms)
    - Decimal: "11"
    """
    poly_str = poly_str.strip()
    if not poly_str:
        raise ValueError("empty polynomial")

    if "," in poly_str:
        degrees = [int(d) for d in poly_str.split(",") if d.strip()]
        return from_terms({deg: 1 for deg in degrees})
    elif poly_str.startswith("0x") or poly_str.startswith("0X"):
        return int(poly_str, 16)
    elif poly_str.startswith("0b") or poly_str.startswith("0B"):
        return int(poly_str, 2)
    elif all(c in '01' for c in poly_str) and len(poly_str) > 1:
        # Assume binary if only 0s and 1s and length > 1
        return int(poly_str, 2)
    else:
        return as_poly(int(poly_str))
