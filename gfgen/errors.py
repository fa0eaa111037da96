"""Exceptions raised while constructing a Galois field."""


class GaloisFieldError(ValueError):
    """Base class for field construction failures."""


class InvalidFieldSize(GaloisFieldError):
    """2^m does not fit the 64-bit unsigned working width (or m < 1)."""

    def __init__(self, m, reason=None):
        self.m = m
        if reason is None:
            reason = (
                f"Too big field size! GF(2^{m}) does not fit in 64 bits, "
                f"please use m < 64"
            )
        super().__init__(reason)


class PolynomialNotFound(GaloisFieldError):
    """A computed sum has no exponent in the exponent table.

    Only happens when the supplied polynomial is not primitive for m, or its
    degree disagrees with m.
    """

    def __init__(self, poly, m):
        self.poly = poly
        self.m = m
        super().__init__(
            f"Cannot find polynomial 0b{poly:b} in the exponent table of "
            f"GF(2^{m}); the polynomial is not primitive for m={m}"
        )
