"""Exponent-form addition tables for GF(2^m)."""

from .binary_poly import PRIMITIVE_POLYS, from_terms, poly_str, to_terms
from .errors import GaloisFieldError, InvalidFieldSize, PolynomialNotFound
from .galois_field import SENTINEL, GaloisField, construct_galois_field

__all__ = [
    "PRIMITIVE_POLYS",
    "SENTINEL",
    "GaloisField",
    "GaloisFieldError",
    "InvalidFieldSize",
    "PolynomialNotFound",
    "construct_galois_field",
    "from_terms",
    "poly_str",
    "to_terms",
]
