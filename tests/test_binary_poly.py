import pytest

from gfgen.binary_poly import (
    PRIMITIVE_POLYS, X, add, as_poly, from_terms, max_degree, monomial,
    multiply, parse_poly_input, poly_str, remainder, to_terms,
)


def test_from_terms_and_to_terms():
    assert from_terms({0: 1, 1: 1, 3: 1}) == 0b1011
    assert from_terms({0: 1, 2: 0, 3: 1}) == 0b1001
    assert from_terms({}) == 0
    assert to_terms(0b1011) == {0: 1, 1: 1, 3: 1}
    assert to_terms(0) == {}


def test_from_terms_rejects_non_binary_coefficients():
    with pytest.raises(ValueError):
        from_terms({0: 1, 2: 2})
    with pytest.raises(ValueError):
        from_terms({-1: 1})


def test_as_poly():
    assert as_poly(11) == 11
    assert as_poly({0: 1, 1: 1, 3: 1}) == 11
    with pytest.raises(ValueError):
        as_poly(-3)


def test_max_degree():
    assert max_degree(0b1011) == 3
    assert max_degree(1) == 0
    assert max_degree(0) == 0


def test_multiply():
    # (1 + x)(1 + x) = 1 + x^2 over GF(2)
    assert multiply(0b11, 0b11) == 0b101
    assert multiply(0b1011, X) == 0b10110
    assert multiply(0b1011, 0) == 0
    assert multiply(0b110, 0b1) == 0b110


def test_add_is_bounded_by_m():
    assert add(0b001, 0b010, 3) == 0b011
    assert add(0b110, 0b110, 3) == 0
    # x^4 lies above m = 3 and is dropped
    assert add(0b10000, 0b1, 3) == 0b1


def test_remainder():
    # x^3 mod (1 + x + x^3) = 1 + x
    assert remainder(monomial(3), 0b1011) == 0b011
    # x^4 mod (1 + x + x^3) = x + x^2
    assert remainder(monomial(4), 0b1011) == 0b110
    assert remainder(0b101, 0b1011) == 0b101
    assert remainder(0b1011, 0b1011) == 0
    with pytest.raises(ValueError):
        remainder(0b1011, 0)


def test_primitive_polys_have_matching_degree():
    for m, poly in PRIMITIVE_POLYS.items():
        assert max_degree(poly) == m
        assert poly & 1


def test_poly_str():
    assert poly_str(0b1011) == "1 + x + x^3"
    assert poly_str(0b1011, "X") == "1 + X + X^3"
    assert poly_str(0) == "0"
    assert poly_str(1) == "1"


def test_parse_poly_input():
    assert parse_poly_input("1011") == 0b1011
    assert parse_poly_input("0b1011") == 0b1011
    assert parse_poly_input("0x0b") == 0b1011
    assert parse_poly_input("13") == 13
    assert parse_poly_input("0,1,3") == 0b1011
    assert parse_poly_input(" 0, 1, 3 ") == 0b1011
    with pytest.raises(ValueError):
        parse_poly_input("")
    with pytest.raises(ValueError):
        parse_poly_input("x^3")
