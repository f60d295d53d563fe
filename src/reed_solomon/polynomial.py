# file: src/reed_solomon/polynomial.py

"""
Polynomials over GF(2^8).

A polynomial is a 1-D uint8 array with the highest-degree coefficient first,
so the constant term is the last element:

    [0x03, 0x04, 0x05]  ->  03 x^2 + 04 x + 05

No function trims leading zeros; the length of an array is always degree + 1
of the polynomial it was built as.
"""

from typing import Tuple

import numpy as np

from .errors import DivisionByZero
from .gf256 import GF256, field


def as_poly(p) -> np.ndarray:
    """Coerce bytes or a sequence of ints into a uint8 polynomial array."""
    if isinstance(p, (bytes, bytearray, memoryview)):
        return np.frombuffer(bytes(p), dtype=np.uint8).copy()
    return np.asarray(p, dtype=np.uint8)


def poly_eval(p, x, gf: GF256 = None):
    """
    Evaluate p at x using Horner's scheme.

    Args:
        p: Polynomial (highest degree first)
        x: A field element, or an array of field elements
        gf: Field engine (defaults to the shared GF(2^8) instance)

    Returns:
        int if x is a scalar, otherwise a uint8 array of p(x_i)
    """
    gf = gf or field()
    points = np.asarray(x, dtype=np.uint8)
    y = np.zeros(points.shape, dtype=np.uint8)
    for coef in as_poly(p):
        y = gf.mul_array(y, points) ^ coef
    if y.ndim == 0:
        return int(y)
    return y


def poly_scale(p, x: int, gf: GF256 = None) -> np.ndarray:
    """Multiply every coefficient of p by the field element x."""
    gf = gf or field()
    return gf.mul_array(as_poly(p), x)


def poly_add(p, q) -> np.ndarray:
    """p + q, aligned at the constant term."""
    p = as_poly(p)
    q = as_poly(q)
    r = np.zeros(max(len(p), len(q)), dtype=np.uint8)
    r[len(r) - len(p):] = p
    r[len(r) - len(q):] ^= q
    return r


# Subtraction is addition in characteristic 2.
poly_sub = poly_add


def poly_mul(p, q, gf: GF256 = None) -> np.ndarray:
    """Full product p * q, of length len(p) + len(q) - 1."""
    gf = gf or field()
    p = as_poly(p)
    q = as_poly(q)
    r = np.zeros(len(p) + len(q) - 1, dtype=np.uint8)
    # row i holds p[i] * q, which lands on r[i:i + len(q)]
    products = gf.mul_array(p[:, None], q[None, :])
    for i in range(len(p)):
        r[i:i + len(q)] ^= products[i]
    return r


def poly_mul_coeff_at(p, q, k: int, gf: GF256 = None) -> int:
    """
    Coefficient of x^k in p * q, without forming the product.

    Used for the Berlekamp-Massey discrepancy, which only ever needs a
    single coefficient per iteration.
    """
    gf = gf or field()
    p = as_poly(p)
    q = as_poly(q)
    result = 0
    for i in range(len(p)):
        # p_i is the x^i coefficient of p, q_{k-i} the x^(k-i) coefficient of q
        j = k - i
        if j < 0:
            break
        if j >= len(q):
            continue
        result ^= gf.mul(int(p[len(p) - 1 - i]), int(q[len(q) - 1 - j]))
    return result


def poly_div(p, q, gf: GF256 = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Synthetic division p / q.

    Returns:
        (quotient, remainder) with p = quotient * q + remainder. If p is
        shorter than q the quotient is empty and the remainder is p.

    Raises:
        DivisionByZero: If the leading coefficient of q is zero
    """
    gf = gf or field()
    r = as_poly(p).copy()
    q = as_poly(q)
    quotient_len = len(r) - len(q) + 1
    if quotient_len <= 0:
        return np.zeros(0, dtype=np.uint8), r

    lead = int(q[0])
    if lead == 0:
        raise DivisionByZero("Polynomial division by a zero leading coefficient")
    for i in range(quotient_len):
        coef = gf.div(int(r[i]), lead)
        r[i] = coef
        if coef == 0:
            continue
        r[i + 1:i + len(q)] ^= gf.mul_array(q[1:], coef)

    return r[:quotient_len], r[quotient_len:]


def poly_deriv(p) -> np.ndarray:
    """
    Formal derivative p'(x).

    d/dx (p_j x^j) = j * p_j x^(j-1), where j * p_j means j-fold addition.
    In characteristic 2 that is p_j for odd j and 0 for even j, so the
    result keeps p[i] exactly where the original exponent len(p) - 1 - i is
    odd and drops the constant term.
    """
    p = as_poly(p)
    r = np.zeros(max(len(p) - 1, 0), dtype=np.uint8)
    if len(r) == 0:
        return r
    r[len(r) - 1::-2] = p[len(r) - 1::-2]
    return r
