# file: src/reed_solomon/forney.py

"""
Error magnitudes with Forney's algorithm.

From the definition of a syndrome, with X_k = alpha^(i_k):

    S_j = e_1 X_1^j + ... + e_v X_v^j,   j = 1..t

Forney's closed form solves this linear system directly:

    e_k = -Omega(X_k^-1) / Lambda'(X_k^-1)

where Omega(x) = S(x) Lambda(x) mod x^t is the error evaluator and Lambda'
the formal derivative of the locator. The minus sign vanishes in GF(2^8),
and with the first generator root at alpha^1 no X_k correction factor is
needed.

Reference: Forney, G. (1965), "On Decoding BCH Codes".
"""

from typing import Optional, Sequence

import numpy as np

from .errors import MagnitudeUndefined
from .gf256 import GF256, field
from .polynomial import as_poly, poly_deriv, poly_eval, poly_mul


def error_evaluator(syndromes, locator, gf: GF256 = None) -> np.ndarray:
    """
    Omega(x) = S(x) Lambda(x) mod x^t.

    S(x) = S_1 + S_2 x + ... + S_t x^(t-1), so the syndrome vector is
    reversed to put S_1 at the constant term.
    """
    syndromes = as_poly(syndromes)
    t = len(syndromes)
    product = poly_mul(syndromes[::-1], locator, gf)
    return product[len(product) - t:]


def error_polynomial(
    syndromes,
    locator,
    positions: Sequence[int],
    length: Optional[int] = None,
    gf: GF256 = None,
) -> np.ndarray:
    """
    Build e(x) with the Forney magnitude at each error position.

    Args:
        syndromes: S_1..S_t
        locator: Lambda(x), highest degree first
        positions: Error positions i_k from the constant-term end
        length: Length of e(x); defaults to max(positions) + 1
        gf: Field engine (defaults to the shared GF(2^8) instance)

    Returns:
        e(x), highest degree first, zero except at the error positions

    Raises:
        MagnitudeUndefined: If Lambda'(X_k^-1) == 0 (repeated root)
    """
    gf = gf or field()
    evaluator = error_evaluator(syndromes, locator, gf)
    locator_deriv = poly_deriv(locator)

    if length is None:
        length = max(positions) + 1 if len(positions) else 0
    e = np.zeros(length, dtype=np.uint8)

    for pos in positions:
        x_inv = gf.inverse(int(gf.exp[pos]))
        numerator = poly_eval(evaluator, x_inv, gf)
        denominator = poly_eval(locator_deriv, x_inv, gf)
        if denominator == 0:
            raise MagnitudeUndefined(
                f"Locator derivative vanishes at error position {pos}"
            )
        e[length - 1 - pos] = gf.div(numerator, denominator)

    return e
