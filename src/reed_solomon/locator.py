# file: src/reed_solomon/locator.py

"""
Error locator synthesis with the Berlekamp-Massey algorithm.

Reference: Massey, J. L. (1969), "Shift-register synthesis and BCH decoding".
"""

import numpy as np

from .gf256 import GF256, field
from .polynomial import as_poly, poly_mul_coeff_at


def error_locator(syndromes, gf: GF256 = None) -> np.ndarray:
    """
    Compute the error locator Lambda(x) from the syndromes S_1..S_t.

    Algorithm (notation of Massey's paper in brackets):
        Lambda = 1 [C(D)], B = 1 [b^-1 * D^x * B(D)], L = 0
        for i in 0..t-1:
            delta = coefficient of x^i in Lambda(x) * S(x)      [d]
            B = B * x
            if delta != 0:
                if 2L <= i:
                    T = Lambda
                    Lambda = Lambda - delta * B
                    B = T / delta
                    L = i + 1 - L
                else:
                    Lambda = Lambda - delta * B

    Lambda and B live in fixed buffers of t + 1 coefficients stored
    lowest degree first, so the shift is an in-place move and the
    degree is tracked by L alone. Their degrees never exceed t.

    Args:
        syndromes: S_1..S_t, in that order
        gf: Field engine (defaults to the shared GF(2^8) instance)

    Returns:
        Lambda(x), highest degree first, of length L + 1 with Lambda(0) = 1.
        The result may still fail to have L roots; that is checked by
        the position search.
    """
    gf = gf or field()
    syndromes = as_poly(syndromes)
    t = len(syndromes)

    # S(x) = S_1 + S_2 x + ... + S_t x^(t-1), highest degree first
    syndrome_poly = syndromes[::-1]

    lam = np.zeros(t + 1, dtype=np.uint8)
    prev = np.zeros(t + 1, dtype=np.uint8)
    saved = np.zeros(t + 1, dtype=np.uint8)
    lam[0] = 1
    prev[0] = 1
    num_errors = 0

    for i in range(t):
        # lam[::-1] is a view in highest-first order
        delta = poly_mul_coeff_at(lam[::-1], syndrome_poly, i, gf)

        prev[1:] = prev[:-1]
        prev[0] = 0

        if delta == 0:
            continue

        if 2 * num_errors <= i:
            saved[:] = lam
            lam ^= gf.mul_array(prev, delta)
            prev[:] = gf.mul_array(saved, gf.inverse(delta))
            num_errors = i + 1 - num_errors
        else:
            lam ^= gf.mul_array(prev, delta)

    return lam[:num_errors + 1][::-1].copy()
