# file: src/reed_solomon/positions.py

"""
Error position search.

By construction Lambda(x) = (1 - x X_1) ... (1 - x X_v) with X_k = alpha^(i_k),
so every root of Lambda is the inverse of an error location. The search is
exhaustive over the 255 nonzero field elements (a Chien search without the
incremental update).
"""

from typing import List, Sequence

import numpy as np

from .gf256 import ORDER, GF256, field
from .polynomial import as_poly, poly_eval


def error_positions(locator, gf: GF256 = None) -> List[int]:
    """
    Find the error positions i_k, counted from the constant-term end.

    Args:
        locator: Lambda(x), highest degree first
        gf: Field engine (defaults to the shared GF(2^8) instance)

    Returns:
        Sorted positions i_k such that Lambda(alpha^(-i_k)) == 0
    """
    gf = gf or field()
    # exp[j] = alpha^j walks every nonzero element exactly once
    values = poly_eval(as_poly(locator), gf.exp, gf)
    root_logs = np.nonzero(values == 0)[0]
    # alpha^(i_k) = root^-1, so i_k = -log(root) mod 255
    return sorted(int((ORDER - j) % ORDER) for j in root_logs)


def error_positions_valid(positions: Sequence[int], locator, length: int) -> bool:
    """
    Check the positions describe a decodable error pattern.

    Every root of Lambda must have been found (deg Lambda of them) and each
    position must fall inside the received word.
    """
    degree = len(as_poly(locator)) - 1
    if len(positions) != degree:
        return False
    return all(pos < length for pos in positions)
