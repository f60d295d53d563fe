# file: src/reed_solomon/gf256.py

"""
Arithmetic over GF(2^8), the finite field with 256 elements.

Elements are bytes whose bits are the coefficients of a degree < 8
polynomial over GF(2), least significant bit = constant term. The field is
GF(2)[z] / (z^8 + z^4 + z^3 + z^2 + 1), i.e. reduction polynomial 0x11D,
with primitive element alpha = 0x02.

Multiplication and division go through exp/log tables built once per field
object. The tables are read-only numpy arrays so a single instance can be
shared freely between codecs and threads.
"""

from functools import lru_cache

import numpy as np

from .errors import ConfigurationError, DivisionByZero


SIZE = 256          # number of field elements
ORDER = 255         # order of the multiplicative group
PRIM_POLY = 0x11D   # z^8 + z^4 + z^3 + z^2 + 1
GENERATOR = 0x02    # alpha


class GF256:
    """
    GF(2^8) field engine backed by exp/log lookup tables.

    Attributes:
        exp: exp[i] = alpha^i for i in [0, 255), uint8, read-only
        log: log[alpha^i] = i, int16, read-only; log[0] = -1 (unused)

    Invariants:
        - exp is a permutation of the 255 nonzero byte values
        - exp[log[x]] == x for all x != 0
    """

    def __init__(self, prim_poly: int = PRIM_POLY):
        if not SIZE <= prim_poly < 2 * SIZE:
            raise ConfigurationError(
                f"Reduction polynomial 0x{prim_poly:X} must have degree 8"
            )
        self.prim_poly = prim_poly
        self.exp, self.log = self._build_tables(prim_poly)

    @staticmethod
    def _build_tables(prim_poly: int):
        exp = np.zeros(ORDER, dtype=np.uint8)
        log = np.full(SIZE, -1, dtype=np.int16)

        x = 1
        for i in range(ORDER):
            if log[x] != -1:
                # alpha^i came back around before visiting every element
                raise ConfigurationError(
                    f"Reduction polynomial 0x{prim_poly:X} is not primitive"
                )
            exp[i] = x
            log[x] = i
            # x = x * alpha: shift, then reduce once the z^8 term appears
            x <<= 1
            if x & SIZE:
                x ^= prim_poly

        exp.setflags(write=False)
        log.setflags(write=False)
        return exp, log

    # Addition and subtraction are both XOR in characteristic 2.

    def add(self, x: int, y: int) -> int:
        return x ^ y

    def sub(self, x: int, y: int) -> int:
        return x ^ y

    def mul(self, x: int, y: int) -> int:
        if x == 0 or y == 0:
            return 0
        return int(self.exp[(int(self.log[x]) + int(self.log[y])) % ORDER])

    def div(self, x: int, y: int) -> int:
        if x == 0:
            return 0
        if y == 0:
            raise DivisionByZero("GF256 division by zero")
        return int(self.exp[(int(self.log[x]) + ORDER - int(self.log[y])) % ORDER])

    def pow(self, x: int, power: int) -> int:
        if x == 0:
            return 0 if power else 1
        return int(self.exp[(int(self.log[x]) * power) % ORDER])

    def inverse(self, x: int) -> int:
        return self.div(1, x)

    def mul_array(self, a, b) -> np.ndarray:
        """
        Elementwise field product of two broadcastable arrays.

        Args:
            a: Array-like of field elements
            b: Array-like (or scalar) of field elements

        Returns:
            uint8 array with the broadcast shape of a and b
        """
        a = np.asarray(a, dtype=np.intp)
        b = np.asarray(b, dtype=np.intp)
        # log[0] is -1, so zero operands are masked out afterwards
        idx = (self.log[a].astype(np.intp) + self.log[b]) % ORDER
        product = self.exp[idx]
        return np.where((a == 0) | (b == 0), 0, product).astype(np.uint8)


@lru_cache(maxsize=None)
def field(prim_poly: int = PRIM_POLY) -> GF256:
    """Return the shared field instance for a reduction polynomial."""
    return GF256(prim_poly)
