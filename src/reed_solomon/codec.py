# file: src/reed_solomon/codec.py

"""
Reed-Solomon codec over GF(2^8).

Messages are treated as polynomial coefficients (a BCH view of the code),
and the t check symbols are appended after the message (a systematic code).
With t check symbols the codec detects up to t errors and corrects up to
floor(t / 2). Erasures (errors at known locations) are not handled.

Conventions:
    - Generator roots are alpha^1 .. alpha^t.
    - Syndromes are S_j = r(alpha^j) for j = 1..t, stored S_1 first.
    - Error positions count from the last symbol of the word (position 0
      is the constant term of r(x)).
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional

import numpy as np

from .errors import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    MagnitudeUndefined,
    UncorrectableError,
)
from .forney import error_evaluator, error_polynomial
from .gf256 import ORDER, field
from .locator import error_locator
from .polynomial import as_poly, poly_div, poly_eval, poly_mul, poly_sub
from .positions import error_positions, error_positions_valid

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def generator_poly(nsym: int) -> np.ndarray:
    """
    g(x) = (x - alpha^1)(x - alpha^2)...(x - alpha^nsym), highest degree first.

    Cached per nsym; the returned array is read-only.
    """
    gf = field()
    g = np.array([1], dtype=np.uint8)
    for root in generator_roots(nsym):
        g = poly_mul(g, [1, root], gf)
    g.setflags(write=False)
    return g


def generator_roots(nsym: int) -> np.ndarray:
    """alpha^1 .. alpha^nsym."""
    gf = field()
    return gf.exp[np.arange(1, nsym + 1) % ORDER]


def _as_symbols(data, error_cls) -> np.ndarray:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return as_poly(data)
    if isinstance(data, str):
        raise error_cls(f"Expected bytes or a sequence of symbols, got {type(data)}")
    values = np.asarray(data)
    if values.ndim != 1:
        raise error_cls(f"Expected a 1-D sequence of symbols, got shape {values.shape}")
    if values.size and not np.issubdtype(values.dtype, np.integer):
        raise error_cls(f"Symbols must be integers, got dtype {values.dtype}")
    if values.size and (values.min() < 0 or values.max() > 255):
        raise error_cls("Symbols must lie in [0, 255]")
    return values.astype(np.uint8)


@dataclass
class DecodeReport:
    """
    Every intermediate value of one decode attempt.

    Fields after the step that failed are None; failure holds the reason.
    """
    received: np.ndarray
    syndromes: np.ndarray
    locator: Optional[np.ndarray] = None
    positions: Optional[List[int]] = None
    evaluator: Optional[np.ndarray] = None
    error_polynomial: Optional[np.ndarray] = None
    repaired: Optional[bytes] = None
    verify_syndromes: Optional[np.ndarray] = None
    message: Optional[bytes] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class ReedSolomon:
    """
    Reed-Solomon encoder/decoder adding nsym check symbols.

    Parameters:
        nsym (int): Number of check symbols t

    Invariants:
        - 1 <= nsym <= 255
        - len(message) + nsym <= 255 for every encoded message
        - Corrects up to nsym // 2 symbol errors
    """

    def __init__(self, nsym: int):
        if not isinstance(nsym, (int, np.integer)) or isinstance(nsym, bool):
            raise ConfigurationError(f"nsym must be an integer, got {type(nsym)}")
        if not 1 <= nsym <= ORDER:
            raise ConfigurationError(f"nsym={nsym} must be in [1, {ORDER}]")

        self.nsym = int(nsym)
        self.max_correctable_errors = self.nsym // 2
        self.gf = field()
        self._generator = generator_poly(self.nsym)
        self._roots = generator_roots(self.nsym)

    def __repr__(self) -> str:
        return f"ReedSolomon(nsym={self.nsym})"

    def generator_poly(self) -> np.ndarray:
        return self._generator

    def encode(self, message) -> bytes:
        """
        Systematically encode a message.

        Args:
            message: bytes or sequence of symbols, length k <= 255 - nsym

        Returns:
            message || check symbols, length k + nsym

        Raises:
            EncodingError: If the message is not a sequence of byte values
            ConfigurationError: If k + nsym exceeds 255
        """
        msg = _as_symbols(message, EncodingError)
        if len(msg) + self.nsym > ORDER:
            raise ConfigurationError(
                f"Message length {len(msg)} + nsym {self.nsym} exceeds {ORDER}"
            )

        # m(x) * x^t = q(x) g(x) + r(x), so m(x) x^t - r(x) is a multiple of g(x)
        shifted = np.concatenate([msg, np.zeros(self.nsym, dtype=np.uint8)])
        _, remainder = poly_div(shifted, self._generator, self.gf)
        return poly_sub(shifted, remainder).tobytes()

    def syndromes(self, received) -> np.ndarray:
        """S_j = r(alpha^j) for j = 1..nsym."""
        r = _as_symbols(received, DecodingError)
        return poly_eval(r, self._roots, self.gf)

    def is_valid_codeword(self, received) -> bool:
        return not np.any(self.syndromes(received))

    def remove_check_symbols(self, codeword) -> bytes:
        """Drop the trailing nsym symbols, i.e. floor(s(x) / x^t)."""
        s = _as_symbols(codeword, DecodingError)
        if len(s) < self.nsym:
            raise DecodingError(
                f"Codeword length {len(s)} is shorter than nsym {self.nsym}"
            )
        return s[:len(s) - self.nsym].tobytes()

    # Inspectable decode steps.

    def error_locator(self, syndromes) -> np.ndarray:
        return error_locator(syndromes, self.gf)

    def error_positions(self, locator) -> List[int]:
        return error_positions(locator, self.gf)

    def error_positions_valid(self, positions, locator, received) -> bool:
        return error_positions_valid(positions, locator, len(received))

    def error_evaluator(self, syndromes, locator) -> np.ndarray:
        return error_evaluator(syndromes, locator, self.gf)

    def error_polynomial(self, syndromes, locator, positions, length=None) -> np.ndarray:
        return error_polynomial(syndromes, locator, positions, length, self.gf)

    def _check_received(self, received) -> np.ndarray:
        r = _as_symbols(received, DecodingError)
        if len(r) > ORDER:
            raise ConfigurationError(
                f"Received length {len(r)} exceeds codeword limit {ORDER}"
            )
        if len(r) < self.nsym:
            raise DecodingError(
                f"Received length {len(r)} is shorter than nsym {self.nsym}"
            )
        return r

    def repair(self, received) -> bytes:
        """
        Correct errors in a received word, keeping the check symbols.

        Raises:
            UncorrectableError: If the word could not be repaired
            DecodingError: If the word is shorter than nsym
        """
        r = self._check_received(received)
        syndromes = self.syndromes(r)
        if not np.any(syndromes):
            return r.tobytes()

        locator = self.error_locator(syndromes)
        positions = self.error_positions(locator)
        num_errors = len(locator) - 1
        logger.debug("Locator degree %d, roots at positions %s", num_errors, positions)

        if not self.error_positions_valid(positions, locator, r):
            logger.info(
                "Uncorrectable word: %d roots found for locator of degree %d",
                len(positions), num_errors,
            )
            raise UncorrectableError(
                "Could not decode message: error locator roots do not resolve",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            )

        try:
            e = self.error_polynomial(syndromes, locator, positions, len(r))
        except MagnitudeUndefined as exc:
            raise UncorrectableError(
                f"Could not decode message: {exc}",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            ) from exc

        repaired = r ^ e

        # The repaired word is not proven valid beyond floor(t/2) errors,
        # so the syndromes are checked once more.
        if not self.is_valid_codeword(repaired):
            logger.info("Uncorrectable word: repaired word has nonzero syndromes")
            raise UncorrectableError(
                "Could not decode message: repaired word is not a codeword",
                num_errors=num_errors,
                max_correctable=self.max_correctable_errors,
            )

        logger.debug("Corrected %d symbol errors", num_errors)
        return repaired.tobytes()

    def decode(self, received) -> bytes:
        """Repair a received word and strip its check symbols."""
        return self.remove_check_symbols(self.repair(received))

    def inspect(self, received) -> DecodeReport:
        """
        Run the decode pipeline step by step, recording each result.

        Unlike decode(), an uncorrectable word is reported in
        DecodeReport.failure instead of raising.
        """
        r = self._check_received(received)
        report = DecodeReport(received=r, syndromes=self.syndromes(r))

        if not np.any(report.syndromes):
            report.repaired = r.tobytes()
        else:
            report.locator = self.error_locator(report.syndromes)
            report.positions = self.error_positions(report.locator)
            if not self.error_positions_valid(report.positions, report.locator, r):
                report.failure = "error locator roots do not resolve"
                return report

            report.evaluator = self.error_evaluator(report.syndromes, report.locator)
            try:
                report.error_polynomial = self.error_polynomial(
                    report.syndromes, report.locator, report.positions, len(r)
                )
            except MagnitudeUndefined as exc:
                report.failure = str(exc)
                return report
            report.repaired = (r ^ report.error_polynomial).tobytes()

        report.verify_syndromes = self.syndromes(report.repaired)
        if np.any(report.verify_syndromes):
            report.failure = "repaired word is not a codeword"
            return report

        report.message = self.remove_check_symbols(report.repaired)
        return report
