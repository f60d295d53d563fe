# file: src/reed_solomon/__init__.py

"""
Reed-Solomon forward error correction over GF(2^8).

Systematic encoding with t check symbols; decoding by syndromes,
Berlekamp-Massey, exhaustive root search and Forney's algorithm. Corrects
up to floor(t/2) symbol errors and detects (best effort) more.

Public API:
    - ReedSolomon(nsym): single-codeword codec with inspectable steps
    - ReedSolomonCodec(n, k, nsym): framed multi-block stream codec
    - ecc_encode(data: bytes, config) -> bytes
    - ecc_decode(data: bytes, config) -> bytes
    - load_config(path=None) -> dict
"""

from .codec import DecodeReport, ReedSolomon, generator_poly
from .config import load_config
from .decoder import ecc_decode
from .encoder import ecc_encode
from .gf256 import GF256, field
from .metrics import (
    compute_ber,
    compute_redundancy_overhead,
    compute_ser,
    count_symbol_errors,
    measure_overload_detection,
)
from .rs_codec import ReedSolomonCodec
from .errors import (
    ReedSolomonError,
    ConfigurationError,
    EncodingError,
    DecodingError,
    UncorrectableError,
    DivisionByZero,
    MagnitudeUndefined,
)

__version__ = "1.0.0"

__all__ = [
    "ReedSolomon",
    "ReedSolomonCodec",
    "DecodeReport",
    "GF256",
    "field",
    "generator_poly",
    "ecc_encode",
    "ecc_decode",
    "load_config",
    "compute_ber",
    "compute_ser",
    "compute_redundancy_overhead",
    "count_symbol_errors",
    "measure_overload_detection",
    "ReedSolomonError",
    "ConfigurationError",
    "EncodingError",
    "DecodingError",
    "UncorrectableError",
    "DivisionByZero",
    "MagnitudeUndefined",
]
