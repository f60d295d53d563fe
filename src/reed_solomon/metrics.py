# file: src/reed_solomon/metrics.py

"""
Codec performance metrics.

Bit and symbol error rates, redundancy overhead, and a Monte-Carlo measure
of how often words with more than floor(t/2) errors are detected.
"""

from typing import Dict, Optional

import numpy as np

from .codec import ReedSolomon
from .errors import UncorrectableError
from .testing_utils import inject_symbol_errors


def _as_array(data: bytes) -> np.ndarray:
    return np.frombuffer(bytes(data), dtype=np.uint8)


def _check_lengths(original: bytes, received: bytes):
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )


def compute_ber(original: bytes, received: bytes) -> float:
    """
    Bit Error Rate: differing bits / total bits.

    Example:
        >>> compute_ber(b'\x00\x00', b'\x01\x00')
        0.0625
    """
    _check_lengths(original, received)
    if len(original) == 0:
        return 0.0

    diff = np.unpackbits(_as_array(original) ^ _as_array(received))
    return int(diff.sum()) / diff.size


def count_symbol_errors(original: bytes, received: bytes) -> int:
    """Number of byte positions at which the two sequences differ."""
    _check_lengths(original, received)
    return int(np.count_nonzero(_as_array(original) != _as_array(received)))


def compute_ser(original: bytes, received: bytes, symbol_size: int = 8) -> float:
    """
    Symbol Error Rate: symbols with any differing bit / total symbols.

    Args:
        symbol_size: Bits per symbol; 1, 2, 4 or 8 (8 = byte symbols)
    """
    _check_lengths(original, received)
    if symbol_size not in (1, 2, 4, 8):
        raise ValueError(f"symbol_size must be one of 1, 2, 4, 8, got {symbol_size}")
    if len(original) == 0:
        return 0.0

    if symbol_size == 8:
        return count_symbol_errors(original, received) / len(original)

    diff = np.unpackbits(_as_array(original) ^ _as_array(received))
    per_symbol = diff.reshape(-1, symbol_size).any(axis=1)
    return int(per_symbol.sum()) / per_symbol.size


def compute_redundancy_overhead(original_length: int, encoded_length: int) -> float:
    """
    Redundancy overhead in percent.

    Example:
        >>> round(compute_redundancy_overhead(1000, 1143), 1)
        14.3
    """
    if original_length <= 0:
        raise ValueError(f"original_length must be > 0, got {original_length}")
    if encoded_length < original_length:
        raise ValueError(
            f"encoded_length {encoded_length} < original_length {original_length}"
        )
    return (encoded_length - original_length) / original_length * 100.0


def measure_overload_detection(
    codec: ReedSolomon,
    num_errors: int,
    trials: int,
    message_length: int,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Decode random messages with exactly num_errors corrupted symbols.

    Each trial ends in one of three outcomes:
        corrected:    decode() returned the original message
        detected:     decode() raised UncorrectableError
        miscorrected: decode() returned a different (valid) message

    Above floor(t/2) errors detection is best effort, so callers should
    look at detection_rate rather than expect it to be 1.

    Returns:
        Dictionary with outcome counts, trials and detection_rate
        (detected / (detected + miscorrected), or 1.0 if neither occurred)
    """
    if trials <= 0:
        raise ValueError(f"trials must be > 0, got {trials}")

    rng = np.random.default_rng(seed)
    counts = {"corrected": 0, "detected": 0, "miscorrected": 0}

    for _ in range(trials):
        message = rng.integers(0, 256, size=message_length, dtype=np.uint8).tobytes()
        codeword = codec.encode(message)
        received = inject_symbol_errors(
            codeword, num_errors, seed=int(rng.integers(0, 2**31))
        )
        try:
            decoded = codec.decode(received)
        except UncorrectableError:
            counts["detected"] += 1
            continue
        if decoded == message:
            counts["corrected"] += 1
        else:
            counts["miscorrected"] += 1

    failures = counts["detected"] + counts["miscorrected"]
    detection_rate = counts["detected"] / failures if failures else 1.0
    return {
        **counts,
        "trials": trials,
        "num_errors": num_errors,
        "detection_rate": detection_rate,
    }
