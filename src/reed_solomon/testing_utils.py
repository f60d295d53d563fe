# file: src/reed_solomon/testing_utils.py

"""
Error injection for tests and experiments.

Every function takes an explicit seed and uses its own random.Random
instance, so results are reproducible and the global RNG is untouched.
"""

import random
from typing import Dict, Optional


def inject_bit_errors(
    data: bytes,
    error_rate: float,
    seed: Optional[int] = None
) -> bytes:
    """
    Flip a fraction of the bits of data.

    Args:
        data: Original data
        error_rate: Fraction of bits to flip (0.0 to 1.0)
        seed: Random seed for reproducibility

    Returns:
        Data with int(len(data) * 8 * error_rate) distinct bits flipped
    """
    if not 0.0 <= error_rate <= 1.0:
        raise ValueError(f"error_rate must be in [0, 1], got {error_rate}")

    rng = random.Random(seed)
    corrupted = bytearray(data)

    total_bits = len(data) * 8
    num_errors = int(total_bits * error_rate)

    for pos in rng.sample(range(total_bits), num_errors):
        corrupted[pos // 8] ^= (1 << (pos % 8))

    return bytes(corrupted)


def inject_burst_errors(
    data: bytes,
    num_bursts: int,
    burst_length: int,
    seed: Optional[int] = None
) -> bytes:
    """
    Flip runs of consecutive bits.

    Args:
        data: Original data
        num_bursts: Number of error bursts
        burst_length: Length of each burst in bits
        seed: Random seed for reproducibility
    """
    rng = random.Random(seed)
    corrupted = bytearray(data)
    total_bits = len(data) * 8

    if num_bursts * burst_length > total_bits:
        raise ValueError("Total burst bits exceed data length")

    for _ in range(num_bursts):
        start_pos = rng.randint(0, total_bits - burst_length)
        for pos in range(start_pos, start_pos + burst_length):
            corrupted[pos // 8] ^= (1 << (pos % 8))

    return bytes(corrupted)


def inject_symbol_errors(
    data: bytes,
    num_errors: int,
    seed: Optional[int] = None
) -> bytes:
    """
    Replace num_errors distinct symbols with different random values.

    Unlike bit-level injection, the number of corrupted symbols is exact,
    which is what the correction radius floor(t/2) is stated in.
    """
    if not 0 <= num_errors <= len(data):
        raise ValueError(f"num_errors must be in [0, {len(data)}], got {num_errors}")

    rng = random.Random(seed)
    corrupted = bytearray(data)
    for pos in rng.sample(range(len(data)), num_errors):
        corrupted[pos] ^= rng.randint(1, 255)

    return bytes(corrupted)


def apply_corruption(data: bytes, corruption: Dict[int, int]) -> bytes:
    """Overwrite the symbols at the given indices, e.g. {5: 0x00, 14: 0x33}."""
    corrupted = bytearray(data)
    for pos, value in corruption.items():
        corrupted[pos] = value
    return bytes(corrupted)
