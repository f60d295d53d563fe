# file: src/reed_solomon/decoder.py

"""
ECC decoding entry point.

Provides ecc_decode() with explicit error correction and failure handling.
"""

from typing import Any, Dict

from .config import get_ecc_type, get_reed_solomon_params
from .errors import ConfigurationError, DecodingError
from .rs_codec import ReedSolomonCodec


def ecc_decode(data: bytes, config: Dict[str, Any]) -> bytes:
    """
    Decode ECC-protected data with error correction.

    Args:
        data: ECC-protected byte stream
        config: Configuration dictionary with 'ecc' section (same as encode)

    Returns:
        Recovered original byte stream

    Raises:
        DecodingError: If decoding fails due to format errors
        UncorrectableError: If a block cannot be repaired
        ConfigurationError: If configuration is invalid

    Error Handling:
        - If errors <= nsym/2 per block: returns the original data
        - Otherwise: usually raises UncorrectableError. Beyond nsym/2 the
          decoder may also land on a different valid codeword; this is
          not detectable from the syndromes alone.

    Example:
        >>> try:
        ...     payload = ecc_decode(received, config)
        ... except UncorrectableError as e:
        ...     print(f"Too many errors (max {e.max_correctable})")
    """
    if not isinstance(data, (bytes, bytearray)):
        raise DecodingError(f"Input must be bytes, got {type(data)}")

    ecc_type = get_ecc_type(config)
    if ecc_type != "reed_solomon":
        raise ConfigurationError(f"Unknown ECC type: {ecc_type}")

    n, k, nsym = get_reed_solomon_params(config)
    codec = ReedSolomonCodec(n=n, k=k, nsym=nsym)
    return codec.decode(bytes(data))
