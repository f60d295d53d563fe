# file: src/reed_solomon/encoder.py

"""
ECC encoding entry point.

Provides ecc_encode() for configuration-driven callers that treat the
payload as opaque bytes.
"""

from typing import Any, Dict

from .config import get_ecc_type, get_reed_solomon_params
from .errors import ConfigurationError, EncodingError
from .rs_codec import ReedSolomonCodec


def ecc_encode(data: bytes, config: Dict[str, Any]) -> bytes:
    """
    Encode data with forward error correction.

    Args:
        data: Opaque byte stream
        config: Configuration dictionary with 'ecc' section

    Returns:
        ECC-protected byte stream

    Raises:
        EncodingError: If input is not bytes
        ConfigurationError: If configuration is invalid

    Configuration Schema:
        config['ecc']['type']: 'reed_solomon' (required)
        config['ecc']['reed_solomon']['n']: Total codeword length (default: 255)
        config['ecc']['reed_solomon']['k']: Message length (default: 223)
        config['ecc']['reed_solomon']['nsym']: Check symbols (default: n - k)

    Example:
        >>> config = {
        ...     'ecc': {
        ...         'type': 'reed_solomon',
        ...         'reed_solomon': {'n': 255, 'k': 223, 'nsym': 32}
        ...     }
        ... }
        >>> encoded = ecc_encode(b"payload", config)
    """
    if not isinstance(data, (bytes, bytearray)):
        raise EncodingError(f"Input must be bytes, got {type(data)}")

    ecc_type = get_ecc_type(config)
    if ecc_type != "reed_solomon":
        raise ConfigurationError(f"Unknown ECC type: {ecc_type}")

    n, k, nsym = get_reed_solomon_params(config)
    codec = ReedSolomonCodec(n=n, k=k, nsym=nsym)
    return codec.encode(bytes(data))
