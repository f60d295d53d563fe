# file: src/reed_solomon/rs_codec.py

"""
Framed multi-block Reed-Solomon codec.

Wraps the single-codeword ReedSolomon codec so arbitrary-length byte streams
can be protected: a length header is prepended, the stream is cut into
k-byte blocks and every block becomes one n-byte codeword.
"""

import logging
import struct

from .codec import ReedSolomon
from .errors import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    ReedSolomonError,
    UncorrectableError,
)
from .gf256 import ORDER

logger = logging.getLogger(__name__)

HEADER_FORMAT = ">I"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


class ReedSolomonCodec:
    """
    Reed-Solomon stream codec with deterministic padding and error handling.

    Parameters:
        n (int): Total codeword length (symbols)
        k (int): Message length (data symbols)
        nsym (int): Number of check symbols (n - k)

    Invariants:
        - n = k + nsym
        - n <= 255 (GF(256) constraint)
        - Corrects up to nsym // 2 symbol errors per block
    """

    def __init__(self, n: int = 255, k: int = 223, nsym: int = 32):
        if n > ORDER:
            raise ConfigurationError(f"Reed-Solomon n={n} exceeds GF(256) limit of {ORDER}")
        if nsym != n - k:
            raise ConfigurationError(f"Inconsistent RS parameters: n={n}, k={k}, nsym={nsym}")
        if nsym < 1:
            raise ConfigurationError(f"nsym={nsym} must be >= 1")
        if k < 1:
            raise ConfigurationError(f"k={k} must be >= 1")

        self.n = n
        self.k = k
        self.nsym = nsym
        self.max_correctable_errors = nsym // 2
        self.codec = ReedSolomon(nsym)

    def encode(self, data: bytes) -> bytes:
        """
        Encode data with Reed-Solomon error correction.

        Args:
            data: Arbitrary-length byte stream

        Returns:
            Concatenated n-byte codewords carrying
                [4 bytes: original_length][data][zero padding]

        Raises:
            EncodingError: If data is not bytes
        """
        if not isinstance(data, (bytes, bytearray)):
            raise EncodingError(f"Expected bytes, got {type(data)}")

        framed = struct.pack(HEADER_FORMAT, len(data)) + bytes(data)

        chunks = []
        for offset in range(0, len(framed), self.k):
            chunk = framed[offset:offset + self.k]
            if len(chunk) < self.k:
                chunk = chunk + b"\x00" * (self.k - len(chunk))
            chunks.append(self.codec.encode(chunk))

        logger.debug("Encoded %d bytes into %d codewords", len(data), len(chunks))
        return b"".join(chunks)

    def decode(self, data: bytes) -> bytes:
        """
        Decode Reed-Solomon protected data with error correction.

        Args:
            data: Byte stream produced by encode()

        Returns:
            Original data (without length header or padding)

        Raises:
            DecodingError: If data format is invalid
            UncorrectableError: If a block has more errors than can be corrected
        """
        if not isinstance(data, (bytes, bytearray)):
            raise DecodingError(f"Expected bytes, got {type(data)}")
        if len(data) == 0:
            raise DecodingError("Cannot decode empty data")
        if len(data) % self.n != 0:
            raise DecodingError(
                f"Data length {len(data)} is not a multiple of codeword length {self.n}"
            )

        num_chunks = len(data) // self.n
        decoded_chunks = []
        for i in range(num_chunks):
            chunk = data[i * self.n:(i + 1) * self.n]
            try:
                decoded_chunks.append(self.codec.decode(chunk))
            except UncorrectableError as exc:
                raise UncorrectableError(
                    f"Reed-Solomon correction failed on chunk {i}/{num_chunks}: {exc}",
                    num_errors=exc.num_errors,
                    max_correctable=self.max_correctable_errors,
                ) from exc
            except ReedSolomonError as exc:
                raise DecodingError(f"Reed-Solomon decoding failed on chunk {i}: {exc}") from exc

        decoded = b"".join(decoded_chunks)
        if len(decoded) < HEADER_SIZE:
            raise DecodingError("Decoded data too short to contain length header")

        original_length = struct.unpack(HEADER_FORMAT, decoded[:HEADER_SIZE])[0]
        if original_length > len(decoded) - HEADER_SIZE:
            raise DecodingError(
                f"Length header {original_length} exceeds available data "
                f"{len(decoded) - HEADER_SIZE}"
            )

        return decoded[HEADER_SIZE:HEADER_SIZE + original_length]

    def get_redundancy_overhead(self) -> float:
        """Redundancy overhead as a fraction: nsym / k."""
        return self.nsym / self.k

    def get_code_rate(self) -> float:
        """Code rate: k / n."""
        return self.k / self.n
