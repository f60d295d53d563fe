"""
Tests for the framed stream codec and the config-driven entry points.

Test coverage:
    - ReedSolomonCodec framing, round-trip and error correction
    - ecc_encode/ecc_decode configuration handling
    - Failure modes and exceptions
    - Metrics computation
    - Error injection utilities
"""

import pytest

from reed_solomon import (
    ecc_encode,
    ecc_decode,
    compute_ber,
    compute_ser,
    compute_redundancy_overhead,
    count_symbol_errors,
    ConfigurationError,
    DecodingError,
    EncodingError,
    UncorrectableError,
)
from reed_solomon.rs_codec import ReedSolomonCodec
from reed_solomon.testing_utils import (
    apply_corruption,
    inject_bit_errors,
    inject_burst_errors,
    inject_symbol_errors,
)


# Default test configuration
DEFAULT_CONFIG = {
    'ecc': {
        'type': 'reed_solomon',
        'reed_solomon': {
            'n': 255,
            'k': 223,
            'nsym': 32,
        }
    }
}


class TestReedSolomonCodec:
    """Test the framed stream codec."""

    def test_initialization_valid(self):
        codec = ReedSolomonCodec(n=255, k=223, nsym=32)
        assert codec.n == 255
        assert codec.k == 223
        assert codec.nsym == 32
        assert codec.max_correctable_errors == 16

    def test_initialization_invalid_n(self):
        with pytest.raises(ConfigurationError, match="exceeds GF\\(256\\)"):
            ReedSolomonCodec(n=256, k=223, nsym=33)

    def test_initialization_inconsistent_params(self):
        with pytest.raises(ConfigurationError, match="Inconsistent"):
            ReedSolomonCodec(n=255, k=223, nsym=30)

    def test_initialization_no_data_symbols(self):
        with pytest.raises(ConfigurationError):
            ReedSolomonCodec(n=10, k=0, nsym=10)

    def test_encode_decode_roundtrip_small(self):
        codec = ReedSolomonCodec()
        original = b"Hello, World!"

        encoded = codec.encode(original)
        assert len(encoded) == 255
        assert codec.decode(encoded) == original

    def test_encode_decode_roundtrip_multiple_chunks(self):
        codec = ReedSolomonCodec()
        original = b"X" * 2000

        encoded = codec.encode(original)
        assert len(encoded) % 255 == 0
        assert codec.decode(encoded) == original

    def test_encode_decode_empty(self):
        codec = ReedSolomonCodec()
        assert codec.decode(codec.encode(b"")) == b""

    def test_short_code(self):
        codec = ReedSolomonCodec(n=18, k=13, nsym=5)
        original = b"hello world, this spans several blocks"
        encoded = codec.encode(original)
        assert len(encoded) % 18 == 0
        assert codec.decode(encoded) == original

    def test_each_block_is_systematic(self):
        codec = ReedSolomonCodec(n=20, k=10, nsym=10)
        encoded = codec.encode(b"abcdefghijklmnop")
        # 4-byte header + first 6 data bytes
        assert encoded[4:10] == b"abcdef"
        assert encoded[20:30] == b"ghijklmnop"

    def test_error_correction_within_capability(self):
        codec = ReedSolomonCodec(n=255, k=223, nsym=32)
        original = b"Correct me!" * 20

        encoded = codec.encode(original)
        # 16 symbol errors per codeword is the exact correction limit
        corrupted = b"".join(
            inject_symbol_errors(encoded[i:i + 255], 16, seed=i)
            for i in range(0, len(encoded), 255)
        )

        assert codec.decode(corrupted) == original

    def test_error_correction_exceeds_capability(self):
        codec = ReedSolomonCodec(n=255, k=223, nsym=32)
        original = b"Too many errors!" * 20

        encoded = codec.encode(original)
        corrupted = inject_bit_errors(encoded, error_rate=0.3, seed=42)

        with pytest.raises(UncorrectableError, match="chunk 0"):
            codec.decode(corrupted)

    def test_decode_invalid_length(self):
        codec = ReedSolomonCodec()
        with pytest.raises(DecodingError, match="not a multiple"):
            codec.decode(b"X" * 100)

    def test_decode_empty_raises_error(self):
        codec = ReedSolomonCodec()
        with pytest.raises(DecodingError, match="empty"):
            codec.decode(b"")

    def test_decode_bad_length_header(self):
        codec = ReedSolomonCodec(n=18, k=13, nsym=5)
        # a valid codeword whose header claims more data than it carries
        block = codec.codec.encode(b"\x00\x00\x01\x00" + b"x" * 9)
        with pytest.raises(DecodingError, match="Length header"):
            codec.decode(block)

    def test_get_redundancy_overhead(self):
        codec = ReedSolomonCodec(n=255, k=223, nsym=32)
        assert abs(codec.get_redundancy_overhead() - 32 / 223) < 1e-6

    def test_get_code_rate(self):
        codec = ReedSolomonCodec(n=255, k=223, nsym=32)
        assert abs(codec.get_code_rate() - 223 / 255) < 1e-6


class TestECCEncodeDecode:
    """Test public ecc_encode/ecc_decode interface."""

    def test_encode_decode_roundtrip(self):
        original = b"Opaque payload"
        encoded = ecc_encode(original, DEFAULT_CONFIG)
        assert ecc_decode(encoded, DEFAULT_CONFIG) == original

    def test_encode_with_different_config(self):
        config = {
            'ecc': {
                'type': 'reed_solomon',
                'reed_solomon': {'n': 255, 'k': 191, 'nsym': 64},
            }
        }
        original = b"High redundancy test"
        encoded = ecc_encode(original, config)
        assert ecc_decode(encoded, config) == original

    def test_defaults_when_parameters_missing(self):
        config = {'ecc': {'type': 'reed_solomon'}}
        encoded = ecc_encode(b"defaults", config)
        assert len(encoded) == 255
        assert ecc_decode(encoded, DEFAULT_CONFIG) == b"defaults"

    def test_encode_invalid_input_type(self):
        with pytest.raises(EncodingError, match="must be bytes"):
            ecc_encode("not bytes", DEFAULT_CONFIG)

    def test_decode_invalid_input_type(self):
        with pytest.raises(DecodingError, match="must be bytes"):
            ecc_decode("not bytes", DEFAULT_CONFIG)

    def test_encode_missing_config(self):
        with pytest.raises(ConfigurationError, match="Missing required"):
            ecc_encode(b"test", {})

    def test_encode_unknown_ecc_type(self):
        config = {'ecc': {'type': 'ldpc'}}
        with pytest.raises(ConfigurationError, match="Unknown ECC type"):
            ecc_encode(b"test", config)

    def test_non_integer_parameter(self):
        config = {'ecc': {'type': 'reed_solomon', 'reed_solomon': {'n': '255'}}}
        with pytest.raises(ConfigurationError, match="must be an integer"):
            ecc_encode(b"test", config)

    def test_robustness_with_channel_noise(self):
        original = b"Payload that will go through a noisy channel" * 10

        encoded = ecc_encode(original, DEFAULT_CONFIG)
        # 12 flipped bits in total, below the 16-symbol limit of any single block
        corrupted = inject_bit_errors(encoded, error_rate=0.003, seed=123)

        assert ecc_decode(corrupted, DEFAULT_CONFIG) == original

    def test_failure_propagation(self):
        encoded = ecc_encode(b"Will be heavily corrupted", DEFAULT_CONFIG)
        corrupted = inject_bit_errors(encoded, error_rate=0.4, seed=111)

        with pytest.raises(UncorrectableError) as exc_info:
            ecc_decode(corrupted, DEFAULT_CONFIG)

        assert exc_info.value.max_correctable == 16

    def test_no_silent_corruption(self):
        original = b"Critical data that must not be silently corrupted" * 50
        encoded = ecc_encode(original, DEFAULT_CONFIG)

        for error_rate in [0.1, 0.2, 0.3]:
            corrupted = inject_bit_errors(encoded, error_rate=error_rate, seed=222)
            try:
                decoded = ecc_decode(corrupted, DEFAULT_CONFIG)
                assert decoded == original, "Decoder returned corrupted data without error!"
            except UncorrectableError:
                pass


class TestMetrics:
    """Test metrics computation functions."""

    def test_compute_ber_no_errors(self):
        data = b"No errors here"
        assert compute_ber(data, data) == 0.0

    def test_compute_ber_single_bit(self):
        assert compute_ber(b'\x00', b'\x01') == 1.0 / 8

    def test_compute_ber_all_bits(self):
        assert compute_ber(b'\x00\x00', b'\xff\xff') == 1.0

    def test_compute_ber_empty(self):
        assert compute_ber(b"", b"") == 0.0

    def test_compute_ber_length_mismatch(self):
        with pytest.raises(ValueError, match="Length mismatch"):
            compute_ber(b"short", b"longer data")

    def test_compute_ser_byte_level(self):
        original = b'\x00\x00\x00\x00'
        received = b'\x01\x00\x02\x00'
        assert compute_ser(original, received, symbol_size=8) == 2.0 / 4

    def test_compute_ser_nibbles(self):
        # 0x01 touches the low nibble of byte 0, 0x30 the high nibble of byte 1
        assert compute_ser(b'\x00\x00', b'\x01\x30', symbol_size=4) == 2.0 / 4

    def test_compute_ser_invalid_symbol_size(self):
        with pytest.raises(ValueError):
            compute_ser(b'\x00', b'\x00', symbol_size=3)

    def test_count_symbol_errors(self):
        assert count_symbol_errors(b"abcd", b"abXY") == 2

    def test_compute_redundancy_overhead(self):
        assert abs(compute_redundancy_overhead(1000, 1143) - 14.3) < 0.1

    def test_compute_redundancy_overhead_invalid(self):
        with pytest.raises(ValueError):
            compute_redundancy_overhead(0, 100)
        with pytest.raises(ValueError):
            compute_redundancy_overhead(100, 50)


class TestErrorInjection:
    """Test error injection utilities."""

    def test_inject_bit_errors_deterministic(self):
        data = b'\x00' * 100
        assert inject_bit_errors(data, 0.01, seed=42) == inject_bit_errors(data, 0.01, seed=42)

    def test_inject_bit_errors_rate(self):
        data = b'\x00' * 1000
        corrupted = inject_bit_errors(data, error_rate=0.05, seed=999)
        assert compute_ber(data, corrupted) == pytest.approx(0.05, abs=1e-3)

    def test_inject_bit_errors_invalid_rate(self):
        with pytest.raises(ValueError):
            inject_bit_errors(b'\x00', error_rate=1.5)

    def test_inject_burst_errors(self):
        data = b'\x00' * 100
        corrupted = inject_burst_errors(data, num_bursts=3, burst_length=8, seed=42)
        assert corrupted != data
        assert corrupted == inject_burst_errors(data, num_bursts=3, burst_length=8, seed=42)

    def test_inject_symbol_errors_exact_count(self):
        data = bytes(range(50))
        for num_errors in (0, 1, 7, 50):
            corrupted = inject_symbol_errors(data, num_errors, seed=num_errors)
            assert count_symbol_errors(data, corrupted) == num_errors

    def test_inject_symbol_errors_too_many(self):
        with pytest.raises(ValueError):
            inject_symbol_errors(b"abc", 4)

    def test_apply_corruption(self):
        assert apply_corruption(b"hello", {0: 0x4A, 4: 0x21}) == b"Jell!"
