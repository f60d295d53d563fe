"""
Tests for YAML configuration loading.
"""

import pytest

from reed_solomon import ecc_decode, ecc_encode, load_config
from reed_solomon.config import get_ecc_type, get_reed_solomon_params
from reed_solomon.errors import ConfigurationError


class TestLoadConfig:
    """Test loading configuration files."""

    def test_packaged_default(self):
        config = load_config()
        assert get_ecc_type(config) == "reed_solomon"
        assert get_reed_solomon_params(config) == (255, 223, 32)

    def test_default_config_drives_codec(self):
        config = load_config()
        assert ecc_decode(ecc_encode(b"from yaml", config), config) == b"from yaml"

    def test_custom_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "ecc:\n"
            "  type: reed_solomon\n"
            "  reed_solomon:\n"
            "    n: 18\n"
            "    k: 13\n"
        )
        config = load_config(str(path))
        assert get_reed_solomon_params(config) == (18, 13, 5)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("ecc: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(str(path))

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(str(path))


class TestParams:
    """Test parameter extraction."""

    def test_missing_type(self):
        with pytest.raises(ConfigurationError, match="Missing required"):
            get_ecc_type({"ecc": {}})

    def test_explicit_nsym_is_kept(self):
        # consistency with n - k is checked by the codec, not here
        config = {"ecc": {"reed_solomon": {"n": 255, "k": 223, "nsym": 30}}}
        assert get_reed_solomon_params(config) == (255, 223, 30)

    def test_rejects_bool(self):
        config = {"ecc": {"reed_solomon": {"k": True}}}
        with pytest.raises(ConfigurationError):
            get_reed_solomon_params(config)
