"""Unit tests for conversion options."""

import json
import logging

import pytest

from ets_to_hass.config import ConverterConfig, load_config
from ets_to_hass.utils.config_validator import ConfigValidationError, ConfigValidator


def write_config(tmp_path, data):
    path = tmp_path / "options.json"
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


class TestConverterConfig:
    """Test the options object."""

    def test_defaults(self):
        config = ConverterConfig()
        assert config.output_format == 'homeass'
        assert config.address_style is None
        assert config.full_name is False
        assert config.logging_level == logging.INFO

    def test_merged_skips_none(self):
        config = ConverterConfig(full_name=True).merged(full_name=None, output_format='linknx')
        assert config.full_name is True
        assert config.output_format == 'linknx'

    def test_merged_unknown_field(self):
        with pytest.raises(TypeError):
            ConverterConfig().merged(colour='red')

    def test_password_not_in_repr(self):
        assert 'secret' not in repr(ConverterConfig(password='secret'))

    def test_logging_level(self):
        assert ConverterConfig(log_level='debug').logging_level == logging.DEBUG


class TestLoadConfig:
    """Test the JSON options file."""

    def test_no_file(self):
        assert load_config(None) == ConverterConfig()

    def test_file_values(self, tmp_path):
        path = write_config(tmp_path, {'format': 'linknx', 'addr': 'TwoLevel', 'ha_knx': True, 'trace': 'debug'})
        config = load_config(path)
        assert config.output_format == 'linknx'
        assert config.address_style == 'TwoLevel'
        assert config.wrap_knx is True
        assert config.log_level == 'debug'

    def test_invalid_values_are_collected(self, tmp_path):
        path = write_config(tmp_path, {'format': 'xml', 'full_name': 'yes', 'colour': 'red'})
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)
        message = str(exc_info.value)
        assert "Field 'format' must be one of" in message
        assert "Field 'full_name' must be a boolean" in message
        assert "Unknown field: colour" in message

    def test_not_json(self, tmp_path):
        path = tmp_path / "options.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(ConfigValidationError, match="not valid JSON"):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigValidationError, match="Cannot read"):
            load_config(str(tmp_path / "missing.json"))


def test_validator_rejects_list():
    with pytest.raises(ConfigValidationError):
        ConfigValidator().validate([])
