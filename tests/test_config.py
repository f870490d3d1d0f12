"""Tests for the YAML configuration file."""

from pathlib import Path

import pytest

from interpolator.config import (
    DEFAULT_CONFIG_FILE,
    ConfigLoader,
    InterpolationConfig,
    load_config,
)
from interpolator.exceptions import ConfigValidationError


class TestConfigLoader:

    def test_load_full_config(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('prefix: MIA\nalternative_prefix: DEV\nlog_level: debug\n')

        config = ConfigLoader().load(config_file)

        assert config == InterpolationConfig(prefix='MIA', alternative_prefix='DEV', log_level='debug')

    def test_empty_file_gives_defaults(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('')

        assert ConfigLoader().load(config_file) == InterpolationConfig()

    def test_non_mapping_rejected(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('- MIA\n- DEV\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(config_file)

        assert exc_info.value.exit_code == 2
        assert 'YAML object' in str(exc_info.value)

    def test_invalid_yaml_rejected(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('prefix: [unclosed\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(config_file)

        assert 'Failed to load config' in str(exc_info.value)

    def test_all_errors_reported_together(self, tmp_path):
        config_file = tmp_path / 'config.yaml'
        config_file.write_text('prefix: 42\nlog_level: loud\nextra: true\n')

        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigLoader().load(config_file)

        paths = [error.path for error in exc_info.value.errors]
        assert paths == ['extra', 'prefix', 'log_level']
        assert "Config error at 'prefix': 'prefix' must be a string, got int" in str(exc_info.value)


class TestLoadConfig:

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / 'missing.yaml')

    def test_default_file_in_workspace(self, tmp_path):
        (tmp_path / DEFAULT_CONFIG_FILE).write_text('prefix: MIA\n')

        config = load_config(workspace=tmp_path)

        assert config.prefix == 'MIA'
        assert config.alternative_prefix == ''

    def test_defaults_without_file(self, tmp_path):
        assert load_config(workspace=tmp_path) == InterpolationConfig()


class TestMerge:

    def test_overrides_win(self):
        config = InterpolationConfig(prefix='MIA', alternative_prefix='DEV', log_level='info')

        merged = config.merge(prefix='PROD', log_level='error')

        assert merged == InterpolationConfig(prefix='PROD', alternative_prefix='DEV', log_level='error')

    def test_empty_string_override_is_kept(self):
        merged = InterpolationConfig(prefix='MIA').merge(prefix='')

        assert merged.prefix == ''
