"""Unit tests for ConfigLoader."""

import pytest

from preview_options.core.config_loader import ConfigLoader


class TestConfigLoaderParsing:
    """Test ConfigLoader value parsing."""

    def test_parse_value_bool(self):
        for val in ['true', 'True', 'yes', 'on', '1']:
            assert ConfigLoader._parse_value(val) is True
        for val in ['false', 'FALSE', 'no', 'off', '0']:
            assert ConfigLoader._parse_value(val) is False

    def test_parse_value_numbers(self):
        assert ConfigLoader._parse_value('42') == 42
        assert ConfigLoader._parse_value('-10') == -10
        assert ConfigLoader._parse_value('3.14') == pytest.approx(3.14)

    def test_parse_value_string(self):
        assert ConfigLoader._parse_value('reject') == 'reject'


class TestConfigLoaderTypedParsing:
    """Test parsing against the type of a default."""

    def test_int_literals(self):
        assert ConfigLoader._parse_value_with_type('42', 7) == 42
        assert ConfigLoader._parse_value_with_type('0xFF', 7) == 255
        assert ConfigLoader._parse_value_with_type('0b1010', 7) == 10

    def test_invalid_int_keeps_default(self):
        assert ConfigLoader._parse_value_with_type('invalid', 7) == 7

    def test_invalid_float_keeps_default(self):
        assert ConfigLoader._parse_value_with_type('invalid', 2.5) == 2.5

    def test_bool_and_str(self):
        assert ConfigLoader._parse_value_with_type('on', False) is True
        assert ConfigLoader._parse_value_with_type('nope', False) is False
        assert ConfigLoader._parse_value_with_type('text', 'x') == 'text'


class TestConfigLoaderLoad:
    """Test ConfigLoader.load."""

    def test_load_nonexistent_with_defaults(self, tmp_path):
        defaults = {'key': 'value'}
        assert ConfigLoader.load(tmp_path / 'missing.txt', defaults) == defaults

    def test_load_skips_comments_and_invalid_lines(self, tmp_path):
        path = tmp_path / 'config.txt'
        path.write_text("# header\n\nalpha = 1 # trailing\nnot a pair\nbeta = text\n")
        config = ConfigLoader.load(path)
        assert config == {'alpha': True, 'beta': 'text'}

    def test_strict_mode_ignores_unknown_keys(self, tmp_path):
        path = tmp_path / 'config.txt'
        path.write_text("known = 5\nunknown = 6\n")
        config = ConfigLoader.load(path, {'known': 1}, strict=True)
        assert config == {'known': 5}

    def test_defaults_are_not_mutated(self, tmp_path):
        path = tmp_path / 'config.txt'
        path.write_text("known = 5\n")
        defaults = {'known': 1}
        ConfigLoader.load(path, defaults)
        assert defaults == {'known': 1}
