"""Tests for configuration loading."""
import pytest

from geo_coordinates.config import CONFIG_FILE_PATH, ConfigError, Settings, load_settings
from geo_coordinates.notation import CoordinateFormat


class TestLoadSettings:
    """Test TOML settings loading."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "missing.toml")
        assert settings == Settings()
        assert settings.format is CoordinateFormat.DD
        assert settings.dd_decimals == 6
        assert settings.dms_decimals == 3
        assert settings.strict is False

    def test_reads_values(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[output]\nformat = "DMS"\ndd_decimals = 4\ndms_decimals = 1\n\n[parsing]\nstrict = true\n',
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.format is CoordinateFormat.DMS
        assert settings.dd_decimals == 4
        assert settings.dms_decimals == 1
        assert settings.strict is True

    def test_unknown_format_falls_back_to_dd(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[output]\nformat = "utm"\n', encoding="utf-8")
        assert load_settings(path).format is CoordinateFormat.DD

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[output\nformat = ", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_bad_value(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[output]\ndd_decimals = "many"\n', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_shipped_config_matches_defaults(self):
        assert load_settings(CONFIG_FILE_PATH) == Settings()

    def test_decimals_for(self):
        settings = Settings(dd_decimals=5, dms_decimals=2)
        assert settings.decimals_for(CoordinateFormat.DD) == 5
        assert settings.decimals_for(CoordinateFormat.DMS) == 2

    @pytest.mark.parametrize("value", ['"false"', "0", '"yes"'])
    def test_strict_must_be_boolean(self, tmp_path, value):
        path = tmp_path / "config.toml"
        path.write_text(f"[parsing]\nstrict = {value}\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_settings(path)
