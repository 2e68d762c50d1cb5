"""Unit tests for wavstat.api.config.WavstatConfig module."""

import pytest

from wavstat.api.config import LogConfig, ScanConfig, WavstatConfig

pytestmark = pytest.mark.config


class TestWavstatConfig:
    """Test loading WavstatConfig from WAVSTAT_HOME."""

    def test_home_dir_from_env(self, wavstat_home):
        assert WavstatConfig.get_home_dir() == wavstat_home.resolve()
        assert WavstatConfig.get_config_path() == wavstat_home.resolve() / "config.json"
        assert WavstatConfig.get_logfile_path() == wavstat_home.resolve() / "wavstat.log"

    def test_home_dir_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("WAVSTAT_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert WavstatConfig.get_home_dir() == tmp_path / ".wavstat"

    def test_missing_file_uses_defaults(self):
        config = WavstatConfig.load()
        assert config.scan.extensions == [".wav"]
        assert config.scan.follow_symlinks is False
        assert config.log.level == "WARNING"
        assert config.log.file is True

    def test_load_partial_file(self, write_config):
        write_config({"log": {"level": "DEBUG", "file": False}})
        config = WavstatConfig.load()
        assert config.log.level == "DEBUG"
        assert config.log.file is False
        assert config.scan == ScanConfig()

    def test_invalid_json(self, wavstat_home):
        (wavstat_home / "config.json").write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            WavstatConfig.load()

    def test_non_object_json(self, write_config):
        write_config(["scan"])  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="must be an object"):
            WavstatConfig.load()

    def test_unknown_section_rejected(self, write_config):
        write_config({"monitor": {}})
        with pytest.raises(ValueError, match="Configuration validation error: monitor"):
            WavstatConfig.load()

    def test_invalid_level_rejected(self, write_config):
        write_config({"log": {"level": "LOUD"}})
        with pytest.raises(ValueError, match="log.level"):
            WavstatConfig.load()

    def test_to_dict_round_trip(self):
        config = WavstatConfig(scan=ScanConfig(extensions=[".WAV", "wave"]), log=LogConfig(level="INFO"))
        assert WavstatConfig(**config.to_dict()) == config


class TestScanConfig:
    """Test ScanConfig extension normalization."""

    def test_extensions_normalized(self):
        assert ScanConfig(extensions=["WAV", " .Wave "]).extensions == [".wav", ".wave"]

    @pytest.mark.parametrize("extensions", [[], [""], ["."]])
    def test_empty_extensions_rejected(self, extensions):
        with pytest.raises(ValueError):
            ScanConfig(extensions=extensions)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValueError):
            ScanConfig(recursive=False)
