import pytest

from shared.config import GaugeConfig, get_config


def test_defaults():
    config = GaugeConfig()
    assert config.generator.default_length == 16
    assert config.meter.full_scale_bits == 200.0
    assert config.meter.min_percent == 6
    assert config.global_settings.output_format == "console"
    assert set(config.to_dict()) == {"global_settings", "meter", "generator"}


def test_load_toml_ignores_unknown_keys(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "[meter]\n"
        "min_percent = 10\n"
        "mask_password = false\n"
        "[generator]\n"
        "default_length = 24\n"
        "colour = \"blue\"\n"
        "[unknown]\n"
        "x = 1\n",
        encoding="utf-8",
    )
    config = GaugeConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.meter.min_percent == 10
    assert config.meter.mask_password is False
    assert config.meter.width == 40
    assert config.generator.default_length == 24


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        GaugeConfig.load(tmp_path / "nope.toml")


def test_get_config_caches(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text("[generator]\ncount = 3\n", encoding="utf-8")
    loaded = get_config(path)
    assert loaded.generator.count == 3
    assert get_config() is loaded
