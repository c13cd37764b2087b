#!filepath: tests/base_test/test_app_config.py
import yaml
import pytest
from pydantic import ValidationError

from wallclock.config import AppConfig, AmbiguityPolicy
from wallclock.config.log_config import LogConfig
from wallclock.config.resolver_config import ResolverConfig
from wallclock.config.display_config import DisplayConfig


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG"
        },
        "resolver": {
            "max_iterations": 5,
            "observer_zone": "Europe/Berlin",
            "ambiguity": "later"
        },
        "display": {
            "hour12": True,
            "time_step_minutes": 30,
            "search_limit": 20,
            "default_source_zone": "Asia/Tokyo",
            "default_target_zone": "Europe/London"
        }
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.resolver, ResolverConfig)
    assert isinstance(cfg.display, DisplayConfig)


def test_resolver_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.resolver.max_iterations == 5
    assert cfg.resolver.observer_zone == "Europe/Berlin"
    assert cfg.resolver.ambiguity is AmbiguityPolicy.LATER


def test_display_and_log_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.display.hour12 is True
    assert cfg.display.time_step_minutes == 30
    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir is None


def test_packaged_defaults():
    """不传 path 时读取包内 base.yml"""
    cfg = AppConfig.load()

    assert cfg.resolver.max_iterations == 3
    assert cfg.resolver.observer_zone == "UTC"
    assert cfg.resolver.ambiguity is AmbiguityPolicy.EARLIER
    assert cfg.display.search_limit == 100


def test_env_overrides_observer_zone(sample_config_file, monkeypatch):
    monkeypatch.setenv("WALLCLOCK_OBSERVER_ZONE", "Asia/Kolkata")
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.resolver.observer_zone == "Asia/Kolkata"


def test_missing_sections_use_defaults(tmp_path):
    partial = tmp_path / "partial.yaml"
    partial.write_text(yaml.safe_dump({"log": {"level": "INFO"}}), encoding="utf-8")

    cfg = AppConfig.load(path=str(partial))
    assert cfg.log.level == "INFO"
    assert cfg.resolver == ResolverConfig()


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize("resolver", [
    {"max_iterations": 0},
    {"ambiguity": "random"},
])
def test_invalid_resolver_section_should_fail(tmp_path, resolver):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"resolver": resolver}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))
