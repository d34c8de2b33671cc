import pytest
from pydantic import ValidationError

from zerodi import Registry, RegistryConfig, load_config


def test_defaults():
    cfg = RegistryConfig()
    assert cfg.name == "registry"
    assert cfg.check_types is True
    assert cfg.log_level == "INFO"


def test_load_config_from_yaml(tmp_path):
    p = tmp_path / "registry.yaml"
    p.write_text("name: app\ncheck_types: false\nlog_level: DEBUG\n", encoding="utf-8")
    cfg = load_config(str(p))
    assert cfg == RegistryConfig(name="app", check_types=False, log_level="DEBUG")


def test_empty_yaml_gives_defaults(tmp_path):
    p = tmp_path / "registry.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(str(p)) == RegistryConfig()


def test_unknown_keys_rejected(tmp_path):
    p = tmp_path / "registry.yaml"
    p.write_text("lifetime: singleton\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(str(p))


def test_registry_from_yaml(tmp_path):
    p = tmp_path / "registry.yaml"
    p.write_text("name: app\ncheck_types: false\n", encoding="utf-8")
    reg = Registry.from_yaml(str(p))
    assert reg.config.name == "app"
    reg.register(int, lambda r: "not an int")
    assert reg.resolve(int) == "not an int"


def test_log_level_from_yaml_controls_registry_logging(tmp_path, caplog):
    p = tmp_path / "registry.yaml"
    p.write_text("name: app\nlog_level: DEBUG\n", encoding="utf-8")
    reg = Registry.from_yaml(str(p))
    reg.register(int, lambda r: 1)
    assert "[app] registered 'builtins.int'" in [rec.getMessage() for rec in caplog.records]

    caplog.clear()
    quiet = Registry(RegistryConfig(name="quiet"))
    quiet.register(int, lambda r: 1)
    assert not [rec for rec in caplog.records if rec.name == "zerodi.core.registry"]
