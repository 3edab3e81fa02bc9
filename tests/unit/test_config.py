"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from docstore.config import load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run each test away from any real config.yaml."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.data_file == "documents.yaml"
    assert settings.log_level == "WARNING"


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml override the defaults."""
    (tmp_path / "config.yaml").write_text("data_file: seed.yaml\n")
    assert load_config().data_file == "seed.yaml"


def test_load_config_uses_env_data_file(monkeypatch):
    """DOCSTORE_DATA_FILE env var is picked up by load_config."""
    monkeypatch.setenv("DOCSTORE_DATA_FILE", "env.yaml")
    assert load_config().data_file == "env.yaml"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """DOCSTORE_LOG_LEVEL takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("log_level: INFO\n")
    monkeypatch.setenv("DOCSTORE_LOG_LEVEL", "DEBUG")
    assert load_config().log_level == "DEBUG"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("DOCSTORE_DATA_FILE", "env.yaml")
    settings = load_config(overrides={"data_file": "cli.yaml"})
    assert settings.data_file == "cli.yaml"


def test_load_config_none_override_ignored(monkeypatch):
    """A None CLI override leaves the env value in place."""
    monkeypatch.setenv("DOCSTORE_DATA_FILE", "env.yaml")
    assert load_config(overrides={"data_file": None}).data_file == "env.yaml"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_unknown_log_level():
    """An unknown log level fails validation."""
    with pytest.raises(ValidationError):
        load_config(overrides={"log_level": "LOUD"})


@pytest.mark.parametrize("source", ["yaml", "env", "override"])
def test_load_config_log_level_case_insensitive(tmp_path, monkeypatch, source):
    """log_level is upper-cased whether it comes from config.yaml, env, or a CLI override."""
    overrides = None
    if source == "yaml":
        (tmp_path / "config.yaml").write_text("log_level: debug\n")
    elif source == "env":
        monkeypatch.setenv("DOCSTORE_LOG_LEVEL", "debug")
    else:
        overrides = {"log_level": "Debug"}
    assert load_config(overrides=overrides).log_level == "DEBUG"


def test_load_config_rejects_non_mapping_yaml(tmp_path):
    """config.yaml must hold a mapping of settings."""
    (tmp_path / "config.yaml").write_text("- data_file\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()
