import logging

import pytest

from vamsa_gedcom.config import (
    CONFIG_ENV_VAR,
    DEFAULTS,
    get_config,
    load_config,
    reset_config,
)
from vamsa_gedcom.core.exceptions import ConfigError
from vamsa_gedcom.logging import get_logger, list_active_loggers


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


def test_load_config_merges_partial_sections(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text(
        "debug: true\n"
        "validation:\n"
        "  absolute_path_is_error: true\n"
        "export:\n"
        "  max_line_length: 120\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.debug is True
    assert cfg.validation["absolute_path_is_error"] is True
    assert cfg.validation["media_base_dir"] is None
    assert cfg.export["max_line_length"] == 120
    assert cfg.export["source_program"] == DEFAULTS["export"]["source_program"]
    assert cfg.pipeline == DEFAULTS["pipeline"]


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.debug is False
    assert cfg.logging["level"] == "INFO"


def test_explicit_missing_config_is_an_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_non_mapping_config_is_rejected(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_env_var_selects_config(tmp_path, monkeypatch):
    path = tmp_path / "env.yml"
    path.write_text("pipeline:\n  skip_validation: true\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()
    assert cfg.pipeline["skip_validation"] is True
    assert get_config() is cfg


def test_get_logger_nests_under_package_namespace():
    log = get_logger("some_module")
    assert log.name == "vamsa_gedcom.some_module"
    assert log.propagate is True
    assert "vamsa_gedcom.some_module" in list_active_loggers()

    same = get_logger("vamsa_gedcom.some_module")
    assert same is log
    assert isinstance(log, logging.Logger)
