import importlib
import json
import logging

import pytest


@pytest.fixture
def reload_config(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    def _reload():
        config = importlib.import_module("shared.config")
        monkeypatch.setattr(config, "BASE_DIR", tmp_path)
        return config.Settings()

    return _reload


def test_defaults_point_to_production_service(monkeypatch, reload_config):
    for key in ("BCB_WSDL_URL", "BCB_DEFAULT_INDEX", "BCB_TIMEOUT", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    settings = reload_config()
    assert settings.BCB_WSDL_URL == "https://www3.bcb.gov.br/sgspub/JSP/sgsgeral/FachadaWSSGS.wsdl"
    assert settings.BCB_DEFAULT_INDEX == 189
    assert settings.BCB_TIMEOUT == 30.0
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "plain"


def test_env_overrides_config_file(monkeypatch, tmp_path, reload_config):
    (tmp_path / "config.json").write_text(
        json.dumps({"BCB_WSDL_URL": "http://file.test/wsdl", "BCB_DEFAULT_INDEX": 188}),
        encoding="utf-8",
    )
    monkeypatch.delenv("BCB_WSDL_URL", raising=False)
    monkeypatch.setenv("BCB_DEFAULT_INDEX", "433")
    settings = reload_config()
    assert settings.BCB_WSDL_URL == "http://file.test/wsdl"
    assert settings.BCB_DEFAULT_INDEX == 433


def test_invalid_numbers_fall_back_to_defaults(monkeypatch, reload_config, caplog):
    monkeypatch.setenv("BCB_DEFAULT_INDEX", "-3")
    monkeypatch.setenv("BCB_TIMEOUT", "soon")
    with caplog.at_level(logging.WARNING, logger="shared.config"):
        settings = reload_config()
    assert settings.BCB_DEFAULT_INDEX == 189
    assert settings.BCB_TIMEOUT == 30.0
    assert "BCB_TIMEOUT" in caplog.text


def test_configure_logging_json(monkeypatch):
    config = importlib.import_module("shared.config")
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        config.configure_logging(level="debug", json_format=True)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, config.JsonFormatter)
        assert logging.getLogger("zeep").level == logging.WARNING

        record = logging.LogRecord("bcb", logging.INFO, __file__, 1, "hola %s", ("mundo",), None)
        payload = json.loads(root.handlers[0].formatter.format(record))
        assert payload["message"] == "hola mundo"
        assert payload["level"] == "INFO"
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)


def test_configure_logging_invalid_level_defaults_to_info():
    config = importlib.import_module("shared.config")
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        config.configure_logging(level="verbose", json_format=False)
        assert root.level == logging.INFO
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
