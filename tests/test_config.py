import logging

from form_fields.config import configure_logging, load_settings


def test_defaults():
    s = load_settings()
    assert s.log_level == "WARNING"
    assert s.strict_types is False
    assert s.max_batch == 64
    assert s.http_log is False
    assert s.http_log_body_max_bytes == 4096


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FORM_FIELDS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FORM_FIELDS_STRICT_TYPES", "yes")
    monkeypatch.setenv("FORM_FIELDS_MAX_BATCH", "0")
    monkeypatch.setenv("FORM_FIELDS_HTTP_LOG_BODY_MAX_BYTES", "not-a-number")
    s = load_settings()
    assert s.log_level == "DEBUG"
    assert s.strict_types is True
    assert s.max_batch == 1
    assert s.http_log_body_max_bytes == 4096


def test_configure_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("FORM_FIELDS_LOG_LEVEL", "INFO")
    configure_logging()
    assert logging.getLogger("form_fields").level == logging.INFO
    monkeypatch.setenv("FORM_FIELDS_LOG_LEVEL", "bogus")
    configure_logging()
    assert logging.getLogger("form_fields").level == logging.WARNING
