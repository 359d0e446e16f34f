import logging

from runescape_api.config import Config


def test_defaults(monkeypatch) -> None:
    for name in ("RUNESCAPE_WEB_SERVICES_URL", "RUNESCAPE_TIMEOUT", "RUNESCAPE_USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    cfg = Config()

    assert cfg.web_services_url == "http://services.runescape.com"
    assert cfg.timeout == 10.0
    assert cfg.logging_level == logging.INFO
    assert cfg.validate() == []


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("RUNESCAPE_WEB_SERVICES_URL", "https://mirror.example.com/")
    monkeypatch.setenv("RUNESCAPE_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    cfg = Config()

    assert cfg.web_services_url == "https://mirror.example.com"
    assert cfg.timeout == 2.5
    assert cfg.logging_level == logging.DEBUG


def test_validate_reports_errors() -> None:
    cfg = Config(web_services_url="ftp://nope", timeout=0, user_agent="", log_level="LOUD")
    errors = cfg.validate()
    assert len(errors) == 4
