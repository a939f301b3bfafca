import logging
import subprocess
import sys

from sexpand.utils import click as sexpand_click
from sexpand.utils.config import SETTINGS, Settings, getenv
from sexpand.utils.logger import LOGGER, LogFormatter, get_logger, resolve_level


def test_getenv_default(monkeypatch):
    monkeypatch.delenv("SEXPAND_TEST_UNSET", raising=False)
    assert getenv("SEXPAND_TEST_UNSET", "fallback") == "fallback"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SEXPAND_DEBUG", "1")
    monkeypatch.setenv("SEXPAND_RICH_TRACEBACK", "0")
    settings = Settings.from_env()
    assert settings.debug is True
    assert settings.rich_traceback is False


def test_settings_override_keeps_unset_values():
    settings = Settings(debug=True, rich_traceback=False)
    settings.override(debug=None, rich_traceback=True)
    assert settings == Settings(debug=True, rich_traceback=True)
    settings.override(debug=False)
    assert settings.debug is False


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level("verbose") is None


def test_get_logger_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("SEXPAND_LOG_LEVEL", "verbose")
    logger = get_logger("sexpand.tests.unknown_level")
    assert logger.level == logging.WARNING


def test_get_logger_level_from_env(monkeypatch):
    monkeypatch.setenv("SEXPAND_LOG_LEVEL", "info")
    logger = get_logger("sexpand.tests.info_level")
    assert logger.level == logging.INFO
    assert len(get_logger("sexpand.tests.info_level").handlers) == 1


def test_logger_has_own_handler():
    assert not LOGGER.propagate
    assert any(isinstance(h.formatter, LogFormatter) for h in LOGGER.handlers)


def test_log_formatter_colors_by_level():
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
    formatted = LogFormatter().format(record)
    assert formatted.startswith(LogFormatter.COLORS[logging.ERROR])
    assert formatted.endswith(LogFormatter.RESET)
    assert "ERROR - boom" in formatted


def test_excepthook_prints_plain_traceback(capsys, monkeypatch):
    monkeypatch.setattr(SETTINGS, "debug", False)
    monkeypatch.setattr(SETTINGS, "rich_traceback", False)
    sexpand_click.excepthook(ValueError, ValueError("boom"), None)
    assert "ValueError: boom" in capsys.readouterr().err


def test_packages_import_in_fresh_interpreter():
    result = subprocess.run(
        [sys.executable, "-c", "import sexpand.utils, sexpand.cli.main"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
