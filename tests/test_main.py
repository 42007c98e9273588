"""
Tests for the command line entry point
"""
import logging

import pytest

from LOGMON import main as main_module
from LOGMON.app_logging import LOG_FILE_NAME, configure_logging
from LOGMON.core.config import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Drop handlers the entry point attaches to the package logger"""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    logger = logging.getLogger('LOGMON')
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])
    assert args.log_path is None
    assert args.max_entries is None
    assert args.live_filter is None
    assert args.debug is False


def test_parser_options():
    args = main_module.build_parser().parse_args(
        ["app.log", "--max-entries", "5", "--interval", "1.5", "--no-live-filter"]
    )
    assert args.log_path == "app.log"
    assert args.max_entries == 5
    assert args.poll_interval == 1.5
    assert args.live_filter is False


def test_missing_file_exits_with_error(tmp_path, capsys):
    code = main_module.main([str(tmp_path / "missing.log"), "--log-dir", str(tmp_path / "logs")])
    assert code == 1
    assert "Cannot read log file" in capsys.readouterr().err
    assert "Startup failed" in (tmp_path / "logs" / LOG_FILE_NAME).read_text()


def test_invalid_settings(tmp_path, capsys):
    code = main_module.main([str(tmp_path / "app.log"), "--max-entries", "0"])
    assert code == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_runs_app_with_loaded_monitor(tmp_path, monkeypatch):
    log_file = tmp_path / "app.log"
    log_file.write_text("one\ntwo\n")
    started = []
    monkeypatch.setattr(main_module, "run_app", started.append)

    code = main_module.main([str(log_file), "--initial-lines", "1", "--log-dir", str(tmp_path / "logs")])
    assert code == 0
    monitor, = started
    assert [e.content for e in monitor.entries] == ["two"]


def test_configure_logging_is_idempotent(tmp_path):
    logger = configure_logging(tmp_path)
    configure_logging(tmp_path)
    assert len(logger.handlers) == 1
    logger.info("hello")
    logger.handlers[0].flush()
    assert " - LOGMON - INFO - hello" in (tmp_path / LOG_FILE_NAME).read_text()
