"""Tests for freewrite.core.utils.logging."""

import os
import sys

import pytest
from loguru import logger

from freewrite.core.config import Config
from freewrite.core.utils.logging import resolve_log_file, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    for key in list(os.environ):
        if key.startswith("FREEWRITE_"):
            monkeypatch.delenv(key)
    yield
    logger.remove()
    logger.add(sys.stderr)


def _config(tmp_dir, **logging_section):
    config = Config(data_dir=tmp_dir)
    for key, value in logging_section.items():
        config.set(f"logging.{key}", value)
    return config


class TestResolveLogFile:
    def test_disabled_by_default(self, tmp_dir):
        assert resolve_log_file(_config(tmp_dir)) is None

    def test_bare_name_goes_to_log_dir(self, tmp_dir):
        config = _config(tmp_dir, file="freewrite.log")
        assert resolve_log_file(config) == os.path.join(tmp_dir, "logs", "freewrite.log")

    def test_path_kept(self, tmp_dir):
        path = os.path.join(tmp_dir, "elsewhere", "app.log")
        assert resolve_log_file(_config(tmp_dir, file=path)) == path


class TestSetupLogging:
    def test_file_sink_receives_messages(self, tmp_dir):
        config = _config(tmp_dir, file="freewrite.log", level="info")
        log_file = setup_logging(config)

        logger.debug("hidden detail")
        logger.info("entry saved")
        logger.remove()  # closes the file sink

        with open(log_file, encoding="utf-8") as f:
            text = f.read()
        assert "| INFO |" in text
        assert "entry saved" in text
        assert "hidden detail" not in text

    def test_verbose_only_affects_console(self, tmp_dir, capsys):
        config = _config(tmp_dir, file="freewrite.log", level="WARNING")
        log_file = setup_logging(config, verbose=True)

        logger.debug("console only")
        logger.remove()

        assert "[DEBUG] console only" in capsys.readouterr().err
        with open(log_file, encoding="utf-8") as f:
            assert "console only" not in f.read()

    def test_console_respects_level(self, tmp_dir, capsys):
        assert setup_logging(_config(tmp_dir, level="ERROR")) is None
        logger.warning("quiet")
        logger.error("loud")
        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "[ERROR] loud" in err
