"""Unit tests for loguru configuration."""

import sys

import pytest
from loguru import logger

from case_consensus import load_config, setup_logging
from case_consensus.shared.logging_utils import get_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "engine.log"

        setup_logging(log_file=log_file, level=load_config().log_level)
        logger.info("Processing 3 cases...")
        logger.debug("not written at INFO")
        logger.remove()

        content = log_file.read_text()
        assert "Processing 3 cases..." in content
        assert "not written at INFO" not in content

    def test_console_only(self, capsys):
        setup_logging(level="WARNING")
        logger.warning("No source URL sentinels configured")

        assert "No source URL sentinels configured" in capsys.readouterr().err


class TestGetLogger:
    def test_binds_component(self):
        messages = []
        logger.remove()
        logger.add(messages.append, format="{extra[component]} | {message}")

        get_logger("case_consensus.relevance").info("scored")

        assert messages[0].strip() == "case_consensus.relevance | scored"
