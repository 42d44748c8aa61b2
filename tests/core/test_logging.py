"""Tests for daybook.core.utils.logging."""

import os
import sys

import pytest
from loguru import logger

from daybook.core.config import Config
from daybook.core.utils.logging import configure_logging, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_messages(tmp_dir):
    log_file = os.path.join(tmp_dir, "daybook.log")
    setup_logging(level="info", log_file=log_file)
    logger.info("journal opened")
    logger.debug("too chatty")
    logger.remove()  # flush and close the file sink

    with open(log_file) as f:
        content = f.read()
    assert "journal opened" in content
    assert "too chatty" not in content


def test_configure_from_config(tmp_dir):
    log_file = os.path.join(tmp_dir, "from-config.log")
    config = Config(data_dir=tmp_dir)
    config.set("logging.file", log_file)

    configure_logging(config, verbose=True)
    logger.debug("debug enabled by verbose")
    logger.remove()

    with open(log_file) as f:
        assert "debug enabled by verbose" in f.read()
