"""Tests for nestegg.core.utils.logging."""

import os

from loguru import logger

from nestegg.core.config import Config
from nestegg.core.utils.logging import configure_from_config, setup_logging


def test_file_output(tmp_dir):
    log_file = os.path.join(tmp_dir, "nestegg.log")
    setup_logging(level="info", log_file=log_file)
    try:
        logger.info("scenario saved")
        logger.debug("hidden")
    finally:
        logger.remove()

    with open(log_file) as f:
        contents = f.read()
    assert "scenario saved" in contents
    assert "hidden" not in contents


def test_unknown_level_falls_back(tmp_dir):
    log_file = os.path.join(tmp_dir, "nestegg.log")
    setup_logging(level="chatty", log_file=log_file)
    try:
        logger.warning("kept")
        logger.info("dropped")
    finally:
        logger.remove()

    with open(log_file) as f:
        contents = f.read()
    assert "kept" in contents
    assert "dropped" not in contents


def test_configure_from_config_relative_file(tmp_dir):
    config = Config(data_dir=tmp_dir, defaults={"logging": {"level": "INFO", "file": "cli.log"}})
    configure_from_config(config)
    try:
        logger.info("from config")
    finally:
        logger.remove()

    with open(os.path.join(tmp_dir, "logs", "cli.log")) as f:
        assert "from config" in f.read()
