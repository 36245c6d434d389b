"""
Logging setup tests
"""
import logging

import pytest

from transaction_scheduler.utils.logger import setup_logging


@pytest.fixture
def configure():
    """Run setup_logging and detach the handlers it installed afterwards"""
    root = logging.getLogger()
    level = root.level
    installed = []

    def _configure(*args, **kwargs):
        setup_logging(*args, **kwargs)
        installed.extend(root.handlers)
        return root

    yield _configure

    for handler in installed:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


class TestSetupLogging:

    def test_level_by_name(self, configure):
        root = configure("debug")
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)

    def test_file_handler(self, configure, tmp_path):
        log_file = tmp_path / "logs" / "scheduler.log"

        root = configure(logging.INFO, log_file)
        logging.getLogger("transaction_scheduler.test").info("scheduled")
        for handler in root.handlers:
            handler.flush()

        assert "scheduled" in log_file.read_text(encoding="utf-8")
