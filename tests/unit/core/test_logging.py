"""
Tests for logging setup
"""
import importlib
import logging
from unittest.mock import patch

import pytest

import core.logging

pytestmark = pytest.mark.unit


@pytest.fixture
def root_handlers():
    """Restore the root logger after a test reconfigures it"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_import_keeps_host_handlers(self, root_handlers):
        host_handler = logging.NullHandler()
        root_handlers.addHandler(host_handler)

        importlib.reload(core.logging)
        importlib.import_module("lighthouse_audit")

        assert host_handler in root_handlers.handlers

    def test_setup_installs_single_handler(self, root_handlers):
        root_handlers.addHandler(logging.NullHandler())

        core.logging.setup_logging()

        assert len(root_handlers.handlers) == 1

    def test_json_format(self, root_handlers):
        with patch.object(core.logging.settings, "log_format", "json"):
            core.logging.setup_logging()

        assert isinstance(root_handlers.handlers[0].formatter, core.logging.CustomJsonFormatter)

    def test_cli_main_sets_up_logging(self):
        from core import cli

        with patch("core.cli.setup_logging") as mock_setup, patch("core.cli.cli") as mock_cli:
            cli.main()

        mock_setup.assert_called_once()
        mock_cli.assert_called_once()


class TestLoggerAdapter:
    def test_with_context_merges_extra(self):
        logger = core.logging.get_logger("tests.logging", domain="lighthouse")
        bound = logger.with_context(port=9222)

        assert bound.extra == {"domain": "lighthouse", "port": 9222}
        assert logger.extra == {"domain": "lighthouse"}
