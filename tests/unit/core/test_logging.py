"""Tests for logging helpers."""

from __future__ import annotations

import logging

import pytest

from javaprobe.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers = handlers


class TestConfigureLogging:
    """Tests for configure_logging precedence."""

    @pytest.mark.parametrize(
        "flags, expected",
        [
            ({}, logging.WARNING),
            ({"verbose": True}, logging.INFO),
            ({"debug": True}, logging.DEBUG),
            ({"debug": True, "verbose": True}, logging.DEBUG),
            ({"quiet": True, "debug": True}, logging.ERROR),
        ],
    )
    def test_levels(self, flags, expected) -> None:
        configure_logging(**flags)
        assert logging.getLogger().level == expected


class TestGetLogger:
    """Tests for get_logger."""

    def test_default_namespace(self) -> None:
        assert get_logger().name == "javaprobe"

    def test_named(self) -> None:
        assert get_logger("javaprobe.probe").name == "javaprobe.probe"
