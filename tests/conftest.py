"""Global pytest configuration for all tests."""

import os


def pytest_configure(config):
    """Set environment variables before any forumwatch module is imported."""
    os.environ.setdefault("LOG_LEVEL", "DEBUG")
    os.environ["DRY_RUN"] = "false"
    os.environ["LOG_TO_FILE"] = "false"
