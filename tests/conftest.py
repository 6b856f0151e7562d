"""Test configuration shared by every test module."""

import os

# Must be set before anything under src is imported: the default
# configuration is loaded once at import time.
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_FILE"] = ""
os.environ["LOG_LEVEL"] = "DEBUG"

from tests.fixtures import *  # noqa: E402,F401,F403
