"""Tests for the environment variables that locate the configuration."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.product_api.runtime.settings import EnvironmentVariables


class TestEnvironmentVariables:
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

        assert env_vars.environment == "development"
        assert env_vars.config_file == Path("config.yaml")

    def test_values_from_environment(self):
        env = {"APP_ENVIRONMENT": "production", "APP_CONFIG_FILE": "/etc/app.yaml"}
        with patch.dict(os.environ, env, clear=True):
            env_vars = EnvironmentVariables(_env_file=None)

        assert env_vars.environment == "production"
        assert env_vars.config_file == Path("/etc/app.yaml")

    def test_unknown_environment_is_rejected(self):
        with patch.dict(os.environ, {"APP_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                EnvironmentVariables(_env_file=None)
