"""Unit tests for the context-scoped configuration."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_test_environment_is_active(self):
        assert get_config().app.environment == "test"

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_unset_fields_are_inherited(self):
        """Fields not set on the override keep the enclosing values."""
        original = get_config()

        override = ConfigData()
        override.logging.level = "ERROR"

        with with_context(override):
            merged = get_config()
            assert merged.logging.level == "ERROR"
            assert merged.database.url == original.database.url
            assert merged.app.environment == original.app.environment

    def test_nested_overrides(self):
        level1 = ConfigData()
        level1.app.port = 8001

        with with_context(level1):
            level2 = ConfigData()
            level2.app.host = "level2_host"

            with with_context(level2):
                config = get_config()
                assert config.app.port == 8001
                assert config.app.host == "level2_host"

            assert get_config().app.host != "level2_host"
            assert get_config().app.port == 8001

    def test_none_override_is_noop(self):
        original = get_config()
        with with_context(None):
            assert get_config() is original

    def test_rejects_non_config_override(self):
        with pytest.raises(ValueError):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_override_is_not_visible_to_other_threads(self):
        override = ConfigData()
        override.app.host = "thread_local_host"

        with with_context(override):
            with ThreadPoolExecutor(max_workers=1) as pool:
                seen = pool.submit(lambda: get_config().app.host).result()

        assert seen != "thread_local_host"

    def test_set_config_replaces_current_config(self):
        original = get_config()
        replacement = ConfigData()
        replacement.app.name = "replaced"

        with with_context(ConfigData()):
            set_config(replacement)
            assert get_config().app.name == "replaced"

        assert get_config() is original
