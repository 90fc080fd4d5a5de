"""
Tests for configuration classes and environment validation.
"""

import pytest
from unittest.mock import patch

from config import (
    REQUIRED_ENV_VARS,
    Config,
    DevConfig,
    ProdConfig,
    TestConfig,
    config,
    validate_required_env_vars,
)


class TestValidateRequiredEnvVars:
    """Tests for validate_required_env_vars."""

    def test_all_present(self):
        env = {name: "value" for name in REQUIRED_ENV_VARS}
        with patch.dict("os.environ", env, clear=True):
            validate_required_env_vars()

    def test_lists_every_missing_variable(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError) as exc_info:
                validate_required_env_vars()
        for name in REQUIRED_ENV_VARS:
            assert name in str(exc_info.value)

    def test_empty_value_counts_as_missing(self):
        env = {name: "value" for name in REQUIRED_ENV_VARS}
        env["GEMINI_API_KEY"] = ""
        with patch.dict("os.environ", env, clear=True):
            with pytest.raises(ValueError, match="GEMINI_API_KEY"):
                validate_required_env_vars()


class TestConfigClasses:
    """Tests for the config classes."""

    def test_mapping(self):
        assert config["development"] is DevConfig
        assert config["production"] is ProdConfig
        assert config["testing"] is TestConfig
        assert config["default"] is DevConfig

    def test_auth_state_defaults(self):
        assert Config.AUTH_STATE_COOKIE == "spotify_auth_state"
        assert Config.AUTH_STATE_TTL > 0

    def test_production_cookie_is_secure(self):
        assert ProdConfig.AUTH_STATE_COOKIE_SECURE is True
        assert DevConfig.AUTH_STATE_COOKIE_SECURE is False

    def test_testing_config(self):
        assert TestConfig.TESTING is True
        assert TestConfig.REDIS_URL is None
        assert TestConfig.SPOTIFY_CLIENT_ID
        assert TestConfig.GEMINI_API_KEY

    def test_search_defaults(self):
        assert TestConfig.SEARCH_RESULTS_PER_QUERY == 5
