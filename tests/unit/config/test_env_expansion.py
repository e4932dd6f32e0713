"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from src.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test expansion of non-existent environment variable."""
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NONEXISTENT_VAR", None)
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested containers."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/app.log"},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log"}):
            config = {"logging": {"file_path": "$LOG_ROOT/patterns.log"}}
            assert expand_config_env_vars(config)["logging"]["file_path"] == "/var/log/patterns.log"
