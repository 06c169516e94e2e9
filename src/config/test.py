"""Tests for configuration management."""

from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_check_level,
    get_environment,
    get_environment_info,
    get_guide_format,
    get_migration_strategy,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("MCP_PORT", raising=False)
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 18080

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MCP_PORT", "9999")
        result = get_environment(EnvVar.MCP_PORT, override=5000)
        assert result == 5000

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("MCP_PORT", "12345")
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 12345
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("MCP_PORT", "not-a-number")
        result = get_environment(EnvVar.MCP_PORT)
        assert result == 18080

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        result = get_environment(EnvVar.LOG_LEVEL)
        assert result == "DEBUG"

    @pytest.mark.unit
    def test_path_type_conversion(self, monkeypatch, tmp_path):
        """Path variables are converted to Path objects."""
        monkeypatch.setenv("PROJECT_ROOT", str(tmp_path))
        result = get_environment(EnvVar.PROJECT_ROOT)
        assert isinstance(result, Path)
        assert result == tmp_path

    @pytest.mark.unit
    def test_none_default_for_project_root(self, monkeypatch):
        """Project root defaults to None when not set."""
        monkeypatch.delenv("PROJECT_ROOT", raising=False)
        assert get_environment(EnvVar.PROJECT_ROOT) is None


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.MCP_PORT)
        assert isinstance(info, EnvConfig)
        assert info.name == "MCP_PORT"
        assert info.default == 18080
        assert info.var_type is int
        assert info.category == "service"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.MIGRATION_STRATEGY)
        assert "strategy" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        migration_vars = list_environment_variables("migration")
        assert EnvVar.MIGRATION_STRATEGY in migration_vars
        assert EnvVar.VALIDATION_CHECK_LEVEL in migration_vars
        assert EnvVar.MCP_PORT not in migration_vars


class TestMigrationDefaults:
    """Tests for migration convenience getters."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        """Defaults match the documented tool defaults."""
        for name in ("MIGRATION_STRATEGY", "VALIDATION_CHECK_LEVEL", "GUIDE_OUTPUT_FORMAT"):
            monkeypatch.delenv(name, raising=False)
        assert get_migration_strategy() == "conservative"
        assert get_check_level() == "full"
        assert get_guide_format() == "markdown"

    @pytest.mark.unit
    def test_env_values_are_lowercased(self, monkeypatch):
        """Environment values are normalized to lower case."""
        monkeypatch.setenv("MIGRATION_STRATEGY", "Aggressive")
        monkeypatch.setenv("VALIDATION_CHECK_LEVEL", "SYNTAX")
        assert get_migration_strategy() == "aggressive"
        assert get_check_level() == "syntax"

    @pytest.mark.unit
    def test_override_wins(self, monkeypatch):
        """Explicit overrides bypass the environment."""
        monkeypatch.setenv("GUIDE_OUTPUT_FORMAT", "html")
        assert get_guide_format("json") == "json"
