"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
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
        monkeypatch.delenv("PANEL_WIDTH", raising=False)
        assert get_environment(EnvVar.PANEL_WIDTH) == 480

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("MCP_PORT", "9999")
        assert get_environment(EnvVar.MCP_PORT, override=5000) == 5000

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("PANEL_HEIGHT", "900")
        result = get_environment(EnvVar.PANEL_HEIGHT)
        assert result == 900
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean type conversion for true and false values."""
        for value in ("true", "1", "yes", "TRUE"):
            monkeypatch.setenv("MCP_VERBOSE", value)
            assert get_environment(EnvVar.MCP_VERBOSE) is True
        for value in ("false", "0", "no", "No"):
            monkeypatch.setenv("MCP_VERBOSE", value)
            assert get_environment(EnvVar.MCP_VERBOSE) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unparseable boolean falls back to default."""
        monkeypatch.setenv("MCP_VERBOSE", "maybe")
        assert get_environment(EnvVar.MCP_VERBOSE) is False

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("MCP_HOST", "127.0.0.1")
        assert get_environment(EnvVar.MCP_HOST) == "127.0.0.1"

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("PANEL_WIDTH", "wide")
        assert get_environment(EnvVar.PANEL_WIDTH) == 480


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


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """No category returns every variable."""
        assert list_environment_variables() == list(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter keeps only matching variables."""
        panel = list_environment_variables("panel")
        assert set(panel) == {EnvVar.PANEL_WIDTH, EnvVar.PANEL_HEIGHT}

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown category yields no variables."""
        assert list_environment_variables("nope") == []
