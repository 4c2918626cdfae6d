"""Unit tests for the APPLY_MIGRATIONS decision."""

import pytest

from hostel_service.config import Settings
from hostel_service.startup.migrations import MigrationPolicy, parse_override


class TestParseOverride:
    """Tests for reading the raw flag."""

    @pytest.mark.parametrize("raw", ["true", "True", "TRUE", "  true  "])
    def test_true(self, raw: str) -> None:
        assert parse_override(raw) is True

    @pytest.mark.parametrize("raw", ["false", "False", " FALSE"])
    def test_false(self, raw: str) -> None:
        assert parse_override(raw) is False

    @pytest.mark.parametrize("raw", [None, "", "   ", "yes", "1", "0", "maybe"])
    def test_absent_or_unparseable(self, raw) -> None:
        assert parse_override(raw) is None


class TestMigrationPolicy:
    """Tests for the run-or-skip decision."""

    def test_defaults_to_run_in_development(self) -> None:
        assert MigrationPolicy(override=None, environment_is_development=True).should_run is True

    def test_defaults_to_skip_outside_development(self) -> None:
        assert MigrationPolicy(override=None, environment_is_development=False).should_run is False

    @pytest.mark.parametrize("override", [True, False])
    @pytest.mark.parametrize("is_dev", [True, False])
    def test_override_wins(self, override: bool, is_dev: bool) -> None:
        policy = MigrationPolicy(override=override, environment_is_development=is_dev)
        assert policy.should_run is override


class TestFromSettings:
    """Tests for building the policy from a settings snapshot."""

    def test_absent_flag_in_development(self) -> None:
        policy = MigrationPolicy.from_settings(Settings(environment="Development"))
        assert policy.override is None
        assert policy.environment_is_development is True
        assert policy.should_run is True

    def test_absent_flag_in_production(self) -> None:
        policy = MigrationPolicy.from_settings(Settings(environment="Production"))
        assert policy.should_run is False

    def test_true_flag_in_production(self) -> None:
        policy = MigrationPolicy.from_settings(Settings(environment="Production", apply_migrations="true"))
        assert policy.should_run is True

    def test_false_flag_in_development(self) -> None:
        policy = MigrationPolicy.from_settings(Settings(environment="Development", apply_migrations="false"))
        assert policy.should_run is False

    def test_unparseable_flag_uses_environment(self) -> None:
        policy = MigrationPolicy.from_settings(Settings(environment="Staging", apply_migrations="sometimes"))
        assert policy.override is None
        assert policy.should_run is False

    def test_flag_read_from_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPLY_MIGRATIONS", "true")
        policy = MigrationPolicy.from_settings(Settings(environment="Production"))
        assert policy.should_run is True

    def test_environment_name_is_case_insensitive(self) -> None:
        assert MigrationPolicy.from_settings(Settings(environment="development")).should_run is True
