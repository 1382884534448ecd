"""Unit tests for budget configuration, loading and settings."""

from pathlib import Path

import pytest
import structlog
import yaml
from pydantic import ValidationError

from src.config.loader import ConfigValidationError, load_budgets_config
from src.prioritize.config import BudgetsConfig
from src.settings import AppSettings


class TestBudgetsConfig:
    """Tests for BudgetsConfig."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Defaults are five total, two unknown-location."""
        config = BudgetsConfig()
        assert config.total_limit == 5
        assert config.unknown_location_limit == 2

    @pytest.mark.unit
    def test_zero_budgets_allowed(self) -> None:
        """Zero budgets are valid."""
        config = BudgetsConfig(total_limit=0, unknown_location_limit=0)
        assert config.total_limit == 0

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fields",
        [
            {"total_limit": -1},
            {"unknown_location_limit": -1},
            {"total_limit": 1, "unknown_location_limit": 2},
            {"extra_field": 1},
        ],
    )
    def test_invalid(self, fields: dict[str, int]) -> None:
        """Negative, inconsistent or unknown fields are rejected."""
        with pytest.raises(ValidationError):
            BudgetsConfig.model_validate(fields)

    @pytest.mark.unit
    def test_frozen(self) -> None:
        """Config is immutable."""
        config = BudgetsConfig()
        with pytest.raises(ValidationError):
            config.total_limit = 9  # type: ignore[misc]


class TestLoadBudgetsConfig:
    """Tests for load_budgets_config."""

    @pytest.mark.unit
    def test_loads_valid_file(self, tmp_path: Path) -> None:
        """A valid YAML file is parsed into BudgetsConfig."""
        path = tmp_path / "budgets.yaml"
        path.write_text("total_limit: 8\nunknown_location_limit: 3\n")
        config = load_budgets_config(path)
        assert config == BudgetsConfig(total_limit=8, unknown_location_limit=3)

    @pytest.mark.unit
    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """An empty file yields the defaults."""
        path = tmp_path / "budgets.yaml"
        path.write_text("")
        assert load_budgets_config(path) == BudgetsConfig()

    @pytest.mark.unit
    def test_schema_error(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigValidationError with details."""
        path = tmp_path / "budgets.yaml"
        path.write_text("total_limit: -3\n")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_budgets_config(path)
        assert exc_info.value.file_path == str(path)
        assert exc_info.value.errors[0]["loc"] == "total_limit"

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_budgets_config(tmp_path / "missing.yaml")

    @pytest.mark.unit
    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML raises yaml.YAMLError."""
        path = tmp_path / "budgets.yaml"
        path.write_text("total_limit: [1, 2\n")
        with pytest.raises(yaml.YAMLError):
            load_budgets_config(path)


class TestAppSettings:
    """Tests for AppSettings budget resolution."""

    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "PRIORITIZE_TOTAL_LIMIT",
            "PRIORITIZE_UNKNOWN_LOCATION_LIMIT",
            "PRIORITIZE_BUDGETS_FILE",
            "LOG_LEVEL",
            "LOG_JSON",
        ):
            monkeypatch.delenv(name, raising=False)

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Without environment, default budgets apply."""
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.budgets() == BudgetsConfig()

    @pytest.mark.unit
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override the budgets."""
        monkeypatch.setenv("PRIORITIZE_TOTAL_LIMIT", "10")
        monkeypatch.setenv("PRIORITIZE_UNKNOWN_LOCATION_LIMIT", "4")
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.budgets() == BudgetsConfig(
            total_limit=10, unknown_location_limit=4
        )

    @pytest.mark.unit
    def test_file_then_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Environment overrides apply on top of the budgets file."""
        path = tmp_path / "budgets.yaml"
        path.write_text("total_limit: 7\nunknown_location_limit: 1\n")
        monkeypatch.setenv("PRIORITIZE_BUDGETS_FILE", str(path))
        monkeypatch.setenv("PRIORITIZE_UNKNOWN_LOCATION_LIMIT", "3")
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.budgets() == BudgetsConfig(
            total_limit=7, unknown_location_limit=3
        )

    @pytest.mark.unit
    def test_negative_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Negative budgets in the environment fail validation."""
        monkeypatch.setenv("PRIORITIZE_TOTAL_LIMIT", "-1")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)  # type: ignore[call-arg]

    @pytest.mark.unit
    def test_inconsistent_override_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An unknown budget above the total budget is rejected."""
        monkeypatch.setenv("PRIORITIZE_TOTAL_LIMIT", "1")
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]
        with pytest.raises(ValidationError):
            settings.budgets()

    @pytest.mark.unit
    def test_logging_defaults(self) -> None:
        """Logging defaults to INFO with JSON output."""
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    @pytest.mark.unit
    def test_apply_logging_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """LOG_LEVEL and LOG_JSON drive filtering and rendering."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = AppSettings(_env_file=None)  # type: ignore[call-arg]

        try:
            settings.apply_logging()
            processors = structlog.get_config()["processors"]
            assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

            logger = structlog.get_logger()
            logger.info("budget_hidden")
            logger.warning("budget_shown")
            err = capsys.readouterr().err
        finally:
            structlog.reset_defaults()

        assert "budget_hidden" not in err
        assert "budget_shown" in err
        assert not err.lstrip().startswith("{")
