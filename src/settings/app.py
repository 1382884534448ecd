"""Application settings powered by Pydantic BaseSettings."""

from pathlib import Path
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.config.constants import (
    ENV_BUDGETS_FILE,
    ENV_TOTAL_LIMIT,
    ENV_UNKNOWN_LOCATION_LIMIT,
)
from src.config.loader import load_budgets_config
from src.observability.logging import configure_logging
from src.prioritize.config import BudgetsConfig


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    total_limit: Annotated[int, Field(ge=0)] | None = Field(
        default=None, validation_alias=ENV_TOTAL_LIMIT
    )
    unknown_location_limit: Annotated[int, Field(ge=0)] | None = Field(
        default=None, validation_alias=ENV_UNKNOWN_LOCATION_LIMIT
    )
    budgets_file: Path | None = Field(
        default=None, validation_alias=ENV_BUDGETS_FILE
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(default=True, validation_alias="LOG_JSON")

    def budgets(self) -> BudgetsConfig:
        """Resolve the effective attempt budgets.

        The budgets file is read first when configured; environment
        overrides are applied on top of it.
        """
        base = (
            load_budgets_config(self.budgets_file)
            if self.budgets_file is not None
            else BudgetsConfig()
        )
        overrides: dict[str, int] = {}
        if self.total_limit is not None:
            overrides["total_limit"] = self.total_limit
        if self.unknown_location_limit is not None:
            overrides["unknown_location_limit"] = self.unknown_location_limit
        if not overrides:
            return base
        return BudgetsConfig.model_validate(base.model_dump() | overrides)

    def apply_logging(self) -> None:
        """Configure structured logging from LOG_LEVEL and LOG_JSON."""
        configure_logging(level=self.log_level, json_format=self.log_json)


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
