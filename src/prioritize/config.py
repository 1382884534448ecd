"""Configuration models for candidate prioritization."""

from typing import Annotated

from pydantic import Field, model_validator

from src.data_model import StrictBaseModel
from src.prioritize.constants import (
    REPLACEMENT_ATTEMPTS,
    REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS,
)


class BudgetsConfig(StrictBaseModel):
    """Replacement attempt budgets.

    Attributes:
        total_limit: Maximum number of candidates returned.
        unknown_location_limit: Maximum number of returned candidates
            without a concrete location. Must not exceed total_limit.
    """

    total_limit: Annotated[int, Field(ge=0)] = REPLACEMENT_ATTEMPTS
    unknown_location_limit: Annotated[int, Field(ge=0)] = (
        REPLACEMENT_UNKNOWN_LOCATION_ATTEMPTS
    )

    @model_validator(mode="after")
    def validate_unknown_within_total(self) -> "BudgetsConfig":
        """Ensure the unknown-location budget fits in the total budget."""
        if self.unknown_location_limit > self.total_limit:
            msg = (
                f"unknown_location_limit ({self.unknown_location_limit}) "
                f"must not exceed total_limit ({self.total_limit})"
            )
            raise ValueError(msg)
        return self
