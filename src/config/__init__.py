"""Configuration loading and validation module."""

from src.config.loader import ConfigValidationError, load_budgets_config


__all__ = [
    "ConfigValidationError",
    "load_budgets_config",
]
