"""Budget configuration loader."""

import hashlib
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError

from src.config.constants import COMPONENT_CONFIG
from src.prioritize.config import BudgetsConfig


logger = structlog.get_logger()


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[dict[str, str]], file_path: str) -> None:
        """Initialize the error.

        Args:
            errors: List of validation error details.
            file_path: Path to the file that failed validation.
        """
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


def _load_yaml_file(file_path: Path) -> tuple[dict[str, object], str]:
    """Load a YAML file and compute its checksum.

    Raises:
        FileNotFoundError: If file does not exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    content_bytes = file_path.read_bytes()
    checksum = hashlib.sha256(content_bytes).hexdigest()
    parsed: dict[str, object] = yaml.safe_load(content_bytes.decode("utf-8")) or {}
    return parsed, checksum


def load_budgets_config(file_path: Path) -> BudgetsConfig:
    """Load and validate a budgets YAML file.

    Args:
        file_path: Path to the YAML file.

    Returns:
        Validated BudgetsConfig.

    Raises:
        ConfigValidationError: If the content does not match the schema.
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If YAML parsing fails.
    """
    log = logger.bind(component=COMPONENT_CONFIG, file_path=str(file_path))

    try:
        data, checksum = _load_yaml_file(file_path)
    except FileNotFoundError as e:
        log.error("config_file_not_found", error=str(e))
        raise
    except yaml.YAMLError as e:
        log.error("config_yaml_parse_error", error=str(e))
        raise

    try:
        config = BudgetsConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        log.error(
            "config_validation_failed",
            validation_error_count=len(errors),
            errors=errors,
        )
        raise ConfigValidationError(errors, str(file_path)) from e

    log.info(
        "config_file_loaded",
        file_sha256=checksum,
        total_limit=config.total_limit,
        unknown_location_limit=config.unknown_location_limit,
    )
    return config
