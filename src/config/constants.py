"""Constants for the configuration module."""

# Log component name
COMPONENT_CONFIG = "config"

# Environment variable names
ENV_TOTAL_LIMIT = "PRIORITIZE_TOTAL_LIMIT"
ENV_UNKNOWN_LOCATION_LIMIT = "PRIORITIZE_UNKNOWN_LOCATION_LIMIT"
ENV_BUDGETS_FILE = "PRIORITIZE_BUDGETS_FILE"
