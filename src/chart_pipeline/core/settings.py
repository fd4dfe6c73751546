"""
Settings for the Chart Pipeline.

Defines the default constants used by the mappers and the dispatcher. Every
value can be overridden through the environment (or a ``.env`` file).

The set of chart types lives in ``models.schema.KNOWN_CHART_TYPES``.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Default height passed through to the renderer
CHART_HEIGHT = os.getenv("CHART_PIPELINE_HEIGHT", "400px")

# Symbol used when an axis declares no unit
DEFAULT_VALUE_SYMBOL = os.getenv("CHART_PIPELINE_DEFAULT_SYMBOL", "$")

# Memoization of the dispatcher's last result
DISPATCH_CACHE_ENABLED = (
    os.getenv("CHART_PIPELINE_CACHE_ENABLED", "true").lower() == "true"
)

# Logging
LOG_LEVEL = os.getenv("CHART_PIPELINE_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("CHART_PIPELINE_LOG_FILE", "")


def validate_settings() -> bool:
    """
    Validate every module setting.

    Checks:
    - CHART_HEIGHT is a non-empty string
    - DEFAULT_VALUE_SYMBOL is a string
    - LOG_LEVEL is a level known to the logging module

    Returns:
        True if all validations pass

    Raises:
        ValueError: If any setting is invalid
    """
    if not CHART_HEIGHT or not isinstance(CHART_HEIGHT, str):
        raise ValueError(f"CHART_HEIGHT must be a non-empty string: {CHART_HEIGHT}")

    if not isinstance(DEFAULT_VALUE_SYMBOL, str):
        raise ValueError(f"DEFAULT_VALUE_SYMBOL must be a string: {DEFAULT_VALUE_SYMBOL}")

    if LOG_LEVEL.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"Invalid LOG_LEVEL: {LOG_LEVEL}")

    return True
