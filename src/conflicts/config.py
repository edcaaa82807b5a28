"""Checker configuration loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class CheckerConfig(BaseSettings):
    """Conflict checker configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Snapshot of every class schedule (exported from the school database)
    data_file: str = Field(
        default="data/classes.json",
        description="JSON file holding the teachers and class schedules",
    )

    # Exit status policy for scripts/check_conflicts.py
    fail_on_conflict: bool = Field(
        default=True,
        description="Exit with status 2 when a conflict is found (warn only if False)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "SCHEDULING_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: CheckerConfig | None = None


def get_config() -> CheckerConfig:
    """Get the checker configuration singleton.

    Returns:
        CheckerConfig: Checker configuration instance
    """
    global _config
    if _config is None:
        _config = CheckerConfig()
    return _config
