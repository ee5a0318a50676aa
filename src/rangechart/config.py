"""Configuration model for RangeChart."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .core.constants import DISPLAY
from .core.exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseModel):
    """Configuration for RangeChart."""

    # Extraction Configuration
    display_name_location: str = Field(
        DISPLAY.CHART_LOCATION, description="Location passed when resolving column display names"
    )
    raise_on_errors: bool = Field(
        False, description="Raise ChartDataError instead of returning advisory errors"
    )

    # Telemetry Configuration
    enable_telemetry: bool = Field(False, description="Enable OpenTelemetry metrics")
    metrics_export_interval_millis: int = Field(
        60000, ge=1000, description="Export interval for the console metrics exporter"
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: Path | None = Field(None, description="Log file path")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        This method will automatically load from a .env file if present, then read
        configuration from environment variables.
        """
        import os

        from dotenv import find_dotenv, load_dotenv
        from pydantic import ValidationError

        # Load .env from the working directory (will not override existing env vars)
        load_dotenv(find_dotenv(usecwd=True))

        log_file = os.getenv("RANGECHART_LOG_FILE")

        try:
            return cls(
                display_name_location=os.getenv(
                    "RANGECHART_DISPLAY_NAME_LOCATION", DISPLAY.CHART_LOCATION
                ),
                raise_on_errors=os.getenv("RANGECHART_RAISE_ON_ERRORS", "false").lower()
                == "true",
                enable_telemetry=os.getenv("RANGECHART_ENABLE_TELEMETRY", "false").lower()
                == "true",
                metrics_export_interval_millis=int(
                    os.getenv("RANGECHART_METRICS_EXPORT_INTERVAL_MILLIS", "60000")
                ),
                log_level=os.getenv("RANGECHART_LOG_LEVEL", "INFO"),
                log_file=Path(log_file) if log_file else None,
            )
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(f"Invalid RangeChart configuration: {e}") from e
