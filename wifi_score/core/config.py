"""
Application settings management.

Settings are loaded from environment variables with .env file support.
All configuration is validated using Pydantic.

Scoring thresholds live in a separate YAML file (config/scoring_params.yaml)
and can be overridden with a compact "key=value" string.
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wifi_score.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # ==========================================================================
    # Scoring
    # ==========================================================================

    max_score: int = Field(
        default=60, ge=1, description="Ceiling for the published wifi score"
    )
    scoring_params_path: Optional[Path] = Field(
        default=None, description="YAML file with RSSI thresholds and horizon"
    )
    scoring_params_override: Optional[str] = Field(
        default=None,
        description="Override string, e.g. 'rssi2=-83:-80:-73:-60,horizon=15'",
    )

    # ==========================================================================
    # Link metrics history
    # ==========================================================================

    # 3 hours on a 3 second poll
    history_capacity: int = Field(
        default=3600, ge=1, description="Maximum retained history records"
    )
    first_reasonable_wall_clock_ms: int = Field(
        default=1490000000000,
        ge=0,
        description="Samples stamped before this wall clock time are not logged",
    )
    poll_interval_ms: int = Field(
        default=3000, ge=1, description="Expected cadence of the external poller"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================

    verbose_logging: bool = Field(
        default=False, description="Emit per-poll diagnostic log events"
    )
    logs_dir: Path = Field(
        default=Path("logs"), description="Directory for per-process log files"
    )
    log_sessions_to_keep: int = Field(
        default=5, ge=1, description="Log files retained, the current one included"
    )

    # ==========================================================================
    # Server Configuration
    # ==========================================================================

    host: str = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    debug: bool = Field(default=False, description="Enable debug mode")


# ============================================================================
# Scoring parameters (from YAML)
# ============================================================================

# Frequencies at or above this are scored against the 5 GHz thresholds
BAND5 = 5000

EXIT = 0
ENTRY = 1
SUFFICIENT = 2
GOOD = 3

MIN_HORIZON = -9
MAX_HORIZON = 60


class ScoringParams(BaseModel):
    """RSSI thresholds per band and the forecast horizon.

    Each band holds four thresholds in dBm, ordered
    [exit, entry, sufficient, good].
    """

    rssi2: List[int] = Field(
        default_factory=lambda: [-83, -80, -73, -60],
        description="2.4 GHz thresholds [exit, entry, sufficient, good]",
    )
    rssi5: List[int] = Field(
        default_factory=lambda: [-80, -77, -70, -57],
        description="5 GHz thresholds [exit, entry, sufficient, good]",
    )
    horizon_seconds: int = Field(
        default=15,
        ge=MIN_HORIZON,
        le=MAX_HORIZON,
        description="How far ahead to forecast RSSI",
    )

    @field_validator("rssi2", "rssi5")
    @classmethod
    def thresholds_strictly_increasing(cls, v: List[int]) -> List[int]:
        if len(v) != 4:
            raise ValueError("expected 4 thresholds: exit, entry, sufficient, good")
        for lower, upper in zip(v, v[1:]):
            if lower >= upper:
                raise ValueError(f"thresholds must be strictly increasing: {v}")
        return v

    def _band(self, frequency: int) -> List[int]:
        return self.rssi5 if frequency >= BAND5 else self.rssi2

    def get_exit_rssi(self, frequency: int) -> int:
        return self._band(frequency)[EXIT]

    def get_entry_rssi(self, frequency: int) -> int:
        return self._band(frequency)[ENTRY]

    def get_sufficient_rssi(self, frequency: int) -> int:
        return self._band(frequency)[SUFFICIENT]

    def get_good_rssi(self, frequency: int) -> int:
        return self._band(frequency)[GOOD]

    def parse_overrides(self, overrides: str) -> "ScoringParams":
        """
        Return a copy with a comma-separated override string applied.

        Example: "rssi2=-83:-80:-73:-60,rssi5=-80:-77:-70:-57,horizon=15"

        Raises:
            ConfigurationError: If a key is unknown or a value is malformed
        """
        data = self.model_dump()
        for item in overrides.split(","):
            item = item.strip()
            if not item:
                continue
            key, sep, value = item.partition("=")
            if not sep:
                raise ConfigurationError(f"Malformed scoring override: {item!r}")
            key = key.strip()
            try:
                if key in ("rssi2", "rssi5"):
                    data[key] = [int(part) for part in value.split(":")]
                elif key == "horizon":
                    data["horizon_seconds"] = int(value)
                else:
                    raise ConfigurationError(f"Unknown scoring override key: {key!r}")
            except ValueError as e:
                raise ConfigurationError(
                    f"Bad value for scoring override {key!r}: {value!r}"
                ) from e
        try:
            return ScoringParams(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid scoring overrides: {e}") from e


def load_scoring_params(config_path: Optional[Path] = None) -> ScoringParams:
    """
    Load scoring parameters from YAML file.

    Args:
        config_path: Path to scoring_params.yaml. If None, uses default path.

    Returns:
        ScoringParams with validated thresholds

    Raises:
        ValidationError: If the file contents fail validation
    """
    if config_path is None:
        # Default path: config/scoring_params.yaml relative to project root
        current = Path(__file__).resolve().parent.parent.parent
        check_path = current / "config" / "scoring_params.yaml"
        if check_path.exists():
            config_path = check_path
        else:
            cwd_config = Path.cwd() / "config" / "scoring_params.yaml"
            if not cwd_config.exists():
                return ScoringParams()
            config_path = cwd_config

    config_path = Path(config_path).resolve()

    if not config_path.exists():
        return ScoringParams()

    with open(str(config_path)) as f:
        config_data = yaml.safe_load(f)

    if not config_data:
        return ScoringParams()

    return ScoringParams(**config_data)


def build_scoring_params(settings: "Settings") -> ScoringParams:
    """Load the YAML parameters and apply any override string from settings."""
    params = load_scoring_params(settings.scoring_params_path)
    if settings.scoring_params_override:
        params = params.parse_overrides(settings.scoring_params_override)
    return params


# Global settings instance
settings = Settings()
