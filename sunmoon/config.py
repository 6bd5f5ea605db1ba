"""
sunmoon Configuration

Pydantic models for the observer location and the default parameters of
the almanac computations, loaded from YAML with environment overrides.

Configuration sources, in order of precedence:
1. Environment variables ``SUNMOON_<SECTION>_<KEY>`` (e.g. SUNMOON_LOCATION_LATITUDE)
2. The file passed to ``load_config``
3. The first existing file of ``get_config_paths()``
4. Built-in defaults

Usage:
    from sunmoon.config import load_config

    config = load_config()
    location = config.location.to_location()
"""

import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from services.almanac.moon_phase import Phase
from services.almanac.sun_times import Twilight
from sunmoon.exceptions import ConfigurationError
from sunmoon.logging_config import get_logger
from sunmoon.params import Location

logger = get_logger(__name__)

ENV_PREFIX = "SUNMOON"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Section Models
# =============================================================================

class LocationConfig(BaseModel):
    """Observer location."""
    latitude: float = Field(default=0.0, ge=-90.0, le=90.0)
    longitude: float = Field(default=0.0, ge=-180.0, le=180.0)
    height: float = 0.0                 # Meters above sea level
    timezone: str = "UTC"               # IANA zone name
    name: str = "Observer"

    @field_validator("height")
    @classmethod
    def _clamp_height(cls, value: float) -> float:
        return max(value, 0.0)

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value.upper() == "UTC":
            return "UTC"
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value}") from e
        return value

    def to_location(self) -> Location:
        return Location(self.latitude, self.longitude, self.height)


def _preset_or_angle(value: Union[str, float], presets: Any, what: str) -> Union[str, float]:
    """Normalize a preset name, or an angle in degrees given as number or string."""
    if isinstance(value, str):
        name = value.strip().upper().replace("-", "_")
        if name in presets.__members__:
            return name
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Unknown {what}: {value}") from None
    return float(value)


class SunTimesConfig(BaseModel):
    """Defaults for sun rise/set computations."""
    twilight: Union[float, str] = "VISUAL"   # Twilight preset or angle in degrees
    limit_days: float = Field(default=365.0, ge=0.0)

    @field_validator("twilight")
    @classmethod
    def _check_twilight(cls, value: Union[float, str]) -> Union[float, str]:
        return _preset_or_angle(value, Twilight, "twilight")

    def twilight_value(self) -> Union[Twilight, float]:
        if isinstance(self.twilight, str):
            return Twilight[self.twilight]
        return self.twilight

    @property
    def limit(self) -> timedelta:
        return timedelta(days=self.limit_days)


class MoonTimesConfig(BaseModel):
    """Defaults for moonrise/moonset computations."""
    limit_days: float = Field(default=365.0, ge=0.0)

    @property
    def limit(self) -> timedelta:
        return timedelta(days=self.limit_days)


class MoonPhaseConfig(BaseModel):
    """Defaults for moon phase searches."""
    phase: Union[float, str] = "NEW_MOON"    # Phase preset or angle in degrees

    @field_validator("phase")
    @classmethod
    def _check_phase(cls, value: Union[float, str]) -> Union[float, str]:
        return _preset_or_angle(value, Phase, "moon phase")

    def phase_value(self) -> Union[Phase, float]:
        if isinstance(self.phase, str):
            return Phase[self.phase]
        return self.phase


class SunmoonConfig(BaseModel):
    """Complete sunmoon configuration."""
    location: LocationConfig = Field(default_factory=LocationConfig)
    sun_times: SunTimesConfig = Field(default_factory=SunTimesConfig)
    moon_times: MoonTimesConfig = Field(default_factory=MoonTimesConfig)
    moon_phase: MoonPhaseConfig = Field(default_factory=MoonPhaseConfig)
    log_level: LogLevel = "INFO"
    log_file: Optional[str] = None

    def to_location(self) -> Location:
        return self.location.to_location()

    def twilight_value(self) -> Union[Twilight, float]:
        return self.sun_times.twilight_value()

    def phase_value(self) -> Union[Phase, float]:
        return self.moon_phase.phase_value()


# =============================================================================
# Loading
# =============================================================================

def get_config_paths() -> List[Path]:
    """Config file locations, searched in order."""
    return [
        Path("./sunmoon.yaml"),
        Path.home() / ".sunmoon" / "config.yaml",
        Path("/etc/sunmoon/config.yaml"),
    ]


def _apply_env_overrides(
    data: Dict[str, Any], config_file: Optional[Path] = None
) -> Dict[str, Any]:
    """Overlay SUNMOON_* environment variables onto raw config data.

    Values are passed on as strings; pydantic converts them to the field types.

    Raises:
        ConfigurationError: If an overridden section is not a mapping
    """
    for field_name, field_info in SunmoonConfig.model_fields.items():
        annotation = field_info.annotation
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            for key in annotation.model_fields:
                env_name = f"{ENV_PREFIX}_{field_name.upper()}_{key.upper()}"
                if env_name in os.environ:
                    section = data.setdefault(field_name, {})
                    if not isinstance(section, dict):
                        raise ConfigurationError(
                            f"Invalid YAML in configuration file: expected a mapping for '{field_name}'",
                            config_key=field_name,
                            config_file=str(config_file) if config_file else None,
                        )
                    section[key] = os.environ[env_name]
                    logger.debug("Config override from %s", env_name)
        else:
            env_name = f"{ENV_PREFIX}_{field_name.upper()}"
            if env_name in os.environ:
                data[field_name] = os.environ[env_name]
                logger.debug("Config override from %s", env_name)
    return data


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}",
            config_file=str(path),
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            "Invalid YAML in configuration file: expected a mapping",
            config_file=str(path),
        )
    return content


def load_config(path: Optional[Union[str, Path]] = None) -> SunmoonConfig:
    """
    Load configuration from file and environment.

    Args:
        path: Explicit config file. If None, the default locations are
              searched and built-in defaults are used if none exists.

    Returns:
        Validated SunmoonConfig

    Raises:
        ConfigurationError: If the file is missing, not valid YAML, or
                            contains invalid values
    """
    data: Dict[str, Any] = {}
    config_file: Optional[Path] = None

    if path is not None:
        config_file = Path(path)
        if not config_file.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                config_file=str(config_file),
            )
    else:
        for candidate in get_config_paths():
            if candidate.exists():
                config_file = candidate
                break

    if config_file is not None:
        logger.debug("Loading configuration from %s", config_file)
        data = _read_yaml(config_file)

    data = _apply_env_overrides(data, config_file)

    try:
        return SunmoonConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed: {e}",
            config_file=str(config_file) if config_file else None,
        ) from e
