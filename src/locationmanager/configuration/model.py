import enum

from pydantic import Field

from locationmanager.config import DEFAULTS
from locationmanager.model import ConfigurationModel


def check_non_negative(value: float, label: str) -> None:
    if value < 0:
        raise ValueError(f"{label} cannot be set to negative value.")


def check_whole_number(value: float, label: str) -> None:
    check_non_negative(value, label)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{label} must be a whole number.")


class ProviderSource(str, enum.Enum):
    """Candidate sources a location fix can come from."""

    GOOGLE_PLAY_SERVICES = "google_play_services"
    NETWORK = "network"
    GPS = "gps"
    # Both GPS and Network.
    DEFAULT_PROVIDERS = "default_providers"
    NONE = "none"


class Priority(str, enum.Enum):
    HIGH_ACCURACY = "high_accuracy"
    BALANCED_POWER_ACCURACY = "balanced_power_accuracy"
    LOW_POWER = "low_power"
    NO_POWER = "no_power"


class LocationRequest(ConfigurationModel):
    """Update request handed to Google Play Services."""

    priority: Priority = Priority.HIGH_ACCURACY
    interval: int = Field(DEFAULTS.location_interval, ge=0)
    fastest_interval: int = Field(DEFAULTS.location_interval, ge=0)
