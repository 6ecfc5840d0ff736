from typing import assert_never

from loguru import logger
from pydantic import Field, field_validator

from locationmanager.config import DEFAULTS, Defaults
from locationmanager.configuration.model import (
    ProviderSource,
    check_non_negative,
    check_whole_number,
)
from locationmanager.model import ConfigurationModel


class DefaultProviderConfiguration(ConfigurationModel):
    """Timing and accuracy settings for the built-in GPS and Network providers."""

    required_time_interval: int = Field(..., ge=0)
    required_distance_interval: int = Field(..., ge=0)
    acceptable_accuracy: float
    acceptable_time_period: int = Field(..., ge=0)
    gps_wait_period: int = Field(..., ge=0)
    network_wait_period: int = Field(..., ge=0)
    gps_message: str = ""

    @field_validator("acceptable_accuracy")
    @classmethod
    def check_accuracy(cls, v: float) -> float:
        check_non_negative(v, "Acceptable accuracy")
        return v

    @property
    def ask_for_gps_enable(self) -> bool:
        return bool(self.gps_message)

    @classmethod
    def builder(
        cls, defaults: Defaults | None = None
    ) -> "DefaultProviderConfigurationBuilder":
        return DefaultProviderConfigurationBuilder(defaults)

    def new_builder(self) -> "DefaultProviderConfigurationBuilder":
        """Return a builder seeded with this configuration's values."""
        return (
            DefaultProviderConfigurationBuilder()
            .required_time_interval(self.required_time_interval)
            .required_distance_interval(self.required_distance_interval)
            .acceptable_accuracy(self.acceptable_accuracy)
            .acceptable_time_period(self.acceptable_time_period)
            .set_wait_period(ProviderSource.GPS, self.gps_wait_period)
            .set_wait_period(ProviderSource.NETWORK, self.network_wait_period)
            .gps_message(self.gps_message)
        )


class DefaultProviderConfigurationBuilder:
    def __init__(self, defaults: Defaults | None = None) -> None:
        defaults = defaults or DEFAULTS
        self._required_time_interval = defaults.location_interval
        self._required_distance_interval = defaults.location_distance_interval
        self._acceptable_accuracy = defaults.min_accuracy
        self._acceptable_time_period = defaults.time_period
        self._gps_wait_period = defaults.wait_period
        self._network_wait_period = defaults.wait_period
        self._gps_message = defaults.empty_string

    def required_time_interval(
        self, required_time_interval: int
    ) -> "DefaultProviderConfigurationBuilder":
        """Period in which updates are delivered from the default providers.

        Only used when the location configuration keeps tracking.
        """
        check_whole_number(required_time_interval, "Required time interval")
        self._required_time_interval = required_time_interval
        return self

    def required_distance_interval(
        self, required_distance_interval: int
    ) -> "DefaultProviderConfigurationBuilder":
        """Distance in meters that triggers an update from the default providers.

        Only used when the location configuration keeps tracking.
        """
        check_whole_number(required_distance_interval, "Required distance interval")
        self._required_distance_interval = required_distance_interval
        return self

    def acceptable_accuracy(
        self, acceptable_accuracy: float
    ) -> "DefaultProviderConfigurationBuilder":
        """Minimum accuracy in meters a location needs to be usable."""
        check_non_negative(acceptable_accuracy, "Acceptable accuracy")
        self._acceptable_accuracy = acceptable_accuracy
        return self

    def acceptable_time_period(
        self, acceptable_time_period: int
    ) -> "DefaultProviderConfigurationBuilder":
        """How old a location can be and still count as usable, e.g. last 5 minutes."""
        check_whole_number(acceptable_time_period, "Acceptable time period")
        self._acceptable_time_period = acceptable_time_period
        return self

    def gps_message(self, gps_message: str | None) -> "DefaultProviderConfigurationBuilder":
        """Message shown while asking the user to turn GPS on.

        If empty, the user is not asked to enable GPS.
        """
        self._gps_message = gps_message or ""
        return self

    def set_wait_period(
        self, provider_source: ProviderSource, milliseconds: int
    ) -> "DefaultProviderConfigurationBuilder":
        """Time to wait on a provider before switching to the next one.

        ``DEFAULT_PROVIDERS`` sets GPS and Network together and ``NONE`` is
        ignored. The Google Play Services wait period belongs to
        ``GPServicesConfiguration`` and cannot be set here.
        """
        check_whole_number(milliseconds, "Wait period")

        match ProviderSource(provider_source):
            case ProviderSource.GOOGLE_PLAY_SERVICES:
                raise RuntimeError(
                    "GooglePlayServices waiting time period should be set on "
                    "GPServicesConfiguration"
                )
            case ProviderSource.NETWORK:
                self._network_wait_period = milliseconds
            case ProviderSource.GPS:
                self._gps_wait_period = milliseconds
            case ProviderSource.DEFAULT_PROVIDERS:
                self._gps_wait_period = milliseconds
                self._network_wait_period = milliseconds
            case ProviderSource.NONE:
                logger.debug("Ignoring wait period for provider source NONE.")
            case _ as unreachable:
                assert_never(unreachable)
        return self

    def build(self) -> DefaultProviderConfiguration:
        logger.debug(
            f"Building default provider configuration with "
            f"gps_wait_period={self._gps_wait_period}, "
            f"network_wait_period={self._network_wait_period}."
        )
        return DefaultProviderConfiguration(
            required_time_interval=self._required_time_interval,
            required_distance_interval=self._required_distance_interval,
            acceptable_accuracy=self._acceptable_accuracy,
            acceptable_time_period=self._acceptable_time_period,
            gps_wait_period=self._gps_wait_period,
            network_wait_period=self._network_wait_period,
            gps_message=self._gps_message,
        )
