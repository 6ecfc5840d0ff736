from loguru import logger
from pydantic import Field

from locationmanager.config import DEFAULTS, Defaults
from locationmanager.configuration.model import LocationRequest, check_whole_number
from locationmanager.model import ConfigurationModel


class GPServicesConfiguration(ConfigurationModel):
    """Settings for obtaining location through Google Play Services."""

    location_request: LocationRequest
    fallback_to_default: bool = True
    ask_for_google_play_services: bool = False
    ask_for_settings_api: bool = True
    fail_on_settings_api_suspended: bool = False
    ignore_last_known_location: bool = False
    google_play_services_wait_period: int = Field(DEFAULTS.wait_period, ge=0)

    @classmethod
    def builder(cls, defaults: Defaults | None = None) -> "GPServicesConfigurationBuilder":
        return GPServicesConfigurationBuilder(defaults)

    def new_builder(self) -> "GPServicesConfigurationBuilder":
        return (
            GPServicesConfigurationBuilder()
            .location_request(self.location_request)
            .fallback_to_default(self.fallback_to_default)
            .ask_for_google_play_services(self.ask_for_google_play_services)
            .ask_for_settings_api(self.ask_for_settings_api)
            .fail_on_settings_api_suspended(self.fail_on_settings_api_suspended)
            .ignore_last_known_location(self.ignore_last_known_location)
            .set_wait_period(self.google_play_services_wait_period)
        )


class GPServicesConfigurationBuilder:
    def __init__(self, defaults: Defaults | None = None) -> None:
        self._defaults = defaults or DEFAULTS
        self._location_request: LocationRequest | None = None
        self._fallback_to_default = True
        self._ask_for_google_play_services = False
        self._ask_for_settings_api = True
        self._fail_on_settings_api_suspended = False
        self._ignore_last_known_location = False
        self._google_play_services_wait_period = self._defaults.wait_period

    def location_request(
        self, location_request: LocationRequest
    ) -> "GPServicesConfigurationBuilder":
        """Request used for Google Play Services updates.

        Defaults to high accuracy with the default location interval.
        """
        self._location_request = location_request
        return self

    def fallback_to_default(self, fallback_to_default: bool) -> "GPServicesConfigurationBuilder":
        """Fall back to the default providers when Google Play Services fails."""
        self._fallback_to_default = fallback_to_default
        return self

    def ask_for_google_play_services(
        self, ask_for_google_play_services: bool
    ) -> "GPServicesConfigurationBuilder":
        """Ask the user to install or update Google Play Services if needed."""
        self._ask_for_google_play_services = ask_for_google_play_services
        return self

    def ask_for_settings_api(
        self, ask_for_settings_api: bool
    ) -> "GPServicesConfigurationBuilder":
        """Use the settings dialog to ask the user to adjust location settings."""
        self._ask_for_settings_api = ask_for_settings_api
        return self

    def fail_on_settings_api_suspended(
        self, fail_on_settings_api_suspended: bool
    ) -> "GPServicesConfigurationBuilder":
        self._fail_on_settings_api_suspended = fail_on_settings_api_suspended
        return self

    def ignore_last_known_location(
        self, ignore_last_known_location: bool
    ) -> "GPServicesConfigurationBuilder":
        self._ignore_last_known_location = ignore_last_known_location
        return self

    def set_wait_period(self, milliseconds: int) -> "GPServicesConfigurationBuilder":
        """Time to wait on Google Play Services before falling back."""
        check_whole_number(milliseconds, "Wait period")
        self._google_play_services_wait_period = milliseconds
        return self

    def build(self) -> GPServicesConfiguration:
        location_request = self._location_request
        if location_request is None:
            location_request = LocationRequest(
                interval=self._defaults.location_interval,
                fastest_interval=self._defaults.location_interval,
            )
        logger.debug(f"Building Google Play Services configuration with {location_request}.")
        return GPServicesConfiguration(
            location_request=location_request,
            fallback_to_default=self._fallback_to_default,
            ask_for_google_play_services=self._ask_for_google_play_services,
            ask_for_settings_api=self._ask_for_settings_api,
            fail_on_settings_api_suspended=self._fail_on_settings_api_suspended,
            ignore_last_known_location=self._ignore_last_known_location,
            google_play_services_wait_period=self._google_play_services_wait_period,
        )
