from loguru import logger

from locationmanager.config import DEFAULTS, Defaults
from locationmanager.configuration.default_provider import DefaultProviderConfiguration
from locationmanager.configuration.gp_services import GPServicesConfiguration
from locationmanager.configuration.permission import PermissionConfiguration
from locationmanager.model import ConfigurationModel
from locationmanager.providers.permission import StubPermissionProvider


class LocationConfiguration(ConfigurationModel):
    """Root configuration composing permission and provider settings."""

    keep_tracking: bool = False
    permission_configuration: PermissionConfiguration
    gp_services_configuration: GPServicesConfiguration | None = None
    default_provider_configuration: DefaultProviderConfiguration | None = None

    @classmethod
    def builder(cls, defaults: Defaults | None = None) -> "LocationConfigurationBuilder":
        return LocationConfigurationBuilder(defaults)

    def new_builder(self) -> "LocationConfigurationBuilder":
        return (
            LocationConfigurationBuilder()
            .keep_tracking(self.keep_tracking)
            .ask_for_permission(self.permission_configuration)
            .use_google_play_services(self.gp_services_configuration)
            .use_default_providers(self.default_provider_configuration)
        )


class LocationConfigurationBuilder:
    def __init__(self, defaults: Defaults | None = None) -> None:
        defaults = defaults or DEFAULTS
        self._keep_tracking = defaults.keep_tracking
        self._permission_configuration: PermissionConfiguration | None = None
        self._gp_services_configuration: GPServicesConfiguration | None = None
        self._default_provider_configuration: DefaultProviderConfiguration | None = None

    def keep_tracking(self, keep_tracking: bool) -> "LocationConfigurationBuilder":
        """Keep receiving location updates instead of stopping after the first one."""
        self._keep_tracking = keep_tracking
        return self

    def ask_for_permission(
        self, permission_configuration: PermissionConfiguration | None
    ) -> "LocationConfigurationBuilder":
        """Configure the permission request process.

        If this is not set, no permission is requested from the user and getting a
        location fails silently when the location permissions are not granted already.
        """
        self._permission_configuration = permission_configuration
        return self

    def use_google_play_services(
        self, gp_services_configuration: GPServicesConfiguration | None
    ) -> "LocationConfigurationBuilder":
        """If this is not set, Google Play Services will not be used."""
        self._gp_services_configuration = gp_services_configuration
        return self

    def use_default_providers(
        self, default_provider_configuration: DefaultProviderConfiguration | None
    ) -> "LocationConfigurationBuilder":
        """If this is not set, the GPS and Network providers will not be used."""
        self._default_provider_configuration = default_provider_configuration
        return self

    def build(self) -> LocationConfiguration:
        if (
            self._gp_services_configuration is None
            and self._default_provider_configuration is None
        ):
            raise RuntimeError(
                "You need to specify one of the provider configurations. "
                "Please see GPServicesConfiguration and DefaultProviderConfiguration"
            )

        if self._permission_configuration is None:
            logger.debug("No permission configuration set, permissions will not be requested.")
            self._permission_configuration = (
                PermissionConfiguration.builder()
                .permission_provider(StubPermissionProvider())
                .build()
            )

        return LocationConfiguration(
            keep_tracking=self._keep_tracking,
            permission_configuration=self._permission_configuration,
            gp_services_configuration=self._gp_services_configuration,
            default_provider_configuration=self._default_provider_configuration,
        )
