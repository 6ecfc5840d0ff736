from locationmanager.configuration.default_provider import DefaultProviderConfiguration
from locationmanager.configuration.gp_services import GPServicesConfiguration
from locationmanager.configuration.location import LocationConfiguration
from locationmanager.configuration.permission import PermissionConfiguration


def silent_configuration(keep_tracking: bool = True) -> LocationConfiguration:
    """Configuration that never interacts with the user.

    No permission is requested and no settings dialog is shown; if location is
    not available without user action, it fails silently.
    """
    return (
        LocationConfiguration.builder()
        .keep_tracking(keep_tracking)
        .use_google_play_services(
            GPServicesConfiguration.builder().ask_for_settings_api(False).build()
        )
        .use_default_providers(DefaultProviderConfiguration.builder().build())
        .build()
    )


def default_configuration(
    rationale_message: str, gps_message: str = ""
) -> LocationConfiguration:
    """Configuration that asks the user for everything it needs."""
    return (
        LocationConfiguration.builder()
        .ask_for_permission(
            PermissionConfiguration.builder().rationale_message(rationale_message).build()
        )
        .use_google_play_services(
            GPServicesConfiguration.builder().ask_for_google_play_services(True).build()
        )
        .use_default_providers(
            DefaultProviderConfiguration.builder().gps_message(gps_message).build()
        )
        .build()
    )
