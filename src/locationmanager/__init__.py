from locationmanager.config import DEFAULTS, Defaults
from locationmanager.configuration import (
    DefaultProviderConfiguration,
    DefaultProviderConfigurationBuilder,
    GPServicesConfiguration,
    GPServicesConfigurationBuilder,
    LocationConfiguration,
    LocationConfigurationBuilder,
    LocationRequest,
    PermissionConfiguration,
    PermissionConfigurationBuilder,
    Priority,
    ProviderSource,
    default_configuration,
    silent_configuration,
)
from locationmanager.providers import (
    DefaultPermissionProvider,
    PermissionProvider,
    StubPermissionProvider,
)
from locationmanager.ui import ConfigurationSummary
