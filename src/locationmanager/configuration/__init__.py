from locationmanager.configuration.default_provider import (
    DefaultProviderConfiguration,
    DefaultProviderConfigurationBuilder,
)
from locationmanager.configuration.gp_services import (
    GPServicesConfiguration,
    GPServicesConfigurationBuilder,
)
from locationmanager.configuration.location import (
    LocationConfiguration,
    LocationConfigurationBuilder,
)
from locationmanager.configuration.model import (
    LocationRequest,
    Priority,
    ProviderSource,
)
from locationmanager.configuration.permission import (
    PermissionConfiguration,
    PermissionConfigurationBuilder,
)
from locationmanager.configuration.presets import (
    default_configuration,
    silent_configuration,
)
