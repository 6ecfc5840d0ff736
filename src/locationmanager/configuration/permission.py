from typing import Sequence

from loguru import logger

from locationmanager.config import DEFAULTS, Defaults
from locationmanager.model import ConfigurationModel
from locationmanager.providers.permission import (
    DefaultPermissionProvider,
    PermissionProvider,
)


class PermissionConfiguration(ConfigurationModel):
    """How location permissions are obtained from the user."""

    permission_provider: PermissionProvider

    @classmethod
    def builder(cls, defaults: Defaults | None = None) -> "PermissionConfigurationBuilder":
        return PermissionConfigurationBuilder(defaults)

    def new_builder(self) -> "PermissionConfigurationBuilder":
        return PermissionConfigurationBuilder().permission_provider(self.permission_provider)


class PermissionConfigurationBuilder:
    def __init__(self, defaults: Defaults | None = None) -> None:
        defaults = defaults or DEFAULTS
        self._rationale_message = defaults.empty_string
        self._required_permissions = defaults.location_permissions
        self._permission_provider: PermissionProvider | None = None

    def rationale_message(self, rationale_message: str | None) -> "PermissionConfigurationBuilder":
        """Explanation shown before asking for permissions.

        If empty, no rationale is shown. Ignored when a permission provider is set.
        """
        self._rationale_message = rationale_message or ""
        return self

    def required_permissions(
        self, required_permissions: Sequence[str]
    ) -> "PermissionConfigurationBuilder":
        """Permissions to request. Ignored when a permission provider is set."""
        self._required_permissions = tuple(required_permissions)
        return self

    def permission_provider(
        self, permission_provider: PermissionProvider
    ) -> "PermissionConfigurationBuilder":
        self._permission_provider = permission_provider
        return self

    def build(self) -> PermissionConfiguration:
        permission_provider = self._permission_provider
        if permission_provider is None:
            permission_provider = DefaultPermissionProvider(
                required_permissions=self._required_permissions,
                rationale_message=self._rationale_message,
            )
        logger.debug(f"Building permission configuration with {permission_provider!r}.")
        return PermissionConfiguration(permission_provider=permission_provider)
