from locationmanager.providers.permission import (
    DefaultPermissionProvider,
    PermissionProvider,
    StubPermissionProvider,
)
