import abc
from typing import Collection, Sequence

from loguru import logger


class PermissionProvider(abc.ABC):
    """Decides which permissions the location runtime should ask the user for."""

    def __init__(
        self,
        required_permissions: Sequence[str] = (),
        rationale_message: str = "",
    ) -> None:
        self._required_permissions = tuple(required_permissions)
        self._rationale_message = rationale_message or ""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        pass

    @property
    def required_permissions(self) -> tuple[str, ...]:
        return self._required_permissions

    @property
    def rationale_message(self) -> str:
        return self._rationale_message

    @property
    def should_show_rationale(self) -> bool:
        return bool(self._rationale_message)

    @abc.abstractmethod
    def permissions_to_request(self, granted: Collection[str]) -> tuple[str, ...]:
        """Return the permissions to request, given the ones already granted.

        An empty result means no request is issued.
        """

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(required_permissions={self._required_permissions!r}, "
            f"rationale_message={self._rationale_message!r})"
        )


class DefaultPermissionProvider(PermissionProvider):
    @property
    def name(self) -> str:
        return "default"

    def permissions_to_request(self, granted: Collection[str]) -> tuple[str, ...]:
        missing = tuple(p for p in self._required_permissions if p not in granted)
        if missing:
            logger.debug(f"Permissions {missing} are not granted yet.")
        return missing


class StubPermissionProvider(PermissionProvider):
    """Never asks the user; location fails silently if permissions are missing."""

    def __init__(self) -> None:
        super().__init__(required_permissions=(), rationale_message="")

    @property
    def name(self) -> str:
        return "stub"

    def permissions_to_request(self, granted: Collection[str]) -> tuple[str, ...]:
        return ()
