"""Unit tests for the root location configuration builder."""

import pytest
from pydantic import ValidationError

from locationmanager import (
    DefaultPermissionProvider,
    DefaultProviderConfiguration,
    Defaults,
    GPServicesConfiguration,
    LocationConfiguration,
    PermissionConfiguration,
    StubPermissionProvider,
)


@pytest.fixture
def default_providers() -> DefaultProviderConfiguration:
    return DefaultProviderConfiguration.builder().build()


@pytest.fixture
def gp_services() -> GPServicesConfiguration:
    return GPServicesConfiguration.builder().build()


def test_build_requires_a_provider_configuration() -> None:
    with pytest.raises(RuntimeError, match="one of the provider configurations"):
        LocationConfiguration.builder().keep_tracking(True).build()


def test_build_requires_a_provider_even_with_permission() -> None:
    permission = PermissionConfiguration.builder().build()
    builder = LocationConfiguration.builder().ask_for_permission(permission)
    with pytest.raises(RuntimeError):
        builder.build()


def test_unset_provider_after_set_fails(
    default_providers: DefaultProviderConfiguration,
) -> None:
    builder = (
        LocationConfiguration.builder()
        .use_default_providers(default_providers)
        .use_default_providers(None)
    )
    with pytest.raises(RuntimeError):
        builder.build()


def test_default_providers_only(default_providers: DefaultProviderConfiguration) -> None:
    config = LocationConfiguration.builder().use_default_providers(default_providers).build()
    assert config.default_provider_configuration is default_providers
    assert config.gp_services_configuration is None
    assert config.keep_tracking is False


def test_google_play_services_only(gp_services: GPServicesConfiguration) -> None:
    config = LocationConfiguration.builder().use_google_play_services(gp_services).build()
    assert config.gp_services_configuration is gp_services
    assert config.default_provider_configuration is None


def test_missing_permission_falls_back_to_stub(
    default_providers: DefaultProviderConfiguration,
) -> None:
    config = LocationConfiguration.builder().use_default_providers(default_providers).build()
    assert config.permission_configuration is not None
    provider = config.permission_configuration.permission_provider
    assert isinstance(provider, StubPermissionProvider)
    assert provider.permissions_to_request(granted=()) == ()


def test_permission_configuration_is_kept(
    default_providers: DefaultProviderConfiguration,
) -> None:
    permission = PermissionConfiguration.builder().rationale_message("Need it").build()
    config = (
        LocationConfiguration.builder()
        .ask_for_permission(permission)
        .use_default_providers(default_providers)
        .build()
    )
    assert config.permission_configuration is permission
    assert isinstance(
        config.permission_configuration.permission_provider, DefaultPermissionProvider
    )


def test_keep_tracking_last_value_wins(gp_services: GPServicesConfiguration) -> None:
    config = (
        LocationConfiguration.builder()
        .keep_tracking(True)
        .keep_tracking(False)
        .keep_tracking(True)
        .use_google_play_services(gp_services)
        .build()
    )
    assert config.keep_tracking is True


def test_keep_tracking_default_is_injected(gp_services: GPServicesConfiguration) -> None:
    defaults = Defaults(keep_tracking=True)
    config = (
        LocationConfiguration.builder(defaults)
        .use_google_play_services(gp_services)
        .build()
    )
    assert config.keep_tracking is True


def test_configuration_is_frozen(gp_services: GPServicesConfiguration) -> None:
    config = LocationConfiguration.builder().use_google_play_services(gp_services).build()
    with pytest.raises(ValidationError):
        config.keep_tracking = True


def test_new_builder_copies_values(
    gp_services: GPServicesConfiguration,
    default_providers: DefaultProviderConfiguration,
) -> None:
    config = (
        LocationConfiguration.builder()
        .keep_tracking(True)
        .use_google_play_services(gp_services)
        .use_default_providers(default_providers)
        .build()
    )
    copy = config.new_builder().build()
    assert copy.keep_tracking is True
    assert copy.permission_configuration is config.permission_configuration
    assert copy.gp_services_configuration is gp_services
    assert copy.default_provider_configuration is default_providers

    without_gp = config.new_builder().use_google_play_services(None).build()
    assert without_gp.gp_services_configuration is None
    assert config.gp_services_configuration is gp_services
