"""Unit tests for permission providers and the permission configuration."""

from locationmanager import (
    DEFAULTS,
    DefaultPermissionProvider,
    PermissionConfiguration,
    StubPermissionProvider,
)

FINE = "android.permission.ACCESS_FINE_LOCATION"
COARSE = "android.permission.ACCESS_COARSE_LOCATION"


def test_stub_provider_never_requests() -> None:
    provider = StubPermissionProvider()
    assert provider.name == "stub"
    assert provider.permissions_to_request(granted=()) == ()
    assert provider.permissions_to_request(granted=[FINE]) == ()
    assert not provider.should_show_rationale


def test_default_provider_requests_missing_permissions() -> None:
    provider = DefaultPermissionProvider([COARSE, FINE], rationale_message="Why")
    assert provider.name == "default"
    assert provider.permissions_to_request(granted=()) == (COARSE, FINE)
    assert provider.permissions_to_request(granted={COARSE}) == (FINE,)
    assert provider.permissions_to_request(granted=[COARSE, FINE]) == ()
    assert provider.should_show_rationale


def test_builder_defaults_to_location_permissions() -> None:
    config = PermissionConfiguration.builder().build()
    provider = config.permission_provider
    assert isinstance(provider, DefaultPermissionProvider)
    assert provider.required_permissions == DEFAULTS.location_permissions
    assert provider.rationale_message == ""


def test_builder_passes_rationale_and_permissions() -> None:
    config = (
        PermissionConfiguration.builder()
        .rationale_message("We need your location")
        .required_permissions([FINE])
        .build()
    )
    provider = config.permission_provider
    assert provider.required_permissions == (FINE,)
    assert provider.rationale_message == "We need your location"


def test_explicit_provider_is_used() -> None:
    stub = StubPermissionProvider()
    config = (
        PermissionConfiguration.builder()
        .rationale_message("ignored")
        .permission_provider(stub)
        .build()
    )
    assert config.permission_provider is stub
    assert config.new_builder().build().permission_provider is stub


def test_stub_provider_has_no_permissions_or_rationale() -> None:
    provider = StubPermissionProvider()
    assert provider.required_permissions == ()
    assert provider.rationale_message == ""
