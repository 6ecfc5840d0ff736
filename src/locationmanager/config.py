from pydantic import BaseModel, ConfigDict

SECOND = 1000
MINUTE = 60 * SECOND


class Defaults(BaseModel):
    """Initial values every configuration builder is seeded from."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    location_interval: int = 5 * MINUTE
    location_distance_interval: int = 0
    min_accuracy: float = 5.0
    time_period: int = 5 * MINUTE
    wait_period: int = 20 * SECOND
    empty_string: str = ""
    keep_tracking: bool = False
    location_permissions: tuple[str, ...] = (
        "android.permission.ACCESS_COARSE_LOCATION",
        "android.permission.ACCESS_FINE_LOCATION",
    )


DEFAULTS = Defaults()
