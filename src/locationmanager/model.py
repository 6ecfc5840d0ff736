from pydantic import BaseModel, ConfigDict


class ConfigurationModel(BaseModel):
    """Base model for setting global options on built configurations."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )
