"""Main Config model."""

from pydantic import BaseModel, Field

from .permissions_config import PermissionsConfig


class Config(BaseModel):
    """Main configuration model."""

    permissions: PermissionsConfig = Field(
        default_factory=PermissionsConfig,
        description="Permission engine settings",
    )
