"""Default context configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ContextConfig(BaseModel):
    """Owner/repo that bare shortlinks resolve to."""

    model_config = ConfigDict(extra="forbid")

    owner: str = Field(..., min_length=1, description="Default repository owner")
    repo: str = Field(..., min_length=1, description="Default repository name")
