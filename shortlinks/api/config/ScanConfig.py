"""Scan configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    overflow: Literal["reject", "saturate"] = Field(
        "reject", description="Handling of issue numbers above the maximum"
    )
