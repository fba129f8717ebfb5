"""Pydantic payloads delivered to grid listeners."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GridSizeChange(BaseModel):
    """Raised after a resize so renderers and cameras can reframe the grid."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0, description="Logical width (rows)")
    height: int = Field(..., gt=0, description="Logical height (columns)")
    bordered_width: int = Field(..., description="Width including the sentinel border")
    bordered_height: int = Field(..., description="Height including the sentinel border")
