"""Pydantic schemas for user-supplied message content."""

from typing import Any

from pydantic import BaseModel, Field


class CustomPayload(BaseModel):
    """Pre-built Block Kit content that replaces the generated message."""
    blocks: list[dict[str, Any]] = Field(..., description="Block Kit blocks, sent verbatim")

    model_config = {"extra": "allow"}
