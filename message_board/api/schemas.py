from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SaveMessageRequest(BaseModel):
    """JSON body accepted by ``POST /save``."""

    message: Optional[str] = Field(default=None, description="Text to append; empty falls back to 'Empty message'")


class HealthResponse(BaseModel):
    status: str = "ok"
