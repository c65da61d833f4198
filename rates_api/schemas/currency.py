from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CurrencySchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"country": "USA", "code": "USD", "rate": 23.5}},
    )

    country: str
    code: str = Field(..., examples=["USD"])
    rate: float = Field(..., gt=0)


class ConversionResponse(BaseModel):
    result: float


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    timezone: str
    last_refreshed_at: Optional[datetime] = None
    cache_valid: bool
    refresh_in_progress: bool


__all__ = [
    "ConversionResponse",
    "CurrencySchema",
    "ErrorResponse",
    "HealthResponse",
]
