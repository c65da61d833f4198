"""Pydantic schema exports."""

from .currency import ConversionResponse, CurrencySchema, ErrorResponse, HealthResponse

__all__ = [
    "ConversionResponse",
    "CurrencySchema",
    "ErrorResponse",
    "HealthResponse",
]
