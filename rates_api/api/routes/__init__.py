"""Route registration helpers."""

from __future__ import annotations

from fastapi import APIRouter

from .currencies import router as currencies_router

api_router = APIRouter()
api_router.include_router(currencies_router, prefix="/api", tags=["currencies"])

__all__ = ["api_router"]
