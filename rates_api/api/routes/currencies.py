"""Conversion and listing endpoints backed by the daily fixing."""

from __future__ import annotations

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query

from cnb_fixing import CurrencyRecord, FixingError, RateProvider, convert_amount, find_record
from rates_api.api.dependencies import get_rate_provider
from rates_api.api.errors import InvalidParameterError, ServiceFailure, UnknownCurrencyError
from rates_api.schemas import ConversionResponse, CurrencySchema, ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _parse_amount(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        raise InvalidParameterError("You must provide amount")
    try:
        amount = float(raw)
    except ValueError:
        raise InvalidParameterError("Provided amount is not a number") from None
    if not math.isfinite(amount):
        raise InvalidParameterError("Provided amount is not a number")
    return amount


async def _load_rates(provider: RateProvider) -> list[CurrencyRecord]:
    try:
        return await provider.get_rates()
    except FixingError as exc:
        logger.error("Exchange rates unavailable: %s", exc)
        raise ServiceFailure() from exc
    except Exception as exc:
        logger.error("Unexpected error while loading exchange rates", exc_info=True)
        raise ServiceFailure() from exc


@router.get("/convert", response_model=ConversionResponse, responses=_ERROR_RESPONSES)
async def convert(
    amount: Optional[str] = Query(default=None, description="Amount to convert"),
    code: Optional[str] = Query(default=None, description="Currency code, e.g. USD"),
    provider: RateProvider = Depends(get_rate_provider),
) -> ConversionResponse:
    value = _parse_amount(amount)
    if code is None or not code.strip():
        raise InvalidParameterError("You must provide code")

    records = await _load_rates(provider)
    record = find_record(records, code)
    if record is None:
        logger.info("Conversion requested for unknown code %r", code)
        raise UnknownCurrencyError(code)
    return ConversionResponse(result=convert_amount(value, record))


@router.get("/currencies", response_model=list[CurrencySchema], responses={500: {"model": ErrorResponse}})
async def list_currencies(provider: RateProvider = Depends(get_rate_provider)) -> list[CurrencySchema]:
    records = await _load_rates(provider)
    return [CurrencySchema.model_validate(record) for record in records]


__all__ = ["router"]
