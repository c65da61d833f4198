from __future__ import annotations

from fastapi import Request

from cnb_fixing import RateProvider


def get_rate_provider(request: Request) -> RateProvider:
    """Return the provider attached to the running application."""

    return request.app.state.rate_provider
