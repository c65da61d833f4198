from .rates import get_rate_provider

__all__ = ["get_rate_provider"]
