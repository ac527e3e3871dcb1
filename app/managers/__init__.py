from app.managers.rate_limiter import get_identifier, limiter, rate_limit_exceeded_handler

__all__ = ["get_identifier", "limiter", "rate_limit_exceeded_handler"]
