"""Service calendar helpers."""

from datetime import date, datetime

from profile_api.config import get_settings


def service_today() -> date:
    """Get today's date in the configured service time zone."""
    return datetime.now(get_settings().zone).date()
