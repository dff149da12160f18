"""
Error taxonomy for the meter reading and price plan core.

Every failure the core can raise is a `SmartMeterError` subclass tagged with
an `ErrorKind`, so callers can branch on the kind instead of parsing
messages. None of these are transient; the boundary layer translates them
into caller-facing responses.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the core."""
    INVALID_METER_ID = "invalid_meter_id"
    INVALID_READINGS = "invalid_readings"
    NO_READINGS = "no_readings"
    RECOMMENDATION_LIMIT_EXCEEDED = "recommendation_limit_exceeded"
    INVALID_RECOMMENDATION_LIMIT = "invalid_recommendation_limit"
    ZERO_DURATION = "zero_duration"


class SmartMeterError(Exception):
    """Base class for all core failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidMeterIdError(SmartMeterError):
    """Meter id is missing or does not look like smart-meter-<digits>."""
    kind = ErrorKind.INVALID_METER_ID

    def __init__(self, smart_meter_id: Optional[str]):
        super().__init__(f"Smart meter id is not valid {smart_meter_id}")
        self.smart_meter_id = smart_meter_id


class InvalidReadingsError(SmartMeterError):
    """Readings are missing, empty, or have an incomplete element."""
    kind = ErrorKind.INVALID_READINGS

    def __init__(self, message: str = "Electricity Readings are not valid"):
        super().__init__(message)


class NoReadingsError(SmartMeterError):
    """No readings have ever been stored for the meter."""
    kind = ErrorKind.NO_READINGS

    def __init__(self, smart_meter_id: str):
        super().__init__(f"No readings were found for meter id {smart_meter_id}")
        self.smart_meter_id = smart_meter_id


class RecommendationLimitExceededError(SmartMeterError):
    """More recommendations were requested than there are price plans."""
    kind = ErrorKind.RECOMMENDATION_LIMIT_EXCEEDED

    def __init__(self, max_limit: int):
        super().__init__(f"Cannot display more than {max_limit} plan recommendations")
        self.max_limit = max_limit


class InvalidRecommendationLimitError(SmartMeterError):
    """Requested limit is below one."""
    kind = ErrorKind.INVALID_RECOMMENDATION_LIMIT

    def __init__(self, limit: int):
        super().__init__(f"Recommendation limit must be at least 1, got {limit}")
        self.limit = limit


class ZeroDurationError(SmartMeterError):
    """All readings share one timestamp, so no average over time exists."""
    kind = ErrorKind.ZERO_DURATION

    def __init__(self, smart_meter_id: str):
        super().__init__(
            f"Readings for meter id {smart_meter_id} span no time; "
            "at least two distinct timestamps are needed to compute an average cost")
        self.smart_meter_id = smart_meter_id
