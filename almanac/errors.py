class AlmanacError(Exception):
    """Base exception for Almanac errors."""


class ConfigError(AlmanacError):
    """Raised for invalid configuration values."""


class HourAngleUndefined(AlmanacError, ArithmeticError):
    """Raised when the Sun never crosses the standard horizon altitude."""

    def __init__(self, ratio: float, message: str):
        super().__init__(message)
        self.ratio = ratio


class PolarDayCondition(HourAngleUndefined):
    """Raised when the Sun never sets at this latitude and date."""


class PolarNightCondition(HourAngleUndefined):
    """Raised when the Sun never rises at this latitude and date."""
