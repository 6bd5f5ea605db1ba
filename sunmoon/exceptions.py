"""
sunmoon Custom Exceptions

Provides the domain-specific exception hierarchy for the sunmoon ephemeris
library. Each exception also derives from the builtin exception that
describes the same failure, so callers catching ``ValueError`` or
``ArithmeticError`` keep working.

Exception Hierarchy:
    SunmoonError (base)
    ├── ConfigurationError
    ├── RangeError (ValueError)
    ├── InvalidArgumentError (ValueError)
    ├── IndexOutOfRangeError (IndexError)
    └── NoRootFoundError (ArithmeticError)
"""

from typing import Any, Optional


class SunmoonError(Exception):
    """Base exception for all sunmoon errors.

    Attributes:
        message: Human-readable error description
        details: Optional dict with additional error context
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(SunmoonError):
    """Error in configuration file or computation settings.

    Raised when a configuration file is missing or malformed, when its values
    fail validation, or when a negative calculation window is requested.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_file: Optional[str] = None,
    ) -> None:
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_file:
            details["config_file"] = config_file
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file


# =============================================================================
# Argument Errors
# =============================================================================

class RangeError(SunmoonError, ValueError):
    """A location parameter is outside of its valid domain.

    Raised for latitudes outside [-90, 90], longitudes outside [-180, 180]
    and coordinate arrays that do not hold 2 or 3 values.
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Any = None,
    ) -> None:
        details = {}
        if parameter:
            details[parameter] = value
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value


class InvalidArgumentError(SunmoonError, ValueError):
    """A fixed-size sequence was built from the wrong number of values."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None) -> None:
        details = {}
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__(message, details)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(SunmoonError, IndexError):
    """Matrix row or column index outside of 0..2."""

    def __init__(self, row: int, column: int) -> None:
        super().__init__(f"row/column out of range: {row}:{column}")
        self.row = row
        self.column = column


# =============================================================================
# Numeric Errors
# =============================================================================

class NoRootFoundError(SunmoonError, ArithmeticError):
    """The root finder could not locate a root in the given interval.

    Either the function does not change its sign between the interval
    bounds, or the iteration limit was exhausted before converging.
    """

    def __init__(
        self,
        message: str,
        lower: Optional[float] = None,
        upper: Optional[float] = None,
    ) -> None:
        details = {}
        if lower is not None:
            details["lower"] = lower
        if upper is not None:
            details["upper"] = upper
        super().__init__(message, details)
        self.lower = lower
        self.upper = upper
