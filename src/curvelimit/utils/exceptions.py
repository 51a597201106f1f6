"""Custom exceptions for curve speed limit computations."""


class CurveLimitError(Exception):
    """Base exception for curve speed limit errors."""


class ConfigurationError(CurveLimitError):
    """Raised when vehicle parameters or solver configuration are invalid."""


class DomainError(CurveLimitError):
    """Raised when the curve geometry admits no valid tire angle."""


class SearchCancelledError(CurveLimitError):
    """Raised when a speed search is cancelled between bisection iterations."""
