"""Prediction pipeline exceptions for LegitMate."""
from typing import Optional


class PredictionError(Exception):
    """Base exception for prediction pipeline errors."""

    pass


class BackendNotConfiguredError(PredictionError):
    """Raised when a request needs a custom backend and none is configured."""

    def __init__(self, message: str = "Set API Base URL to use bulk predictions"):
        super().__init__(message)


class BackendHTTPError(PredictionError):
    """Raised when a backend answers with a non-success status."""

    def __init__(self, status: int, url: Optional[str] = None):
        self.status = status
        self.url = url
        super().__init__(f"HTTP {status}")


class BackendResponseError(PredictionError):
    """Raised when a backend response body cannot be used."""

    pass


class InvalidJobInputError(PredictionError):
    """Raised when a submission is missing required fields or is malformed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid submission: " + "; ".join(errors))
