"""
Submission error types and their user-facing messages.

Raw exceptions are for the logs; end users only ever see the short strings
returned by `describe_error`.
"""

from __future__ import annotations

from typing import Any


class SubmissionError(Exception):
    """Base class for everything the delivery pipeline raises."""


class ConfigurationError(SubmissionError):
    """Static misconfiguration (e.g. no endpoint); never retried."""


class SubmissionInProgressError(SubmissionError):
    """A submission is already in flight for this session."""


class TransportError(SubmissionError):
    """A single failed delivery attempt; retried up to the limit."""

    kind = "unknown"


class TransportTimeoutError(TransportError):
    kind = "timeout"


class TransportNetworkError(TransportError):
    kind = "network"


class UnknownTransportError(TransportError):
    kind = "unknown"


class SubmissionFailedError(SubmissionError):
    """Every attempt failed."""

    def __init__(self, attempts: int, last_error: BaseException | None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        detail = str(last_error) if last_error else "Unknown error"
        super().__init__(
            f"Form submission failed after {attempts} attempts: {detail}"
        )


TIMEOUT_MESSAGE = (
    "The server took too long to respond. Please check your connection and try again."
)
NETWORK_MESSAGE = (
    "Unable to connect to the server. Please check your internet connection."
)
CONFIGURATION_MESSAGE = "Form is not properly configured. Please contact support."
GENERIC_MESSAGE = (
    "An error occurred while submitting your response. Please try again."
)


def describe_error(error: Any) -> str:
    """Map an error (or its message) to a short message for the respondent."""
    try:
        message = str(error) if error is not None else ""
    except Exception:
        message = ""

    if "timeout" in message:
        return TIMEOUT_MESSAGE
    if "Network error" in message:
        return NETWORK_MESSAGE
    if "not configured" in message:
        return CONFIGURATION_MESSAGE
    return GENERIC_MESSAGE
