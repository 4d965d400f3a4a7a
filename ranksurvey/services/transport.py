"""
Resilient delivery of a normalized payload to the remote collection endpoint.

The endpoint is treated as opaque: the response status is never inspected,
so "success" means the request completed without the client raising.
Attempts are strictly sequential, each bounded by a deadline, with a linear
backoff between them.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing, contextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Iterator, Optional

import httpx

from ranksurvey.core.config import settings
from ranksurvey.schemas.survey import SubmissionPayload
from ranksurvey.services.errors import (
    ConfigurationError,
    SubmissionFailedError,
    SubmissionInProgressError,
    TransportError,
    TransportNetworkError,
    TransportTimeoutError,
    UnknownTransportError,
)


logger = logging.getLogger(__name__)

RetryCallback = Callable[[int, TransportError, int], None]


@dataclass(frozen=True)
class AttemptEvent:
    attempt: int
    error: Optional[TransportError] = None
    # 0 after the last attempt and after a success.
    next_delay_ms: int = 0
    succeeded: bool = False


def classify_failure(exc: BaseException, timeout_ms: int) -> TransportError:
    """Turn a raw client failure into one of the retryable transport errors."""
    if isinstance(exc, TransportError):
        return exc
    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return TransportTimeoutError(f"Request timeout after {timeout_ms}ms")
    if isinstance(exc, (httpx.TransportError, OSError)):
        return TransportNetworkError("Network error - unable to reach server")
    return UnknownTransportError(str(exc) or type(exc).__name__)


class SubmissionGuard:
    """
    Busy flag allowing one in-flight submission at a time.

    Hold it for the whole attempt sequence; it is released on success,
    failure and cancellation alike.
    """

    def __init__(self) -> None:
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    @contextmanager
    def hold(self) -> Iterator["SubmissionGuard"]:
        if self._busy:
            raise SubmissionInProgressError("A submission is already in progress")
        self._busy = True
        try:
            yield self
        finally:
            self._busy = False


class SubmissionTransport:
    """POSTs JSON payloads with timeout, retry and linear backoff."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._owns_client = client is None
        # Deadlines are enforced per attempt below, not by the client.
        self._client = client or httpx.AsyncClient(timeout=None, follow_redirects=True)
        self._sleep = sleep

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SubmissionTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def attempts(
        self,
        payload: SubmissionPayload | Dict[str, Any],
        endpoint: str | None,
        max_retries: int | None = None,
        timeout_ms: int | None = None,
        initial_retry_delay_ms: int | None = None,
    ) -> AsyncIterator[AttemptEvent]:
        """
        Run the attempt sequence, yielding one event per attempt outcome.

        Failure events carry the classified error and the delay before the
        next attempt. The sequence ends after a succeeded event, or raises
        SubmissionFailedError once the last failure event has been consumed.
        A missing endpoint raises ConfigurationError without any attempt.
        """
        if not endpoint:
            raise ConfigurationError("Submission endpoint URL is not configured")

        if max_retries is None:
            max_retries = settings.SUBMIT_MAX_RETRIES
        if timeout_ms is None:
            timeout_ms = settings.SUBMIT_TIMEOUT_MS
        if initial_retry_delay_ms is None:
            initial_retry_delay_ms = settings.SUBMIT_INITIAL_RETRY_DELAY_MS
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        body = payload.to_wire() if isinstance(payload, SubmissionPayload) else payload

        for attempt in range(1, max_retries + 1):
            try:
                await self._post(endpoint, body, timeout_ms)
            except Exception as exc:
                error = classify_failure(exc, timeout_ms)
                logger.warning(
                    "Submission attempt %d/%d failed (%s): %s",
                    attempt,
                    max_retries,
                    error.kind,
                    exc,
                )
                if attempt == max_retries:
                    yield AttemptEvent(attempt=attempt, error=error)
                    raise SubmissionFailedError(attempt, error) from exc

                delay_ms = initial_retry_delay_ms * attempt
                yield AttemptEvent(attempt=attempt, error=error, next_delay_ms=delay_ms)
                await self._sleep(delay_ms / 1000)
                continue

            logger.info("Form submitted successfully (attempt %d)", attempt)
            yield AttemptEvent(attempt=attempt, succeeded=True)
            return

    async def submit(
        self,
        payload: SubmissionPayload | Dict[str, Any],
        endpoint: str | None,
        max_retries: int | None = None,
        timeout_ms: int | None = None,
        initial_retry_delay_ms: int | None = None,
        on_retry: RetryCallback | None = None,
    ) -> bool:
        """Deliver `payload`, calling `on_retry(attempt, error, delay_ms)` per failure."""
        succeeded = False
        events = self.attempts(
            payload,
            endpoint,
            max_retries=max_retries,
            timeout_ms=timeout_ms,
            initial_retry_delay_ms=initial_retry_delay_ms,
        )
        async with aclosing(events):
            async for event in events:
                if event.succeeded:
                    succeeded = True
                elif on_retry is not None:
                    on_retry(event.attempt, event.error, event.next_delay_ms)
        return succeeded

    async def _post(self, endpoint: str, body: Dict[str, Any], timeout_ms: int) -> None:
        response = await asyncio.wait_for(
            self._client.post(
                endpoint,
                json=body,
                headers={"Content-Type": "application/json"},
            ),
            timeout=timeout_ms / 1000,
        )
        logger.debug("Endpoint answered with status %s", response.status_code)
