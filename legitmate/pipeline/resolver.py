"""Backend resolution: custom endpoint, then hosted service, then local heuristic."""
import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Union

import aiohttp

from legitmate.exceptions import PredictionError
from legitmate.models import JobInput, PredictionResult
from legitmate.pipeline.backends import (
    BaseBackend,
    CustomEndpointBackend,
    HostedServiceBackend,
    LocalHeuristicBackend,
)
from legitmate.pipeline.bulk import BulkDispatcher
from legitmate.scoring import UrlRiskScorer, get_scorer, load_lexicon

logger = logging.getLogger(__name__)

Attempt = Callable[[], Awaitable[PredictionResult]]


class RequestKind(str, Enum):
    """Prediction routes, named after the backend URL paths."""

    PREDICT = "predict"
    PREDICT_LINK = "predict-link"
    PREDICT_BULK = "predict-bulk"


@dataclass(frozen=True)
class PredictionContext:
    """Per-request configuration, captured once when a request starts."""

    api_base: str = ""
    api_key: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "api_base", (self.api_base or "").strip().rstrip("/"))

    @property
    def has_custom_backend(self) -> bool:
        return bool(self.api_base)

    @classmethod
    def from_settings(cls, settings) -> "PredictionContext":
        return cls(api_base=settings.api_base, api_key=settings.api_key)


@dataclass
class TierOutcome:
    """Result of one resolution attempt: either a result or the error."""

    tier: str
    result: Optional[PredictionResult] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class BackendResolver:
    """Decide which backend answers each prediction request.

    Single predictions never raise: remote tiers are tried in order and any
    failure hands over to the next one, ending with the local heuristic.
    Bulk predictions have no fallback and raise on failure.
    """

    def __init__(
        self,
        local: Optional[LocalHeuristicBackend] = None,
        *,
        hosted_token: Optional[str] = None,
        timeout: float = 15.0,
        bulk: Optional[BulkDispatcher] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize backend resolver.

        Args:
            local: Last-resort heuristic tier
            hosted_token: Bearer token for the hosted scoring service
            timeout: Deadline in seconds for each remote tier
            bulk: Dispatcher for batch files
            session: Optional shared session; one is opened per request otherwise
        """
        self.local = local or LocalHeuristicBackend()
        self.hosted_token = hosted_token
        self.timeout = timeout
        self.bulk = bulk or BulkDispatcher()
        self.session = session

    @classmethod
    def from_settings(
        cls,
        settings,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> "BackendResolver":
        """Build a resolver from application settings."""
        lexicon = load_lexicon(settings.lexicon_path)
        local = LocalHeuristicBackend(
            scorer=get_scorer(settings.local_scoring_strategy, lexicon),
            url_scorer=UrlRiskScorer(lexicon),
            delay=settings.fallback_delay_seconds,
            link_delay=settings.link_fallback_delay_seconds,
        )
        return cls(
            local,
            hosted_token=settings.hosted_service_token,
            timeout=settings.request_timeout_seconds,
            session=session,
        )

    async def predict(
        self, job: Union[JobInput, Mapping], context: Optional[PredictionContext] = None
    ) -> PredictionResult:
        return await self.resolve(RequestKind.PREDICT, job, context)

    async def predict_link(
        self, url: str, context: Optional[PredictionContext] = None
    ) -> PredictionResult:
        return await self.resolve(RequestKind.PREDICT_LINK, url, context)

    async def predict_bulk(
        self, file: Union[str, Path, bytes], context: Optional[PredictionContext] = None
    ) -> list[PredictionResult]:
        return await self.resolve(RequestKind.PREDICT_BULK, file, context)

    async def resolve(
        self,
        kind: Union[RequestKind, str],
        payload: Any,
        context: Optional[PredictionContext] = None,
    ) -> Union[PredictionResult, list[PredictionResult]]:
        """
        Answer a prediction request from the first tier that succeeds.

        Args:
            kind: Route to resolve
            payload: JobInput (or mapping) for predict, URL for predict-link,
                file path or bytes for predict-bulk
            context: Per-request configuration; defaults to no custom backend

        Returns:
            PredictionResult, or a list of them for predict-bulk

        Raises:
            BackendNotConfiguredError: Bulk requested without a custom backend
            BackendHTTPError, BackendResponseError: Bulk request failed
        """
        kind = RequestKind(kind)
        context = context or PredictionContext()

        if kind is RequestKind.PREDICT_BULK:
            return await self.bulk.dispatch(payload, context.api_base, session=self.session)

        if kind is RequestKind.PREDICT:
            payload = _as_job(payload)
        else:
            payload = str(payload or "")

        if self.session is not None:
            return await self._resolve_single(self.session, kind, payload, context)
        async with aiohttp.ClientSession() as session:
            return await self._resolve_single(session, kind, payload, context)

    async def _resolve_single(
        self,
        session: aiohttp.ClientSession,
        kind: RequestKind,
        payload: Union[JobInput, str],
        context: PredictionContext,
    ) -> PredictionResult:
        for tier, attempt in self.remote_attempts(session, kind, payload, context):
            outcome = await self._attempt(tier, attempt)
            if outcome.ok:
                logger.info("%s answered by %s tier", kind.value, tier)
                return outcome.result

        logger.info("%s answered by local heuristic", kind.value)
        return await self._call(self.local, session, kind, payload)

    def remote_attempts(
        self,
        session: aiohttp.ClientSession,
        kind: RequestKind,
        payload: Union[JobInput, str],
        context: PredictionContext,
    ) -> list[tuple[str, Attempt]]:
        """Remote tiers to try for this request, in order."""
        backends: list[BaseBackend] = []
        if context.has_custom_backend:
            backends.append(CustomEndpointBackend(context.api_base, timeout=self.timeout))
        backends.append(
            HostedServiceBackend(
                api_key=context.api_key,
                token=self.hosted_token,
                timeout=self.timeout,
            )
        )
        return [
            (backend.name, lambda backend=backend: self._call(backend, session, kind, payload))
            for backend in backends
        ]

    async def _attempt(self, tier: str, attempt: Attempt) -> TierOutcome:
        """Run one tier under the deadline, converting any failure to an outcome."""
        try:
            result = await asyncio.wait_for(attempt(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning("%s tier timed out after %.1fs", tier, self.timeout)
            return TierOutcome(tier, error=e)
        except (PredictionError, aiohttp.ClientError) as e:
            logger.warning("%s tier failed: %s", tier, e)
            return TierOutcome(tier, error=e)
        except Exception as e:
            logger.warning("%s tier failed unexpectedly: %s", tier, e, exc_info=True)
            return TierOutcome(tier, error=e)
        return TierOutcome(tier, result=result)

    @staticmethod
    def _call(
        backend: BaseBackend,
        session: aiohttp.ClientSession,
        kind: RequestKind,
        payload: Union[JobInput, str],
    ) -> Awaitable[PredictionResult]:
        if kind is RequestKind.PREDICT:
            return backend.predict(session, payload)
        return backend.predict_link(session, payload)


def _as_job(payload: Union[JobInput, Mapping, None]) -> JobInput:
    """Accept a JobInput or a loose mapping of its fields."""
    if isinstance(payload, JobInput):
        return payload
    data = payload if isinstance(payload, Mapping) else {}
    return JobInput(
        title=str(data.get("title") or ""),
        company=str(data.get("company") or ""),
        description=str(data.get("description") or ""),
        location=data.get("location"),
        department=data.get("department"),
    )
