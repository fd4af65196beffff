"""Scoring backends tried by the resolver, in tier order."""
import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import aiohttp

from legitmate.models import JobInput, PredictionResult
from legitmate.pipeline.http import post_json
from legitmate.pipeline.normalizer import normalize
from legitmate.scoring import Scorer, TextRiskScorer, UrlRiskScorer

logger = logging.getLogger(__name__)


class BaseBackend(ABC):
    """Abstract base class for scoring backends."""

    name: str = "base"

    @abstractmethod
    async def predict(self, session: aiohttp.ClientSession, job: JobInput) -> PredictionResult:
        """Score a structured job posting."""
        pass

    @abstractmethod
    async def predict_link(self, session: aiohttp.ClientSession, url: str) -> PredictionResult:
        """Score a job posting link."""
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class CustomEndpointBackend(BaseBackend):
    """A prediction API the user runs and configures by base URL."""

    name = "custom"

    def __init__(self, api_base: str, timeout: float = 15.0):
        """
        Initialize custom endpoint backend.

        Args:
            api_base: Base URL, routes are appended to it
            timeout: Request timeout in seconds
        """
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def route(self, name: str) -> str:
        return f"{self.api_base}/{name}"

    async def predict(self, session: aiohttp.ClientSession, job: JobInput) -> PredictionResult:
        data = await post_json(
            session,
            self.route("predict"),
            json=job.to_payload(),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )
        return normalize(data)

    async def predict_link(self, session: aiohttp.ClientSession, url: str) -> PredictionResult:
        data = await post_json(
            session,
            self.route("predict-link"),
            json={"url": url},
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )
        return normalize(data)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.api_base}>"


class HostedServiceBackend(BaseBackend):
    """The built-in hosted scoring service.

    The service runs the structured heuristic and reports confidence as a
    whole percentage with lower-case verdicts. When an account API key is
    supplied it also records the prediction against that account.
    """

    name = "hosted"
    BASE_URL = "https://cilgwgzengkdgerdztdx.supabase.co/functions/v1"

    def __init__(
        self,
        api_key: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 15.0,
    ):
        """
        Initialize hosted service backend.

        Args:
            api_key: Account API key used by the service to store history
            token: Bearer token for the service gateway
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.token = token
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _body(self, **fields) -> dict:
        if self.api_key:
            fields["apiKey"] = self.api_key
        return fields

    async def predict(self, session: aiohttp.ClientSession, job: JobInput) -> PredictionResult:
        data = await post_json(
            session,
            f"{self.BASE_URL}/predict",
            json=self._body(job=job.to_payload()),
            headers=self._headers(),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )
        return normalize(data)

    async def predict_link(self, session: aiohttp.ClientSession, url: str) -> PredictionResult:
        data = await post_json(
            session,
            f"{self.BASE_URL}/predict-link",
            json=self._body(url=url),
            headers=self._headers(),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )
        return normalize(data)


class LocalHeuristicBackend(BaseBackend):
    """On-device heuristic, the last resolution tier. Never fails."""

    name = "local"

    def __init__(
        self,
        scorer: Optional[Scorer] = None,
        url_scorer: Optional[UrlRiskScorer] = None,
        delay: float = 0.0,
        link_delay: float = 0.0,
    ):
        """
        Initialize local heuristic backend.

        Args:
            scorer: Strategy for structured postings (raw-text heuristic by default)
            url_scorer: Strategy for links
            delay: Seconds to wait before answering a job prediction
            link_delay: Seconds to wait before answering a link prediction
        """
        self.scorer = scorer or TextRiskScorer()
        self.url_scorer = url_scorer or UrlRiskScorer()
        self.delay = delay
        self.link_delay = link_delay

    async def predict(self, session: Optional[aiohttp.ClientSession], job: JobInput) -> PredictionResult:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return self.scorer.score(job)

    async def predict_link(self, session: Optional[aiohttp.ClientSession], url: str) -> PredictionResult:
        if self.link_delay > 0:
            await asyncio.sleep(self.link_delay)
        return self.url_scorer.score_url(url)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.scorer.name}>"
