"""Batch predictions through a custom backend's bulk route."""
import logging
import mimetypes
from pathlib import Path
from typing import Optional, Union

import aiohttp

from legitmate.exceptions import BackendNotConfiguredError, BackendResponseError
from legitmate.models import PredictionResult
from legitmate.pipeline.http import post_form
from legitmate.pipeline.normalizer import normalize

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".csv": "text/csv",
    ".json": "application/json",
}


class BulkDispatcher:
    """Upload a CSV or JSON file of postings to ``{api_base}/predict-bulk``.

    There is no fallback: a custom backend must be configured, and HTTP
    failures are raised to the caller.
    """

    ROUTE = "predict-bulk"

    def __init__(self, timeout: float = 120.0):
        self.timeout = timeout

    async def dispatch(
        self,
        file: Union[str, Path, bytes],
        api_base: str,
        session: Optional[aiohttp.ClientSession] = None,
        filename: Optional[str] = None,
    ) -> list[PredictionResult]:
        """
        Submit a batch file and return one result per posting, in order.

        Args:
            file: Path to the batch file, or its raw bytes
            api_base: Custom backend base URL; empty is a configuration error
            session: Optional session to reuse
            filename: Upload filename when passing raw bytes

        Returns:
            List of PredictionResult in the order the backend returned them

        Raises:
            BackendNotConfiguredError: If no custom backend is configured
            BackendHTTPError: On a non-success status
            BackendResponseError: If the body is not a JSON list
        """
        api_base = (api_base or "").strip().rstrip("/")
        if not api_base:
            raise BackendNotConfiguredError()

        content, filename = self._read(file, filename)
        form = aiohttp.FormData()
        form.add_field(
            "file",
            content,
            filename=filename,
            content_type=self._content_type(filename),
        )

        url = f"{api_base}/{self.ROUTE}"
        logger.info("Submitting %s (%d bytes) to %s", filename, len(content), url)

        timeout = aiohttp.ClientTimeout(total=self.timeout)
        if session is not None:
            data = await post_form(session, url, form, timeout=timeout)
        else:
            async with aiohttp.ClientSession() as own_session:
                data = await post_form(own_session, url, form, timeout=timeout)

        if not isinstance(data, list):
            raise BackendResponseError(
                f"Expected a JSON list from {url}, got {type(data).__name__}"
            )

        results = [normalize(item) for item in data]
        logger.info("Bulk prediction returned %d results", len(results))
        return results

    def _read(self, file: Union[str, Path, bytes], filename: Optional[str]) -> tuple[bytes, str]:
        if isinstance(file, (bytes, bytearray)):
            return bytes(file), filename or "upload.csv"
        path = Path(file)
        return path.read_bytes(), filename or path.name

    def _content_type(self, filename: str) -> str:
        suffix = Path(filename).suffix.lower()
        if suffix in CONTENT_TYPES:
            return CONTENT_TYPES[suffix]
        guessed, _ = mimetypes.guess_type(filename)
        return guessed or "application/octet-stream"
