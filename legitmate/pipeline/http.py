"""HTTP helpers shared by the remote scoring backends."""
import logging
from typing import Any

import aiohttp

from legitmate.exceptions import BackendHTTPError, BackendResponseError

logger = logging.getLogger(__name__)


def is_success(status: int) -> bool:
    return 200 <= status < 300


async def post_json(session: aiohttp.ClientSession, url: str, **kwargs) -> Any:
    """POST a JSON request once and return parsed JSON.

    There is no retry: a failing backend hands over to the next tier.

    Raises:
        BackendHTTPError: On a non-success status
        BackendResponseError: If the body is not valid JSON
        aiohttp.ClientError, asyncio.TimeoutError: On transport failures
    """
    async with session.post(url, **kwargs) as resp:
        if not is_success(resp.status):
            logger.debug("HTTP %d from %s", resp.status, url)
            raise BackendHTTPError(resp.status, url)
        return await _read_json(resp, url)


async def post_form(
    session: aiohttp.ClientSession,
    url: str,
    form: aiohttp.FormData,
    **kwargs,
) -> Any:
    """POST a multipart form once and return parsed JSON.

    Raises:
        BackendHTTPError: On a non-success status
        BackendResponseError: If the body is not valid JSON
    """
    return await post_json(session, url, data=form, **kwargs)


async def _read_json(resp: aiohttp.ClientResponse, url: str) -> Any:
    try:
        # Custom endpoints do not always label JSON correctly
        return await resp.json(content_type=None)
    except ValueError as e:
        raise BackendResponseError(f"Invalid JSON from {url}: {e}") from e
