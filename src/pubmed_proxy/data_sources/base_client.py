"""
Base client for upstream data source clients.

Provides: aiohttp session lifecycle, JSON and XML GET helpers,
structured request logging, and a single error type for upstream failures.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from pubmed_proxy.constants import DEFAULT_TIMEOUT

logger = logging.getLogger("pubmed_proxy.data_sources")


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "pubmed"
    method: str  # e.g. "search", "fetch_article_xml"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for upstream API clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()` for JSON endpoints or `_rest_get_xml()` for XML ones.
    Each call is one HTTP request: no retries, no caching.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_TIMEOUT):
        self.timeout_seconds = timeout_seconds
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'pubmed'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request --------------------------------------------------------

    async def _get(
        self,
        url: str,
        params: dict[str, Any],
        *,
        as_json: bool,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Make one GET request and return the decoded body.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict
            Query string parameters.
        as_json : bool
            Decode the body as JSON when True, return raw text otherwise.
        context : RequestContext, optional
            Logging context.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        start = time.monotonic()

        logger.info(
            "Request [%s.%s] url=%s params=%s", ctx.source, ctx.method, url, ctx.params
        )

        try:
            session = await self._get_session()
            resp = await session.get(url, params=params)

            if resp.status >= 400:
                body = await resp.text()
                raise DataSourceError(
                    ctx.source,
                    f"HTTP {resp.status}: {body[:500]}",
                    status_code=resp.status,
                )

            if as_json:
                # esummary/esearch answer with text/plain on some mirrors
                try:
                    data = await resp.json(content_type=None)
                except ValueError as e:
                    raise DataSourceError(
                        ctx.source, f"Invalid JSON in response: {e}"
                    ) from e
            else:
                data = await resp.text()

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise DataSourceError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s.%s]: %s", ctx.source, ctx.method, e)
            raise DataSourceError(ctx.source, f"Connection error: {e}") from e

        logger.info(
            "Success [%s.%s] elapsed=%.2fs",
            ctx.source,
            ctx.method,
            time.monotonic() - start,
        )
        return data

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any],
        *,
        context: RequestContext | None = None,
    ) -> Any:
        """GET a JSON endpoint (esearch, esummary)."""
        return await self._get(url, params, as_json=True, context=context)

    async def _rest_get_xml(
        self,
        url: str,
        params: dict[str, Any],
        *,
        context: RequestContext | None = None,
    ) -> str:
        """GET an XML endpoint (efetch) and return the raw body."""
        return await self._get(url, params, as_json=False, context=context)
