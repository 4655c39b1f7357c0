"""
Scryfall search client.

Wraps the /cards/search endpoint with retry and pagination. Respects
Scryfall rate limits: a 429 pauses for a fixed delay and retries without
using up an attempt, other failures back off linearly, and pages are
fetched with a short pause in between.

API docs: https://scryfall.com/docs/api/cards/search
"""

import asyncio
import logging
from typing import Any

import httpx

from sealedforge.config import settings
from sealedforge.errors import (
    NotFoundError,
    TransientNetworkError,
    UnrecoverableFetchError,
)

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429


class ScryfallClient:
    """Async Scryfall client with retry and pagination."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        max_retries: int | None = None,
        retry_backoff: float | None = None,
        rate_limit_delay: float | None = None,
        max_rate_limit_retries: int | None = None,
        page_delay: float | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            client: Optional shared httpx client. A short-lived client is
                    created per request when omitted.
            base_url: Scryfall API root. Defaults to settings.
            max_retries: Attempts for generic failures
            retry_backoff: Seconds per attempt for the linear backoff
            rate_limit_delay: Fixed pause after a 429
            max_rate_limit_retries: Consecutive 429s tolerated before giving up
            page_delay: Pause between pages
        """
        self._client = client
        self.base_url = (base_url or settings.scryfall_api_url).rstrip("/")
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.retry_backoff = settings.retry_backoff if retry_backoff is None else retry_backoff
        self.rate_limit_delay = (
            settings.rate_limit_delay if rate_limit_delay is None else rate_limit_delay
        )
        self.max_rate_limit_retries = (
            settings.max_rate_limit_retries
            if max_rate_limit_retries is None
            else max_rate_limit_retries
        )
        self.page_delay = settings.page_delay if page_delay is None else page_delay

    async def _get(self, url: str, params: dict[str, str] | None) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, params=params)
        async with httpx.AsyncClient(
            timeout=settings.request_timeout,
            headers={"User-Agent": settings.user_agent, "Accept": "application/json"},
        ) as client:
            return await client.get(url, params=params)

    async def _attempt(self, url: str, params: dict[str, str] | None) -> dict[str, Any]:
        """Single request, classified into the fetch error taxonomy."""
        try:
            response = await self._get(url, params)
        except httpx.RequestError as e:
            raise TransientNetworkError(url, f"Request failed: {e}") from e

        if response.status_code == HTTP_NOT_FOUND:
            raise NotFoundError(url)
        if response.is_error:
            raise TransientNetworkError(
                url, f"HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            data: dict[str, Any] = response.json()
        except ValueError as e:
            raise TransientNetworkError(
                url, f"Invalid JSON: {e}", status_code=response.status_code
            ) from e
        return data

    async def fetch_json(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """
        GET a JSON document with retry.

        Args:
            url: Absolute URL
            params: Query parameters (omit when the URL already carries them)

        Returns:
            Decoded JSON body

        Raises:
            NotFoundError: On HTTP 404 (not retried)
            UnrecoverableFetchError: When retries are exhausted
        """
        attempt = 0
        rate_limited = 0
        while True:
            try:
                return await self._attempt(url, params)
            except NotFoundError:
                raise
            except TransientNetworkError as e:
                if e.status_code == HTTP_TOO_MANY_REQUESTS:
                    rate_limited += 1
                    if rate_limited > self.max_rate_limit_retries:
                        raise UnrecoverableFetchError(
                            url, "rate limited", status_code=HTTP_TOO_MANY_REQUESTS
                        ) from e
                    logger.info("Rate limited by Scryfall, pausing %.1fs", self.rate_limit_delay)
                    await asyncio.sleep(self.rate_limit_delay)
                    continue

                attempt += 1
                if attempt >= self.max_retries:
                    raise UnrecoverableFetchError(url, str(e), status_code=e.status_code) from e
                logger.warning(
                    "Scryfall request failed (attempt %d/%d): %s", attempt, self.max_retries, e
                )
                await asyncio.sleep(self.retry_backoff * attempt)

    async def search(self, query: str, **params: str) -> list[dict[str, Any]]:
        """
        Run a card search and collect every page.

        Args:
            query: Scryfall search syntax (e.g., "set:mkm is:booster")
            **params: Extra search parameters (unique, order, dir)

        Returns:
            Raw card objects, in provider order, without repeats.
            Empty when the query matches nothing.

        Raises:
            UnrecoverableFetchError: If a page cannot be fetched, including a
                                     later page that answers 404
        """
        url = f"{self.base_url}/cards/search"
        try:
            data = await self.fetch_json(url, {"q": query, **params})
        except NotFoundError:
            # Scryfall answers 404 when a search matches no cards
            logger.debug("No cards for query %r", query)
            return []

        cards: dict[str, dict[str, Any]] = {}
        while True:
            for card in data.get("data") or []:
                cards.setdefault(card["id"], card)

            next_page = data.get("next_page")
            if not (data.get("has_more") and next_page):
                break
            await asyncio.sleep(self.page_delay)
            try:
                # next_page URL carries the query
                data = await self.fetch_json(next_page)
            except NotFoundError as e:
                raise UnrecoverableFetchError(
                    next_page, "page vanished", status_code=HTTP_NOT_FOUND
                ) from e

        return list(cards.values())
