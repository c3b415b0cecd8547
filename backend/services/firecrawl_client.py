"""Firecrawl scrape adapter: job board search page -> market snippet."""

import logging
from urllib.parse import quote

import httpx

from config import Settings
from services.pipeline.base import MarketDataSource
from services.pipeline.errors import ScrapeFailure

logger = logging.getLogger(__name__)

BLOCKED_HINT = "The job board may be blocking automated access."


def truncate_snippet(text: str, max_chars: int) -> str:
    """Keep the first ``max_chars`` characters; the rest is dropped."""
    return text[:max_chars]


class FirecrawlClient(MarketDataSource):
    """Single-shot scrape of a job search page through Firecrawl."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.api_url = settings.firecrawl_api_url
        self.api_key = settings.firecrawl_api_key
        self.search_url_template = settings.job_search_url_template
        self.max_chars = settings.market_data_max_chars
        self.timeout = settings.request_timeout_seconds
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def search_url(self, job_title: str) -> str:
        return self.search_url_template.format(query=quote(job_title, safe="!~*'()"))

    async def fetch_market_data(self, job_title: str) -> str:
        """Scrape job postings for ``job_title`` and return truncated markdown.

        Raises:
            ScrapeFailure: on any transport error, non-2xx status, or when
                the response carries no markdown content.
        """
        payload = {
            "url": self.search_url(job_title),
            "pageOptions": {"onlyMainContent": True},
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.api_url, headers=self.headers, json=payload)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Firecrawl returned %s: %s", e.response.status_code, e.response.text[:500]
            )
            raise ScrapeFailure(
                f"Market data scrape failed: request failed with status code "
                f"{e.response.status_code}. {BLOCKED_HINT}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("Firecrawl request error: %r", e)
            raise ScrapeFailure(
                f"Market data scrape failed: {type(e).__name__}. {BLOCKED_HINT}"
            ) from e
        except ValueError as e:
            logger.error("Firecrawl returned a non-JSON body: %s", e)
            raise ScrapeFailure(
                f"Market data scrape failed: unreadable response. {BLOCKED_HINT}"
            ) from e

        data = body.get("data") if isinstance(body, dict) else None
        markdown = data.get("markdown") if isinstance(data, dict) else None
        if not isinstance(markdown, str) or not markdown:
            logger.error("Firecrawl response had no markdown content")
            raise ScrapeFailure(
                f"Market data scrape failed: no content was collected. {BLOCKED_HINT}"
            )

        snippet = truncate_snippet(markdown, self.max_chars)
        if len(snippet) < len(markdown):
            logger.info("Truncated market data from %d to %d chars", len(markdown), len(snippet))
        return snippet
