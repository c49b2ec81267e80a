# services.py
import asyncio
import logging
import traceback
from typing import Any, List, Optional, Tuple

import httpx

from config import Config
from models import YearRange

logger = logging.getLogger(__name__)

def build_availability_url(config: Config, term: str, year_range: YearRange) -> str:
    """Availability API URL. Values are interpolated as-is, without encoding."""
    return config.AVAILABILITY_URL.format(term=term, start=year_range.start, end=year_range.end)

def build_cdx_url(config: Config, term: str, year_range: YearRange) -> str:
    """CDX search API URL. Values are interpolated as-is, without encoding."""
    return config.CDX_URL.format(term=term, start=year_range.start, end=year_range.end)


class WaybackSearchService:
    """A service to query the Wayback Machine availability and CDX APIs."""
    def __init__(self, config: Config):
        self.config = config

    def build_urls(self, term: str, year_range: YearRange) -> Tuple[str, str]:
        return (
            build_availability_url(self.config, term, year_range),
            build_cdx_url(self.config, term, year_range),
        )

    async def search(self, term: str, year_range: YearRange) -> Tuple[Optional[List[Any]], Optional[str]]:
        """Fetches both endpoints concurrently and returns their parsed bodies.

        The result list is always ``[availability_body, cdx_body]``. If either
        request or either JSON parse fails, no results are returned and the
        second element carries the error details instead.
        """
        urls = self.build_urls(term, year_range)
        try:
            async with httpx.AsyncClient(timeout=self.config.REQUEST_TIMEOUT, follow_redirects=True) as client:
                bodies = await asyncio.gather(*(self._fetch_json(client, url) for url in urls))
            return list(bodies), None
        except Exception:
            logger.exception("Wayback search failed for %r", term)
            return None, traceback.format_exc()

    async def _fetch_json(self, client: httpx.AsyncClient, url: str) -> Any:
        logger.debug("GET %s", url)
        response = await client.get(url)
        return response.json()
