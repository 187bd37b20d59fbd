"""
Price Feed Provider - Token Prices for the Price Catalog

This module implements the HTTP client for the token price feed. The feed
returns a JSON list of entries such as
{"currency": "ETH", "date": "...", "price": 1645.93}; the provider turns it
into an immutable PriceCatalog. It keeps a TTL cache shared across
instances and wraps every transport or schema failure in PriceFeedError.

Files that USE this module:
- xswap.app (loads the catalog for a new session)
- tests.test_price_provider (unit tests)

Files that this module USES:
- xswap.config (settings for feed URL, timeout and cache TTL)
- xswap.domain.catalog (PriceCatalog)
- xswap.domain.errors (PriceFeedError)
"""
import logging
import requests
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime, timedelta, timezone

from xswap.config import settings
from xswap.domain.catalog import PriceCatalog
from xswap.domain.errors import PriceFeedError

log = logging.getLogger(__name__)


class PriceFeedProvider:
    """Client for the token price feed."""

    # Class-level cache shared across instances, keyed by feed URL
    _cache: Dict[str, Tuple[datetime, List[Dict[str, Any]]]] = {}

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize price feed provider.

        Args:
            base_url: Optional custom feed URL (defaults to settings.prices_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.url = base_url or settings.prices_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.ttl = timedelta(minutes=settings.price_cache_minutes)

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache = {}

    def _cache_valid(self) -> bool:
        """
        Check if cached entries for this URL are still valid based on TTL.

        Returns:
            True if cache exists and is within TTL, False otherwise
        """
        cached = self._cache.get(self.url)
        if cached is None:
            return False
        return datetime.now(timezone.utc) - cached[0] < self.ttl

    def get_entries(self) -> List[Dict[str, Any]]:
        """
        Get the raw list of price entries from the feed (with TTL cache).

        Returns:
            List of feed entries, in feed order

        Raises:
            PriceFeedError: If the request fails, times out, or the payload
                            is not a JSON list of objects
        """
        if self._cache_valid():
            log.debug("Using cached price feed entries for %s", self.url)
            return list(self._cache[self.url][1])

        try:
            log.info("Fetching token prices from %s", self.url)
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Price feed timeout after %d seconds", self.timeout)
            raise PriceFeedError(f"Price feed timeout after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            log.error("Price feed HTTP error: %s", e)
            raise PriceFeedError(f"Price feed HTTP error: {e}") from e
        except requests.exceptions.RequestException as e:
            log.error("Price feed request failed: %s", e)
            raise PriceFeedError(f"Price feed request failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            log.error("Price feed returned invalid JSON: %s", e)
            raise PriceFeedError(f"Price feed returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            log.error("Price feed returned non-list JSON: %s", type(data).__name__)
            raise PriceFeedError("Price feed returned non-list JSON")

        entries = [entry for entry in data if isinstance(entry, dict)]
        if len(entries) != len(data):
            log.warning("Ignored %d non-object price feed entries", len(data) - len(entries))

        PriceFeedProvider._cache[self.url] = (datetime.now(timezone.utc), entries)

        log.info("Price feed updated: %d entries (ttl=%sm)", len(entries), settings.price_cache_minutes)
        return list(entries)

    def load_catalog(self) -> PriceCatalog:
        """
        Build a price catalog from the feed.

        Duplicate currencies resolve last-write-wins.

        Raises:
            PriceFeedError: If the feed cannot be fetched
        """
        catalog = PriceCatalog.from_entries(self.get_entries())
        log.info("Price catalog ready with %d currencies", len(catalog))
        return catalog
