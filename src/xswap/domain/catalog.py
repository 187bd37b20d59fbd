"""
Price Catalog - Immutable Price Snapshot

This module holds the session-scoped snapshot that maps a currency code to
its price in a common reference unit (USD). A missing key means the price
is unavailable, never zero.

Files that USE this module:
- xswap.application.validation (price availability check)
- xswap.application.quote (rate computation)
- xswap.adapters.providers.prices (builds catalogs from the feed)

Files that this module USES:
- None (pure domain layer)
"""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

log = logging.getLogger(__name__)


def _positive_price(value: Any) -> Optional[float]:
    """Coerce a feed price to a positive finite float, or None."""
    if isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


class PriceCatalog(Mapping[str, float]):
    """
    Read-only mapping of currency code to positive price.

    Instances never change after construction; refreshing prices means
    building a new catalog.
    """

    __slots__ = ("_prices",)

    def __init__(self, prices: Optional[Mapping[str, Any]] = None):
        """
        Build a catalog from an existing mapping.

        Args:
            prices: Mapping of currency code to price. Entries that are not
                    positive finite numbers are dropped.
        """
        accepted: dict[str, float] = {}
        for currency, raw in (prices or {}).items():
            price = _positive_price(raw)
            if price is None:
                log.warning("Skipping unusable price for %s: %r", currency, raw)
                continue
            accepted[currency] = price
        self._prices = MappingProxyType(accepted)

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping[str, Any]]) -> PriceCatalog:
        """
        Build a catalog from feed entries shaped like {"currency": ..., "price": ...}.

        Duplicate currencies are resolved last-write-wins, silently. An
        unusable later entry still replaces an earlier good one, so that
        currency ends up unavailable.
        """
        reduced: dict[str, Any] = {}
        for entry in entries:
            currency = entry.get("currency")
            if not currency or not isinstance(currency, str):
                log.warning("Skipping feed entry without currency: %r", entry)
                continue
            reduced[currency] = entry.get("price")
        return cls(reduced)

    def __getitem__(self, currency: str) -> float:
        return self._prices[currency]

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def price(self, currency: str) -> Optional[float]:
        """Return the price of a currency, or None if unavailable."""
        return self._prices.get(currency)

    def has_prices(self, *currencies: str) -> bool:
        """True when every given currency has a price."""
        return all(currency in self._prices for currency in currencies)

    def __repr__(self) -> str:
        return f"PriceCatalog({dict(self._prices)!r})"
