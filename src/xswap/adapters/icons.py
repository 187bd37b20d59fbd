"""
Token Icons - Currency to Icon URL Resolution

Display-only helper; the engine never depends on it for correctness.

Files that USE this module:
- xswap.adapters.formatting.formatter (currency options with icons)
- tests.test_icons (unit tests)

Files that this module USES:
- xswap.config (settings.token_icons_url)
- xswap.domain.currencies (TOKEN_ICON_OVERRIDES)
"""
from typing import Optional

from xswap.config import settings
from xswap.domain.currencies import TOKEN_ICON_OVERRIDES


def token_icon_url(currency: str, base_url: Optional[str] = None) -> str:
    """
    Get the SVG icon URL for a currency.

    Staked/derivative tokens use the override table; every other code maps
    to an icon of the same name.

    Args:
        currency: Currency code (e.g., "ETH", "STATOM")
        base_url: Optional icon base URL (defaults to settings.token_icons_url)

    Returns:
        URL such as ".../tokens/stATOM.svg"
    """
    base = (base_url or settings.token_icons_url).rstrip("/")
    icon_name = TOKEN_ICON_OVERRIDES.get(currency, currency)
    return f"{base}/{icon_name}.svg"
