"""
Currency Constants - Supported Currency Codes and Defaults

Files that USE this module:
- xswap.config.settings (default currency pair)
- xswap.adapters.icons (icon override table)
- xswap.shared.validators (currency code checks)
"""

CURRENCIES: tuple[str, ...] = (
    "ampLUNA",
    "ATOM",
    "axlUSDC",
    "BLUR",
    "BUSD",
    "EVMOS",
    "ETH",
    "GMX",
    "IBCX",
    "IRIS",
    "KUJI",
    "LSI",
    "LUNA",
    "OKB",
    "OKT",
    "OSMO",
    "RATOM",
    "STATOM",
    "STEVMOS",
    "STLUNA",
    "STOSMO",
    "STRD",
    "SWTH",
    "rSWTH",
    "USC",
    "USD",
    "USDC",
    "WBTC",
    "wstETH",
    "YieldUSD",
    "ZIL",
)

DEFAULT_FROM_CURRENCY = "ETH"
DEFAULT_TO_CURRENCY = "USDC"
DEFAULT_FROM_AMOUNT = ""

# Staked/derivative tokens whose icon file name differs from the ticker
TOKEN_ICON_OVERRIDES: dict[str, str] = {
    "STATOM": "stATOM",
    "RATOM": "rATOM",
    "STEVMOS": "stEVMOS",
    "STLUNA": "stLUNA",
    "STOSMO": "stOSMO",
}
