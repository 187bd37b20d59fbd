"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (price feed)
- Icons (icon URL resolution)
- Formatting (display text)
"""

__all__ = []
