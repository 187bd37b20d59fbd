"""
Application Entry Point - Engine Wiring

This module serves as the composition root for the swap engine. It
configures logging, loads the price catalog once per session and builds a
SubmissionController that a presentation layer can drive.

Files that USE this module:
- Presentation layers embedding the engine
- tests.test_app (wiring tests)

Files that this module USES:
- xswap.shared.logging_conf (setup_logging for logging configuration)
- xswap.config (settings for defaults, latency and feed)
- xswap.adapters.providers.prices (PriceFeedProvider for the catalog)
- xswap.application.controller (SubmissionController)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
from typing import Optional  # Type hints for optional values

from xswap.adapters.providers.prices import PriceFeedProvider  # Token price feed client
from xswap.application.controller import SubmissionController  # Session orchestration
from xswap.application.scheduler import AsyncioScheduler, Scheduler  # Submit latency source
from xswap.config import Settings, settings  # Application configuration and settings
from xswap.domain.catalog import PriceCatalog  # Immutable price snapshot
from xswap.shared.logging_conf import setup_logging  # Configure logging with file rotation

log = logging.getLogger(__name__)


def configure_logging(cfg: Optional[Settings] = None, level=logging.INFO) -> None:
    """Configure logging from settings."""
    cfg = cfg or settings
    setup_logging(
        level=level,
        log_file=cfg.log_file,
        log_dir=cfg.log_dir,
        log_stdout=cfg.log_stdout,
        max_bytes=cfg.log_max_bytes,
        backup_count=cfg.log_backup_count,
    )


def build_controller(
    catalog: Optional[PriceCatalog] = None,
    scheduler: Optional[Scheduler] = None,
    cfg: Optional[Settings] = None,
) -> SubmissionController:
    """
    Build a controller for one swap session.

    Args:
        catalog: Price snapshot; fetched from the price feed when omitted
        scheduler: Latency source (defaults to AsyncioScheduler)
        cfg: Settings (defaults to the global settings instance)

    Returns:
        SubmissionController holding a fresh default session

    Raises:
        PriceFeedError: If the catalog must be fetched and the feed fails
    """
    cfg = cfg or settings
    if catalog is None:
        catalog = PriceFeedProvider(base_url=cfg.prices_url, timeout=cfg.http_timeout_seconds).load_catalog()

    missing = [
        code for code in (cfg.default_from_currency, cfg.default_to_currency)
        if code not in catalog
    ]
    if missing:
        log.warning("Default currencies without a price: %s", ", ".join(missing))

    controller = SubmissionController(
        catalog=catalog,
        scheduler=scheduler or AsyncioScheduler(),
        latency_ms=cfg.submit_latency_ms,
        default_from_currency=cfg.default_from_currency,
        default_to_currency=cfg.default_to_currency,
    )
    log.info(
        "Swap session ready: %s -> %s, %d priced currencies, latency=%dms",
        cfg.default_from_currency, cfg.default_to_currency, len(catalog), cfg.submit_latency_ms,
    )
    return controller
