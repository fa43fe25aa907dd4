"""Discount evaluator factory - Dependency injection."""

from functools import lru_cache

import structlog

from bcb_sounds_ms.features.discounts.application import DiscountEvaluator
from bcb_sounds_ms.features.discounts.domain import build_catalog
from bcb_sounds_ms.shared.core.settings import get_settings

logger = structlog.get_logger()


@lru_cache
def get_discount_evaluator() -> DiscountEvaluator:
    """
    Get the discount evaluator based on configuration.

    Uses the ``DISCOUNT_CODES`` override when set, the built-in table otherwise.
    """
    settings = get_settings()

    if settings.discount_codes:
        catalog = build_catalog(settings.discount_codes)
        logger.info("Loaded discount codes from configuration", count=len(catalog))
        return DiscountEvaluator(catalog)

    return DiscountEvaluator()
