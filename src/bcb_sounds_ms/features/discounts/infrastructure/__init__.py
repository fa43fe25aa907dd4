"""Discount infrastructure module."""

from bcb_sounds_ms.features.discounts.infrastructure.evaluator_factory import (
    get_discount_evaluator,
)

__all__ = ["get_discount_evaluator"]
