"""Discount application services."""

from bcb_sounds_ms.features.discounts.application.evaluator import DiscountEvaluator

__all__ = ["DiscountEvaluator"]
