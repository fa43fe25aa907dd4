"""Shared presentation module."""

from bcb_sounds_ms.shared.presentation.exception_handlers import register_exception_handlers
from bcb_sounds_ms.shared.presentation.api_response import APIResponse

__all__ = ["register_exception_handlers", "APIResponse"]
