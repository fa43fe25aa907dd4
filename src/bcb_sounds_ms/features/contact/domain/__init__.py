"""Contact domain entities."""

from bcb_sounds_ms.features.contact.domain.entities import (
    DEFAULT_PROJECT_TYPE,
    ContactSubmission,
    is_valid_email,
)

__all__ = ["ContactSubmission", "DEFAULT_PROJECT_TYPE", "is_valid_email"]
