"""Contact domain entities."""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

DEFAULT_PROJECT_TYPE = "Not specified"


def is_valid_email(email: str) -> bool:
    """``local@domain.tld`` shape check, no deliverability lookup."""
    return bool(EMAIL_PATTERN.match(email))


@dataclass(frozen=True)
class ContactSubmission:
    """A message sent through the storefront contact form."""

    name: str
    email: str
    message: str
    project_type: str = DEFAULT_PROJECT_TYPE
