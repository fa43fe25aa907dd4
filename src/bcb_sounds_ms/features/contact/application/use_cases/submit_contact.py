"""Contact use case - Submit the contact form."""

from dataclasses import dataclass

import structlog

from bcb_sounds_ms.features.contact.domain import (
    DEFAULT_PROJECT_TYPE,
    ContactSubmission,
    is_valid_email,
)
from bcb_sounds_ms.features.notifications.application import NotificationDispatcher
from bcb_sounds_ms.shared.domain.exceptions import ValidationError

logger = structlog.get_logger()

CONTACT_ACK_MESSAGE = (
    "Your message has been sent successfully. We'll get back to you within 24 hours."
)


@dataclass
class SubmitContactRequest:
    """Raw contact form fields."""

    name: str | None = None
    email: str | None = None
    message: str | None = None
    project_type: str | None = None


class SubmitContactUseCase:
    """
    Validates a contact submission, relays it to the business inbox and
    sends the sender an auto-reply.

    Both emails must go out. A failure in either propagates as
    ``MailDeliveryError``.
    """

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    async def execute(self, request: SubmitContactRequest) -> str:
        submission = self.validate(request)

        await self._dispatcher.send_contact_form_email(submission)
        await self._dispatcher.send_contact_auto_reply(submission)

        logger.info("Contact form processed", project_type=submission.project_type)
        return CONTACT_ACK_MESSAGE

    @staticmethod
    def validate(request: SubmitContactRequest) -> ContactSubmission:
        """Check required fields and email shape."""
        name = (request.name or "").strip()
        email = (request.email or "").strip()
        message = (request.message or "").strip()

        if not name or not email or not message:
            missing = [
                field
                for field, value in (("name", name), ("email", email), ("message", message))
                if not value
            ]
            raise ValidationError(
                "Name, email, and message are required",
                errors=[f"{field} is required" for field in missing],
            )

        if not is_valid_email(email):
            raise ValidationError("Please provide a valid email address")

        return ContactSubmission(
            name=name,
            email=email,
            message=message,
            project_type=(request.project_type or "").strip() or DEFAULT_PROJECT_TYPE,
        )
