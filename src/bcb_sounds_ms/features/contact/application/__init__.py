"""Contact application layer."""

from bcb_sounds_ms.features.contact.application.use_cases import (
    CONTACT_ACK_MESSAGE,
    SubmitContactRequest,
    SubmitContactUseCase,
)

__all__ = ["SubmitContactUseCase", "SubmitContactRequest", "CONTACT_ACK_MESSAGE"]
