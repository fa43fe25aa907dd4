"""Contact API router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bcb_sounds_ms.features.contact.application.use_cases import (
    SubmitContactRequest,
    SubmitContactUseCase,
)
from bcb_sounds_ms.features.contact.presentation.dto import ContactFormRequest
from bcb_sounds_ms.features.notifications.application import NotificationDispatcher
from bcb_sounds_ms.features.notifications.infrastructure import get_notification_dispatcher
from bcb_sounds_ms.shared.presentation.api_response import APIResponse

router = APIRouter()


@router.post(
    "/contact",
    response_model=APIResponse[None],
    response_model_exclude_none=True,
    summary="Submit contact form",
    description="""
    Relay a contact form submission to the business inbox and send the
    sender an auto-reply.

    - `name`, `email` and `message` are required
    - Responds 500 if either email cannot be sent
    """,
)
async def submit_contact(
    request: ContactFormRequest,
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> APIResponse[None]:
    """Handle a contact form submission."""
    use_case = SubmitContactUseCase(dispatcher)

    message = await use_case.execute(
        SubmitContactRequest(
            name=request.name,
            email=request.email,
            message=request.message,
            project_type=request.project_type,
        )
    )

    return APIResponse.ok(message=message)
