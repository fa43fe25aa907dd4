"""Contact DTOs for API requests."""

from pydantic import BaseModel, ConfigDict, Field


class ContactFormRequest(BaseModel):
    """Contact form body. Required fields are enforced by the use case."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "projectType": "Podcast intro",
                "message": "Hi, I'd like a 30 second intro for my podcast.",
            }
        },
    )

    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    project_type: str | None = Field(None, alias="projectType", max_length=200)
    message: str | None = Field(None, max_length=10000)
