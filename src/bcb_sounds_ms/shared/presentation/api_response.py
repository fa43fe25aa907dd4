"""Standard API response wrapper."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper for consistent response format."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Operation completed successfully",
            }
        }
    )

    success: bool = True
    message: str | None = None
    data: T | None = None
    errors: list[str] | None = None
    details: Any | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "APIResponse[T]":
        """Create a successful response."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def error(
        cls,
        message: str,
        errors: list[str] | None = None,
        details: Any | None = None,
    ) -> "APIResponse[None]":
        """Create an error response."""
        return APIResponse[None](
            success=False, message=message, errors=errors, details=details
        )

    def to_content(self) -> dict[str, Any]:
        """Serialize for a raw JSONResponse, dropping empty fields."""
        return self.model_dump(mode="json", exclude_none=True)
