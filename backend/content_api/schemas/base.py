"""
Site Content API — Schema Base Classes
=======================================

What:  Shared Pydantic configuration for every request/response model.
How:   Python attributes stay snake_case; the JSON contract is camelCase
       (`displayOrder`, `contactNo`, `createdAt`) through an alias generator.
       Request bodies accept either spelling. Unknown keys are ignored, so a
       body can never set a column its schema does not list.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class SuccessResponse(CamelModel):
    success: bool = Field(default=True)


class CreatedResponse(SuccessResponse):
    """Returned by every create endpoint with HTTP 201."""
    id: int = Field(description="Identifier of the inserted record")


class ErrorResponse(BaseModel):
    """
    Error body produced by the global exception handlers. Keys are not
    camelCased.

    Example:
        {"error": "Failed to fetch projects", "code": "INTERNAL_ERROR", "request_id": "a1b2c3d4"}
    """
    error: str = Field(description="Human-readable error description")
    code: Optional[str] = Field(default=None, description="Machine-readable error code")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(CamelModel):
    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float
