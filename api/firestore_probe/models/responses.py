from __future__ import annotations

from datetime import datetime, timezone

from pydantic.v1 import BaseModel, Field


def utc_timestamp() -> str:
    """Returns the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


class HealthStatus(BaseModel):
    """Represents the health status of the API."""

    status: str = Field(..., description="The status of the API")
    timestamp: str = Field(default_factory=utc_timestamp, description="When the status was produced")


class ProbeResult(BaseModel):
    """Represents a successful Firestore connectivity probe."""

    success: bool = Field(True, description="Whether the probe reached Firestore")
    message: str = Field(..., description="A human readable summary")
    document_count: int = Field(
        ...,
        alias="documentInTestCollection",
        description="The number of documents returned by the bounded read",
    )
    timestamp: str = Field(default_factory=utc_timestamp, description="When the probe completed")

    class Config:
        allow_population_by_field_name = True

    def to_dict(self):
        """Convert the ProbeResult model to the response body."""
        return self.dict(by_alias=True)


class ProbeError(BaseModel):
    """Represents a failed Firestore connectivity probe."""

    success: bool = Field(False, description="Whether the probe reached Firestore")
    message: str = Field(..., description="A human readable summary")
    error: str = Field(..., description="The underlying error message")
