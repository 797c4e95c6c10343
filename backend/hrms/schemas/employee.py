"""
HRMS Employee API — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for the employee resource.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate OpenAPI documentation.

Input coercion rules (EmployeeIn):
    - Strict types: "1000" is not a number, 1000 is not a name, true is not a number.
    - Integers are accepted wherever a float is expected.
    - Omitted or null fields take their zero value, so an update always
      overwrites all three fields.
    - NaN and Infinity are rejected.
    - Unknown keys (including a client-supplied "id") are ignored.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeIn(BaseModel):
    """
    What:  Writable employee fields accepted by POST and PUT /employee.
    """

    name: str = Field(default="", description="Employee name")
    salary: float = Field(default=0.0, description="Salary (no range constraints)")
    age: float = Field(default=0.0, description="Age (no range constraints)")

    # NaN/Infinity are not JSON numbers even though json.loads accepts them
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    @field_validator("name", "salary", "age", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info: ValidationInfo) -> Any:
        """An explicit null is treated the same as an omitted field."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  Stored employee as returned to clients.
    Who:   Returned by GET (as array items), POST and PUT /employee.

    `id` is the storage engine's identifier rendered as text; clients treat it
    as opaque and pass it back unchanged in /employee/{id}.
    """

    id: str = Field(description="Engine-assigned unique identifier")
    name: str = Field(description="Employee name")
    salary: float = Field(description="Salary")
    age: float = Field(description="Age")


class MessageResponse(BaseModel):
    """Plain acknowledgement body, e.g. for DELETE /employee/{id}."""

    message: str = Field(description="Human-readable status message")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Fields:
        error: Stable machine-readable kind (validation_error, invalid_id,
               not_found, database_error, internal_server_error)
        message: Human-readable description; storage errors carry the driver text
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {"error": "invalid_id", "message": "Invalid ID", "request_id": "1f0c9a2e"}
    """

    error: str = Field(description="Machine-readable error kind")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
