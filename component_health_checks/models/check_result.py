"""Check result models."""

from typing import Optional

from pydantic import BaseModel, Field

from component_health_checks.models.component_kind import ComponentKind


class CheckResult(BaseModel):
    """Result of a single component check."""

    component: str = Field(..., description="The registry name of the component")
    check_name: str = Field(..., description="The display name of the check")
    kind: ComponentKind = Field(..., description="The kind of component checked")
    passed: bool = Field(..., description="Whether the check passed")
    skipped: bool = Field(False, description="Whether the check did not apply")
    descriptor: str = Field("", description="The address(es) that were verified")
    error_type: Optional[str] = Field(None, description="The error class on failure")
    error_code: Optional[int] = Field(None, description="The numeric error code on failure")
    message: str = Field("", description="An additional message")

    class Config:
        """Pydantic config."""

        extra = "ignore"
