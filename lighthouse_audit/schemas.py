"""
Lighthouse Audit Schemas

Pydantic model for the lighthouse_audit request: accepted shape, defaults and
validation. Validation failures surface as core.exceptions.ValidationError
naming the offending field so that no audit starts on bad input.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

from .types import AuditCategory, FormFactor, OutputFormat


def _reject_bool(v):
    # bool is an int subclass and would pass as 0 or 1
    if isinstance(v, bool):
        raise ValueError("Threshold must be a number, not a boolean")
    return v


ThresholdScore = Annotated[float, BeforeValidator(_reject_bool), Field(ge=0, le=100)]


class AuditRequest(BaseModel):
    """Caller-supplied configuration for one Lighthouse audit"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    categories: list[AuditCategory] = Field(
        default=[AuditCategory.ACCESSIBILITY],
        description="Lighthouse categories to compute",
    )
    form_factor: FormFactor = Field(
        default=FormFactor.DESKTOP, alias="formFactor", description="Device emulation profile"
    )
    output: OutputFormat = Field(default=OutputFormat.HTML, description="Report file format")
    thresholds: dict[str, ThresholdScore] | None = Field(
        default=None,
        description=(
            "Key-value map of category -> minimum score (0-100). "
            "The audit fails if any category falls below its threshold."
        ),
    )

    @field_validator("categories")
    @classmethod
    def dedupe_categories(cls, v):
        # Categories behave as a set but keep the caller's order
        return list(dict.fromkeys(v))

    def report_formats(self) -> dict[str, bool]:
        """Format selection handed to the engine, exactly one is enabled"""
        return {fmt.value: self.output == fmt for fmt in OutputFormat}

    def category_names(self) -> list[str]:
        return [category.value for category in self.categories]


def parse_audit_params(raw: Any) -> AuditRequest:
    """
    Validate and normalize raw tool parameters

    Args:
        raw: Parameters as received from the host, None means no options

    Returns:
        Fully defaulted AuditRequest

    Raises:
        ValidationError: if any field is outside its declared domain
    """
    if isinstance(raw, AuditRequest):
        return raw
    if raw is None:
        raw = {}

    try:
        return AuditRequest.model_validate(raw)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "params"
        raise ValidationError(
            f"Invalid value for {field}: {error['msg']}",
            field=field,
            error_count=e.error_count(),
        ) from e


def audit_input_schema() -> dict[str, Any]:
    """JSON Schema of the request, as advertised in the tool descriptor"""
    return AuditRequest.model_json_schema(by_alias=True)
