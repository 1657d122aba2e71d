"""
Option models for parsing and formatting.

Options are validated with pydantic so that a bad value (an unknown order,
an MGRS precision of 7) fails loudly before any parsing happens.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from geogrid.core.errors import ValidationError
from geogrid.models.coordinates import CoordinateOrder, WGSFormat

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class GridParseOptions(BaseModel):
    """Options for create_utm() and create_mgrs()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skip_validation: bool = Field(
        default=False, description="Return the raw lexer tokens instead of a coordinate"
    )


class WGSParseOptions(GridParseOptions):
    """Options for create_wgs()."""

    order: Optional[CoordinateOrder] = Field(
        default=None,
        description="Axis order for parts without hemisphere letters; "
        "when given, letters that contradict it are an error",
    )


class WGSFormatOptions(BaseModel):
    """Options for WGSCoordinate.to_string()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: WGSFormat = Field(default=WGSFormat.DD, description="dd, ddm or dms")
    order: CoordinateOrder = Field(default=CoordinateOrder.LAT_LON)
    compass: bool = Field(default=False, description="Use N/S/E/W instead of signs")


class MGRSOptions(BaseModel):
    """Options for to_mgrs()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    precision: int = Field(default=5, ge=0, le=5, description="Digits per axis")


def build_options(model: Type[OptionsT], **values: Any) -> OptionsT:
    """
    Validate keyword options against an option model.

    Args:
        model: Option model class
        **values: Option values; None values fall back to model defaults

    Returns:
        Validated option model instance

    Raises:
        ValidationError: If an option value is rejected
    """
    supplied: Dict[str, Any] = {k: v for k, v in values.items() if v is not None}
    try:
        return model(**supplied)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(
            message=f"Invalid option {field_name!r}: {first.get('msg')}",
            field=field_name or None,
            details={"errors": e.errors(include_url=False)},
        ) from e
