from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from wheels_router_mcp.errors import InvalidRequestError


class TripRequest(BaseModel):
    """Normalized plan_trip request, independent of the provider that answers it."""

    model_config = ConfigDict(frozen=True)

    origin: str = Field(min_length=3, description="'lat,lon' or 'stop:ID'")
    destination: str = Field(min_length=3, description="'lat,lon' or 'stop:ID'")
    depart_at: str | None = Field(default=None, description="ISO 8601 with UTC offset")
    arrive_by: str | None = Field(default=None, description="ISO 8601 with UTC offset")
    modes: tuple[str, ...] | None = Field(default=None, description="Transit mode filter")
    max_results: int | None = Field(default=None, ge=1, le=5)

    @field_validator("depart_at", "arrive_by")
    @classmethod
    def _require_offset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            raise ValueError(f"'{value}' is not an ISO 8601 timestamp") from None
        if parsed.tzinfo is None:
            raise ValueError(f"'{value}' must include a UTC offset (e.g. 'Z' or '+08:00')")
        return value

    @field_validator("modes", mode="before")
    @classmethod
    def _split_modes(cls, value):
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(",")
        elif not isinstance(value, (list, tuple, set, frozenset)):
            return value
        modes: list[str] = []
        for mode in value:
            mode = str(mode).strip()
            if mode and mode not in modes:
                modes.append(mode)
        return tuple(modes) or None

    @model_validator(mode="after")
    def _one_time_constraint(self) -> "TripRequest":
        if self.depart_at and self.arrive_by:
            raise ValueError("Use only one of depart_at or arrive_by.")
        return self


def build_trip_request(**fields) -> TripRequest:
    """Validate plan_trip arguments.

    Raises:
        InvalidRequestError: If the arguments do not form a valid request.
    """
    try:
        return TripRequest(**fields)
    except ValidationError as e:
        raise InvalidRequestError(str(e)) from e
