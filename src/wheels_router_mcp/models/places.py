from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class GeocodeResult(BaseModel):
    """A place returned by search_location."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    display_name: str | None = None
    # Nominatim reports coordinates as strings; passed through unchanged
    lat: str | float | None = None
    lon: str | float | None = None
    type: str | None = Field(default=None, description="Place type (e.g. 'station')")
    place_class: str | None = Field(
        default=None, alias="class", description="Place class (e.g. 'railway')"
    )


_results_adapter = TypeAdapter(list[GeocodeResult])


def geocode_results_to_json(results: list[GeocodeResult]) -> str:
    """Serialize a result list with upstream key names, omitting absent fields."""
    return _results_adapter.dump_json(
        results, indent=2, by_alias=True, exclude_none=True
    ).decode()
