"""Per-entity unit records."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Entity


class EntitySpec(BaseModel):
    """
    Everything the calculator knows about one entity kind.

    Factors convert a value in the keyed unit to the base unit by
    multiplication.
    """

    model_config = ConfigDict(frozen=True)

    entity: Entity = Field(description="Entity kind this record describes")
    display_name: str = Field(description="Name used in messages")
    option_key: str = Field(description="Command-line option carrying the input")
    default_unit: str = Field(description="Unit assumed for input and output when none is given")
    base_unit: str = Field(description="Unit all arithmetic is done in")
    factors: dict[str, float] = Field(description="Unit name to base-unit factor")
    labels: dict[str, str] = Field(description="Unit name to display label")
    reciprocal: dict[str, bool] = Field(
        default_factory=dict,
        description="Unit name to pace flag (speed only)",
    )
