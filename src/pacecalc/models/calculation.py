"""Request and result models for a single calculation."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Entity


class Mode(BaseModel):
    """Which quantity is produced and whether the formula is applied."""

    model_config = ConfigDict(frozen=True)

    target: Entity
    recalculate: bool


class CalculationRequest(BaseModel):
    """Raw option values as typed by the user."""

    time: str | None = Field(default=None, description="Elapsed time, e.g. 1h30m")
    distance: str | None = Field(default=None, description="Distance, e.g. 10km")
    speed: str | None = Field(default=None, description="Speed or pace, e.g. 12km/h or 300/km")
    output_unit: str | None = Field(default=None, description="Unit to render the target in")
    precision: str | None = Field(default=None, description="Decimal places for numeric output")

    def provided(self) -> set[Entity]:
        """Return the entity kinds that were given a value."""
        values = {
            Entity.TIME: self.time,
            Entity.DISTANCE: self.distance,
            Entity.SPEED: self.speed,
        }
        return {entity for entity, value in values.items() if value is not None}


class CalculationResult(BaseModel):
    """Outcome of a calculation, in base and output units."""

    target: Entity = Field(description="Quantity that was produced")
    recalculated: bool = Field(description="True when the formula was applied")
    base_value: float = Field(description="Result in the target's base unit")
    output_value: float = Field(
        description="Result in the output unit (seconds for time, inverted for pace)"
    )
    unit: str | None = Field(default=None, description="Output unit, None for time")
    text: str = Field(description="Rendered result line")
