"""Parameter model describing one sampled dimension."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paramsim.exceptions import ConfigurationError

DEFAULT_NAME = "Unnamed Parameter"
DEFAULT_MIN = 0.0
DEFAULT_MAX = 100.0
DEFAULT_WEIGHT = 5


class Parameter(BaseModel):
    """A named numeric range sampled uniformly during a simulation."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(..., min_length=1, description="Parameter identifier")
    min: float = Field(..., description="Lower bound of the sampled range")
    max: float = Field(..., description="Upper bound of the sampled range")
    weight: int = Field(
        default=DEFAULT_WEIGHT,
        ge=1,
        le=10,
        description="Influence on pairwise interaction strength",
    )

    @property
    def span(self) -> float:
        """Width of the sampled range."""
        return self.max - self.min

    @property
    def center(self) -> float:
        """Midpoint of the sampled range."""
        return (self.min + self.max) / 2

    def widened(self, delta: float, floor: float | None = None) -> "Parameter":
        """Return a copy with the range widened by ``delta`` on each side.

        Args:
            delta: Amount subtracted from min and added to max
            floor: Lowest allowed lower bound. Only applies to ranges that
                start at or above the floor.

        Returns:
            New Parameter instance; this one is left untouched
        """
        new_min = self.min - delta
        if floor is not None and self.min >= floor:
            new_min = max(new_min, floor)
        return self.model_copy(update={"min": new_min, "max": self.max + delta})

    @classmethod
    def from_user_input(cls, record: dict[str, Any]) -> "Parameter":
        """Build a parameter from loosely-typed form input.

        Blank or missing fields fall back to the form defaults: an unnamed
        parameter spanning 0..100 with weight 5.

        Raises:
            ConfigurationError: If a field cannot be interpreted
        """
        name = str(record.get("name") or "").strip() or DEFAULT_NAME

        try:
            return cls(
                name=name,
                min=_or_default(record.get("min"), DEFAULT_MIN),
                max=_or_default(record.get("max"), DEFAULT_MAX),
                weight=_or_default(record.get("weight"), DEFAULT_WEIGHT),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid parameter {name!r}: {e}") from e


def _or_default(value: Any, default: Any) -> Any:
    """Return ``default`` for a missing or blank form field."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return value
