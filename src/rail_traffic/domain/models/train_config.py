"""Train configuration domain model."""

from pydantic import BaseModel, ConfigDict, Field

from .train_type import TrainType


class TrainConfig(BaseModel):
    """Options a train is built with.

    Unknown options are rejected so that a misspelled key does not silently
    fall back to a default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: TrainType = TrainType.PASSENGER
    wagon_count: int = Field(default=0, ge=0)
