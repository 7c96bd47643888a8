"""Timeline event and animation command models."""

from enum import Enum
from typing import Literal, Tuple

from pydantic import BaseModel, Field


class FadeDirection(str, Enum):
    """Direction of a fade animation."""
    IN = "in"
    OUT = "out"


class FadeCommand(BaseModel):
    """Fade an element's opacity in or out over a duration."""

    type: Literal["fade"] = "fade"
    target: str = Field(..., description="Id of the visual element to fade")
    direction: FadeDirection = Field(..., description="Fade in or out")
    duration: float = Field(..., description="Fade length in seconds", ge=0)

    class Config:
        """Pydantic config."""
        frozen = True


# Becomes Annotated[Union[...], Field(discriminator="type")] once a second verb exists.
AnimationCommand = FadeCommand

ANIMATION_VERBS = ("fade",)


class TimelineEvent(BaseModel):
    """Animations that start together at a fixed offset into the scene."""

    time: float = Field(..., description="Start time in seconds", ge=0)
    animations: Tuple[AnimationCommand, ...] = Field(
        default_factory=tuple,
        description="Commands in declaration order",
    )

    class Config:
        """Pydantic config."""
        frozen = True
