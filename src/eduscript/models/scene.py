"""Scene data model."""

from typing import Optional, Tuple

from pydantic import BaseModel, Field

from .timeline import TimelineEvent
from .visuals import VisualElement


class SceneSpec(BaseModel):
    """A self-contained unit of the video with its own visuals and timeline."""

    title: str = Field(..., description="Scene title, not required to be unique")
    duration: float = Field(..., description="Declared minimum length in seconds", ge=0)
    narration: Optional[str] = Field(None, description="Text handed to text-to-speech")
    visuals: Tuple[VisualElement, ...] = Field(
        default_factory=tuple,
        description="Elements in declaration order",
    )
    timeline: Tuple[TimelineEvent, ...] = Field(
        default_factory=tuple,
        description="Events in declaration order, never re-sorted",
    )

    class Config:
        """Pydantic config."""
        frozen = True
