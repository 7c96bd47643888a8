"""Visual element data models."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Point(BaseModel):
    """Anchor position in script space (centered, Y-up)."""

    x: float = Field(..., description="Horizontal offset from the canvas center")
    y: float = Field(..., description="Vertical offset from the canvas center, up is positive")

    class Config:
        """Pydantic config."""
        frozen = True


class TextElement(BaseModel):
    """A line of text anchored at a point."""

    type: Literal["text"] = "text"
    id: str = Field(..., description="Element identifier, unique within its scene")
    at: Point = Field(..., description="Anchor position")
    content: str = Field(..., description="Text to display")

    class Config:
        """Pydantic config."""
        frozen = True


class CircleElement(BaseModel):
    """A filled circle centered on its anchor."""

    type: Literal["circle"] = "circle"
    id: str = Field(..., description="Element identifier, unique within its scene")
    at: Point = Field(..., description="Center position")
    radius: float = Field(..., description="Radius in script units", gt=0)

    class Config:
        """Pydantic config."""
        frozen = True


VisualElement = Annotated[
    Union[TextElement, CircleElement],
    Field(discriminator="type"),
]

ELEMENT_KINDS = ("text", "circle")
