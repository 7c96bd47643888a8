"""Program tree root model."""

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import BaseModel, Field

from .scene import SceneSpec


class Dimensions(BaseModel):
    """Canvas size in pixels."""

    width: int = Field(..., description="Canvas width", gt=0)
    height: int = Field(..., description="Canvas height", gt=0)

    class Config:
        """Pydantic config."""
        frozen = True


class VideoSpec(BaseModel):
    """Video-wide settings."""

    dimensions: Dimensions = Field(..., description="Target canvas size")

    class Config:
        """Pydantic config."""
        frozen = True


class Program(BaseModel):
    """A parsed script: one video block and its scenes in playback order."""

    video: VideoSpec = Field(..., description="Video settings")
    scenes: Tuple[SceneSpec, ...] = Field(..., description="Scenes in playback order", min_length=1)

    class Config:
        """Pydantic config."""
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        """Return the tree as plain data."""
        return self.model_dump(mode="json")

    def to_yaml(self, path: Path) -> None:
        """Save the program tree to a YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
