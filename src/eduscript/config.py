"""Configuration management."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "")
    return int(value) if value else None


class Config(BaseModel):
    """Application configuration."""

    # Sampling
    fps: int = Field(
        default_factory=lambda: int(os.getenv("EDUSCRIPT_FPS", "30")),
        description="Frames sampled per second of scene time"
    )
    max_workers: Optional[int] = Field(
        default_factory=lambda: _optional_int("EDUSCRIPT_MAX_WORKERS"),
        description="Thread pool size for frame evaluation (None lets the executor decide)"
    )

    # Raster mapping
    render_scale: int = Field(
        default_factory=lambda: int(os.getenv("EDUSCRIPT_RENDER_SCALE", "2")),
        description="Supersampling factor applied by the rasterizer"
    )
    unit_scale: float = Field(
        default_factory=lambda: float(os.getenv("EDUSCRIPT_UNIT_SCALE", "50")),
        description="Pixels per script unit"
    )

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("EDUSCRIPT_WORKSPACE", "temp")),
        description="Directory for build artefacts"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_required(self) -> None:
        """Validate that numeric settings are usable.

        Raises:
            ValueError: If any setting is out of range.
        """
        invalid: list[str] = []

        if self.fps <= 0:
            invalid.append(f"EDUSCRIPT_FPS={self.fps}")
        if self.render_scale <= 0:
            invalid.append(f"EDUSCRIPT_RENDER_SCALE={self.render_scale}")
        if self.unit_scale <= 0:
            invalid.append(f"EDUSCRIPT_UNIT_SCALE={self.unit_scale}")
        if self.max_workers is not None and self.max_workers <= 0:
            invalid.append(f"EDUSCRIPT_MAX_WORKERS={self.max_workers}")

        if invalid:
            raise ValueError(
                f"Invalid configuration: {', '.join(invalid)}. "
                "Values must be positive."
            )


# Global config instance
config = Config()
