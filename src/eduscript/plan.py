"""Per-scene artefact layout for downstream audio, frame and clip tools."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import config
from .models import Program

FRAME_PATTERN = "frame_%05d.png"
OUTPUT_NAME = "output.mp4"


@dataclass
class ScenePlan:
    """Where the external collaborators read and write one scene's artefacts."""

    index: int
    title: str
    narration: Optional[str]
    duration: float
    audio_path: Path
    frame_dir: Path
    clip_path: Path

    @property
    def frame_pattern(self) -> Path:
        """printf-style frame path understood by encoders."""
        return self.frame_dir / FRAME_PATTERN

    def frame_path(self, frame_index: int) -> Path:
        return self.frame_dir / (FRAME_PATTERN % frame_index)


@dataclass
class BuildPlan:
    """Artefact layout for a whole program."""

    workspace: Path
    scenes: List[ScenePlan]
    output_path: Path


def plan_build(program: Program, workspace: Optional[Path] = None) -> BuildPlan:
    """Lay out artefact paths for every scene.

    Scenes are numbered from 1 in playback order.

    Args:
        program: Parsed program.
        workspace: Artefact directory. Defaults to config.workspace.

    Returns:
        The build plan. Nothing is created on disk.
    """
    workspace = Path(workspace) if workspace is not None else config.workspace
    scenes = []
    for number, scene in enumerate(program.scenes, start=1):
        scenes.append(ScenePlan(
            index=number,
            title=scene.title,
            narration=scene.narration,
            duration=scene.duration,
            audio_path=workspace / f"scene_{number}.mp3",
            frame_dir=workspace / f"scene_{number}_frames",
            clip_path=workspace / f"clip_{number}.mp4",
        ))
    return BuildPlan(workspace=workspace, scenes=scenes, output_path=Path(OUTPUT_NAME))
