"""Frame sampling over a scene's duration."""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional

from ..config import config
from ..models import FrameSnapshot, SceneSpec
from .evaluator import evaluate_scene

logger = logging.getLogger(__name__)


def effective_duration(scene: SceneSpec, narration_length: Optional[float] = None) -> float:
    """Length a scene actually plays for.

    Args:
        scene: Parsed scene.
        narration_length: Measured length of the narration audio in seconds,
            if any was produced.

    Returns:
        The longer of the declared duration and the narration length.
    """
    if narration_length is None:
        return scene.duration
    return max(scene.duration, narration_length)


def frame_count(duration: float, fps: int) -> int:
    """Number of frames sampled across `[0, duration)` at `fps`."""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    if duration <= 0:
        return 0
    # Rounding first keeps e.g. 2.3 * 30 from landing just under 69.
    return math.floor(round(duration * fps, 9))


def sample_times(duration: float, fps: int) -> Iterator[float]:
    """Yield the sample time of each frame index."""
    for index in range(frame_count(duration, fps)):
        yield index / fps


def snapshot(scene: SceneSpec, index: int, fps: int) -> FrameSnapshot:
    """Evaluate the frame at `index`."""
    time = index / fps
    return FrameSnapshot(index=index, time=time, elements=evaluate_scene(scene, time))


def sample_scene(
    scene: SceneSpec,
    fps: Optional[int] = None,
    duration: Optional[float] = None,
    max_workers: Optional[int] = None,
) -> List[FrameSnapshot]:
    """Evaluate every frame of a scene.

    Frames are independent, so they are evaluated on a thread pool and
    returned in index order.

    Args:
        scene: Parsed scene.
        fps: Sampling rate. Defaults to config.fps.
        duration: Length to sample. Defaults to the declared duration.
        max_workers: Thread pool size. Defaults to config.max_workers.

    Returns:
        One FrameSnapshot per sampled instant.
    """
    fps = config.fps if fps is None else fps
    duration = scene.duration if duration is None else duration
    workers = config.max_workers if max_workers is None else max_workers
    total = frame_count(duration, fps)

    logger.debug(f"Sampling scene '{scene.title}': {total} frames at {fps} fps")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        frames = list(executor.map(lambda index: snapshot(scene, index, fps), range(total)))

    logger.debug(f"Sampled {len(frames)} frames for scene '{scene.title}'")
    return frames
