"""Timeline evaluation and frame sampling."""

from .evaluator import evaluate_scene, fade_opacity, initial_state
from .frames import effective_duration, frame_count, sample_scene, sample_times, snapshot

__all__ = [
    "evaluate_scene",
    "fade_opacity",
    "initial_state",
    "effective_duration",
    "frame_count",
    "sample_scene",
    "sample_times",
    "snapshot",
]
