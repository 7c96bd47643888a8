"""Program tree and frame state models."""

from .program import Dimensions, Program, VideoSpec
from .scene import SceneSpec
from .state import ElementState, FrameSnapshot
from .timeline import ANIMATION_VERBS, AnimationCommand, FadeCommand, FadeDirection, TimelineEvent
from .visuals import ELEMENT_KINDS, CircleElement, Point, TextElement, VisualElement

__all__ = [
    "Program",
    "VideoSpec",
    "Dimensions",
    "SceneSpec",
    "Point",
    "TextElement",
    "CircleElement",
    "VisualElement",
    "ELEMENT_KINDS",
    "FadeDirection",
    "FadeCommand",
    "AnimationCommand",
    "ANIMATION_VERBS",
    "TimelineEvent",
    "ElementState",
    "FrameSnapshot",
]
