"""Timeline evaluation: the visual state of a scene at one instant."""

from typing import Dict, List

from ..models import (
    CircleElement,
    ElementState,
    FadeCommand,
    FadeDirection,
    SceneSpec,
    TextElement,
    VisualElement,
)


def initial_state(element: VisualElement) -> ElementState:
    """Baseline state for an element: fully visible at its anchor."""
    if isinstance(element, TextElement):
        return ElementState(
            id=element.id,
            type=element.type,
            opacity=1.0,
            x=element.at.x,
            y=element.at.y,
            content=element.content,
        )
    if isinstance(element, CircleElement):
        return ElementState(
            id=element.id,
            type=element.type,
            opacity=1.0,
            x=element.at.x,
            y=element.at.y,
            radius=element.radius,
        )
    raise TypeError(f"Unsupported visual element: {type(element).__name__}")


def fade_opacity(command: FadeCommand, start: float, t: float, current: float) -> float:
    """Opacity after applying one fade that starts at `start`, sampled at `t`.

    Returns `current` unchanged when the fade has not started yet.
    """
    end = start + command.duration
    fading_in = command.direction == FadeDirection.IN

    if command.duration == 0 and not fading_in:
        # Instant hide, permanent from `start` on.
        return 0.0 if t >= start else current

    if start <= t <= end:
        if command.duration == 0:
            return 1.0
        progress = (t - start) / command.duration
        return progress if fading_in else 1.0 - progress

    if t > end:
        return 1.0 if fading_in else 0.0

    return current


def evaluate_scene(scene: SceneSpec, t: float) -> List[ElementState]:
    """Compute every element's state in `scene` at time `t`.

    Events and their commands are applied in declaration order, not sorted
    by time; each applicable command overwrites the opacity set before it,
    so the last declared match wins. Unknown targets are skipped. The result
    is a fresh list in the scene's declared visual order.

    Args:
        scene: Parsed scene.
        t: Sample time in seconds.

    Returns:
        One ElementState per visual element.
    """
    states = [initial_state(element) for element in scene.visuals]

    # Later duplicates replace earlier ones, so the last declared id wins.
    by_id: Dict[str, ElementState] = {}
    for state in states:
        by_id[state.id] = state

    for event in scene.timeline:
        for command in event.animations:
            if isinstance(command, FadeCommand):
                target = by_id.get(command.target)
                if target is None:
                    continue
                target.opacity = fade_opacity(command, event.time, t, target.opacity)

    return states
