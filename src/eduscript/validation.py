"""Lint pass over a parsed program.

The evaluator tolerates dangling references and duplicate ids; this pass
reports them without changing evaluation results.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from .models import FadeCommand, Program, SceneSpec

logger = logging.getLogger(__name__)


class WarningCode(str, Enum):
    """Kinds of script warnings."""
    DUPLICATE_ID = "duplicate-id"
    UNRESOLVED_TARGET = "unresolved-target"
    OUT_OF_ORDER_EVENT = "out-of-order-event"
    EVENT_AFTER_END = "event-after-end"
    EMPTY_SCENE = "empty-scene"


@dataclass
class ScriptWarning:
    """A suspicious but legal construct in a script."""

    code: WarningCode
    message: str
    scene_index: int
    scene_title: str

    def __str__(self) -> str:
        return f"[{self.code.value}] scene {self.scene_index + 1} \"{self.scene_title}\": {self.message}"


def validate_scene(scene: SceneSpec, index: int) -> List[ScriptWarning]:
    """Collect warnings for one scene."""
    warnings: List[ScriptWarning] = []

    def warn(code: WarningCode, message: str) -> None:
        warnings.append(ScriptWarning(code, message, index, scene.title))

    if not scene.visuals:
        warn(WarningCode.EMPTY_SCENE, "scene declares no visuals")

    seen: set[str] = set()
    for element in scene.visuals:
        if element.id in seen:
            warn(WarningCode.DUPLICATE_ID, f"id '{element.id}' is declared more than once; the last one receives animations")
        seen.add(element.id)

    latest = None
    for event in scene.timeline:
        if latest is not None and event.time < latest:
            warn(
                WarningCode.OUT_OF_ORDER_EVENT,
                f"event at {event.time:g}s is declared after an event at {latest:g}s",
            )
        latest = event.time if latest is None else max(latest, event.time)

        if event.time > scene.duration:
            warn(
                WarningCode.EVENT_AFTER_END,
                f"event at {event.time:g}s starts after the declared duration of {scene.duration:g}s",
            )

        for command in event.animations:
            if isinstance(command, FadeCommand) and command.target not in seen:
                warn(WarningCode.UNRESOLVED_TARGET, f"fade target '{command.target}' matches no visual")

    return warnings


def validate_program(program: Program) -> List[ScriptWarning]:
    """Collect warnings for every scene in playback order.

    Args:
        program: Parsed program.

    Returns:
        Warnings, possibly empty. Each one is also logged.
    """
    warnings: List[ScriptWarning] = []
    for index, scene in enumerate(program.scenes):
        warnings.extend(validate_scene(scene, index))

    for warning in warnings:
        logger.warning(str(warning))

    return warnings
