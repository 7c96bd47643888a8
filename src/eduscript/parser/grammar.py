"""Recursive-descent grammar for EduScript.

Grammar, informally::

    program   := video scene+ EOF
    video     := "video" "{" ("dimensions" ":" "(" integer "," integer ")")* "}"
    scene     := "scene" string "{" (property ","?)* "}"
    property  := "duration" ":" duration
               | "narration" ":" string
               | "visuals" "{" (element ","?)* "}"
               | "timeline" "{" (event ","?)* "}"
    element   := ("text" | "circle") "(" argument ("," argument)* ","? ")"
    argument  := identifier ":" value
    event     := "at" duration "{" (command ","?)* "}"
    command   := "fade" "(" string "," ("in" | "out") ("," "duration" ":" duration)* ","? ")"

Repeated properties and arguments merge by last write. The first mismatch
aborts the parse with a ScriptSyntaxError.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, NoReturn, Tuple

from ..models import (
    ANIMATION_VERBS,
    ELEMENT_KINDS,
    CircleElement,
    Dimensions,
    FadeCommand,
    FadeDirection,
    Point,
    Program,
    SceneSpec,
    TextElement,
    TimelineEvent,
    VideoSpec,
)
from .lexer import Scanner

logger = logging.getLogger(__name__)

SCENE_PROPERTIES = ("duration", "narration", "visuals", "timeline")


@dataclass(frozen=True)
class PropertyFragment:
    """One parsed `name: value` (or `name { ... }`) occurrence."""

    name: str
    value: Any
    offset: int


class PropertyBag:
    """Ordered fold of property fragments with overwrite-last semantics."""

    def __init__(self) -> None:
        self._values: Dict[str, PropertyFragment] = {}

    def merge(self, fragment: PropertyFragment) -> None:
        """Fold one fragment in; a repeated name replaces the earlier value."""
        if fragment.name in self._values:
            logger.debug(f"Property '{fragment.name}' repeated; keeping the later value")
        self._values[fragment.name] = fragment

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        fragment = self._values.get(name)
        return default if fragment is None else fragment.value


def fold_properties(fragments: List[PropertyFragment]) -> PropertyBag:
    """Merge fragments in declaration order into a single bag."""
    bag = PropertyBag()
    for fragment in fragments:
        bag.merge(fragment)
    return bag


class Parser:
    """Parses one script text into a Program."""

    def __init__(self, text: str) -> None:
        self.scanner = Scanner(text)

    def parse(self) -> Program:
        s = self.scanner
        video = self.video()
        scenes = [self.scene()]
        while not s.at_end():
            if s.peek_word() != "scene":
                raise s.error(['"scene"', "end of input"])
            scenes.append(self.scene())
        logger.debug(f"Parsed program with {len(scenes)} scene(s)")
        return Program(video=video, scenes=tuple(scenes))

    # Blocks

    def video(self) -> VideoSpec:
        s = self.scanner
        s.expect_keyword("video")
        s.expect("{")
        fragments = []
        while not s.peek("}"):
            if s.peek_word() != "dimensions":
                self._fail(['"dimensions"', '"}"'])
            _, offset = s.identifier()
            s.expect(":")
            fragments.append(PropertyFragment("dimensions", self.dimensions(), offset))
            s.accept(",")
        close = s.expect("}")
        bag = fold_properties(fragments)
        if "dimensions" not in bag:
            raise s.error(['"dimensions"'], offset=close)
        return VideoSpec(dimensions=bag.get("dimensions"))

    def dimensions(self) -> Dimensions:
        s = self.scanner
        s.expect("(")
        width = self._positive_integer()
        s.expect(",")
        height = self._positive_integer()
        s.expect(")")
        return Dimensions(width=width, height=height)

    def scene(self) -> SceneSpec:
        s = self.scanner
        s.expect_keyword("scene")
        title = s.string()
        s.expect("{")
        fragments = []
        while not s.peek("}"):
            fragments.append(self.scene_property())
            s.accept(",")
        close = s.expect("}")
        bag = fold_properties(fragments)
        if "duration" not in bag:
            raise s.error(
                ['"duration"'],
                offset=close,
                message=f'Expected "duration" in scene "{title}" but "}}" found.',
            )
        logger.debug(f"Parsed scene '{title}'")
        return SceneSpec(
            title=title,
            duration=bag.get("duration"),
            narration=bag.get("narration"),
            visuals=bag.get("visuals", ()),
            timeline=bag.get("timeline", ()),
        )

    def scene_property(self) -> PropertyFragment:
        s = self.scanner
        s.skip_trivia()
        offset = s.pos
        name = s.peek_word()
        if name not in SCENE_PROPERTIES:
            self._fail([f'"{p}"' for p in SCENE_PROPERTIES] + ['"}"'])
        s.expect_keyword(name)
        if name == "duration":
            s.expect(":")
            value = self._non_negative_duration()
        elif name == "narration":
            s.expect(":")
            value = s.string()
        elif name == "visuals":
            value = self._block(self.element, ELEMENT_KINDS)
        else:
            value = self._block(self.event, ("at",))
        return PropertyFragment(name, value, offset)

    # Visuals

    def element(self):
        s = self.scanner
        kind = s.expect_keyword("text", "circle")
        arguments = self._arguments(self._element_argument_parsers(kind))
        if kind == "text":
            return TextElement(
                id=arguments.get("id"),
                at=arguments.get("at"),
                content=arguments.get("content"),
            )
        return CircleElement(
            id=arguments.get("id"),
            at=arguments.get("at"),
            radius=arguments.get("radius"),
        )

    def _element_argument_parsers(self, kind: str) -> Dict[str, Callable[[], Any]]:
        parsers = {"id": self.scanner.string, "at": self.point}
        if kind == "text":
            parsers["content"] = self.scanner.string
        else:
            parsers["radius"] = self._positive_number
        return parsers

    def point(self) -> Point:
        s = self.scanner
        s.expect("(")
        x, _ = s.number()
        s.expect(",")
        y, _ = s.number()
        s.expect(")")
        return Point(x=x, y=y)

    # Timeline

    def event(self) -> TimelineEvent:
        s = self.scanner
        s.expect_keyword("at")
        time = self._non_negative_duration()
        animations = self._block(self.command, ANIMATION_VERBS)
        return TimelineEvent(time=time, animations=animations)

    def command(self) -> FadeCommand:
        s = self.scanner
        s.expect_keyword("fade")
        s.expect("(")
        target = s.string()
        s.expect(",")
        direction = FadeDirection(s.expect_keyword("in", "out"))
        fragments = []
        while s.accept(","):
            if s.peek(")"):
                break
            if s.peek_word() != "duration":
                self._fail(['"duration"', '")"'])
            _, offset = s.identifier()
            s.expect(":")
            fragments.append(PropertyFragment("duration", self._non_negative_duration(), offset))
        close = s.expect(")")
        bag = fold_properties(fragments)
        if "duration" not in bag:
            raise s.error(['"duration"'], offset=close, message='Expected "duration" argument but ")" found.')
        return FadeCommand(target=target, direction=direction, duration=bag.get("duration"))

    # Helpers

    def _block(self, item: Callable[[], Any], keywords: Tuple[str, ...]) -> Tuple[Any, ...]:
        """`{ item ","? ... }` as a tuple in declaration order."""
        s = self.scanner
        s.expect("{")
        items = []
        while not s.peek("}"):
            if s.peek_word() not in keywords:
                self._fail([f'"{k}"' for k in keywords] + ['"}"'])
            items.append(item())
            s.accept(",")
        s.expect("}")
        return tuple(items)

    def _arguments(self, parsers: Dict[str, Callable[[], Any]]) -> PropertyBag:
        """`( name: value, ... )` folded into a bag; all names are required."""
        s = self.scanner
        s.expect("(")
        expected = [f'"{name}"' for name in parsers]
        fragments = []
        while True:
            name = s.peek_word()
            if name not in parsers:
                self._fail(expected if not fragments else expected + ['")"'])
            _, offset = s.identifier()
            s.expect(":")
            fragments.append(PropertyFragment(name, parsers[name](), offset))
            if not s.accept(",") or s.peek(")"):
                break
        close = s.expect(")")
        bag = fold_properties(fragments)
        for name in parsers:
            if name not in bag:
                raise s.error([f'"{name}"'], offset=close, message=f'Expected "{name}" argument but ")" found.')
        return bag

    def _positive_integer(self) -> int:
        value, offset = self.scanner.integer()
        if value <= 0:
            raise self.scanner.error(["positive integer"], offset=offset)
        return value

    def _positive_number(self) -> float:
        value, offset = self.scanner.number()
        if value <= 0:
            raise self.scanner.error(["positive number"], offset=offset)
        return value

    def _non_negative_duration(self) -> float:
        value, offset = self.scanner.duration()
        if value < 0:
            raise self.scanner.error(["non-negative duration"], offset=offset)
        return value

    def _fail(self, expected: List[str]) -> NoReturn:
        raise self.scanner.error(expected)


def parse(text: str) -> Program:
    """Parse script text into a Program.

    Args:
        text: Script source.

    Returns:
        The program tree.

    Raises:
        ScriptSyntaxError: At the first grammar mismatch.
    """
    return Parser(text).parse()
