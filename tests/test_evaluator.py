from concurrent.futures import ThreadPoolExecutor

import pytest

from eduscript.models import (
    CircleElement,
    FadeCommand,
    FadeDirection,
    Point,
    SceneSpec,
    TextElement,
    TimelineEvent,
)
from eduscript.parser import parse
from eduscript.timeline import evaluate_scene, fade_opacity


def fade(target, direction, duration):
    return FadeCommand(target=target, direction=FadeDirection(direction), duration=duration)


def scene_with(*events, visuals=None):
    if visuals is None:
        visuals = (
            CircleElement(id="x", at=Point(x=1, y=2), radius=1),
            TextElement(id="y", at=Point(x=0, y=0), content="hello"),
        )
    return SceneSpec(title="t", duration=10, visuals=visuals, timeline=events)


def opacity_of(scene, t, element_id="x"):
    return next(s.opacity for s in evaluate_scene(scene, t) if s.id == element_id)


class TestBaseline:
    def test_one_state_per_element_in_order(self, intro):
        states = evaluate_scene(intro, 4.0)
        assert [s.id for s in states] == ["title", "c"]

    def test_static_fields_copied(self):
        states = evaluate_scene(scene_with(), 0)
        circle, text = states
        assert (circle.type, circle.x, circle.y, circle.radius, circle.content) == ("circle", 1, 2, 1, None)
        assert (text.type, text.content, text.radius) == ("text", "hello", None)
        assert circle.opacity == text.opacity == 1.0

    def test_empty_scene(self):
        assert evaluate_scene(SceneSpec(title="e", duration=1), 0.5) == []


class TestFade:
    @pytest.mark.parametrize("t,expected", [(1.0, 0.0), (1.5, 0.5), (2.0, 1.0), (7.0, 1.0)])
    def test_fade_in(self, t, expected):
        scene = scene_with(TimelineEvent(time=1, animations=(fade("x", "in", 1),)))
        assert opacity_of(scene, t) == pytest.approx(expected)

    @pytest.mark.parametrize("t,expected", [(2.0, 1.0), (3.0, 0.5), (4.0, 0.0), (9.0, 0.0)])
    def test_fade_out(self, t, expected):
        scene = scene_with(TimelineEvent(time=2, animations=(fade("x", "out", 2),)))
        assert opacity_of(scene, t) == pytest.approx(expected)

    def test_before_start_leaves_baseline(self):
        scene = scene_with(TimelineEvent(time=3, animations=(fade("x", "in", 1),)))
        assert opacity_of(scene, 2.9) == 1.0

    def test_clamped_after_end(self):
        fade_in = scene_with(TimelineEvent(time=0.5, animations=(fade("x", "in", 0.25),)))
        fade_out = scene_with(TimelineEvent(time=0.5, animations=(fade("x", "out", 0.25),)))
        for t in (0.75, 0.8, 1, 5, 1000):
            assert opacity_of(fade_in, t) == 1.0
            assert opacity_of(fade_out, t) == 0.0

    def test_instant_hide(self):
        scene = scene_with(TimelineEvent(time=0, animations=(fade("x", "out", 0),)))
        for t in (0, 0.001, 1, 9.99):
            assert opacity_of(scene, t) == 0.0
            assert opacity_of(scene, t, "y") == 1.0

    def test_instant_hide_waits_for_start(self):
        scene = scene_with(TimelineEvent(time=2, animations=(fade("x", "out", 0),)))
        assert opacity_of(scene, 1.99) == 1.0
        assert opacity_of(scene, 2) == 0.0

    def test_zero_length_fade_in_is_visible_at_start(self):
        scene = scene_with(
            TimelineEvent(time=0, animations=(fade("x", "out", 0),)),
            TimelineEvent(time=1, animations=(fade("x", "in", 0),)),
        )
        assert opacity_of(scene, 0.5) == 0.0
        assert opacity_of(scene, 1) == 1.0
        assert opacity_of(scene, 2) == 1.0

    def test_fade_opacity_keeps_current_before_start(self):
        assert fade_opacity(fade("x", "in", 1), start=5, t=1, current=0.3) == 0.3


class TestDeclarationOrder:
    def test_last_declared_match_wins_over_chronology(self):
        # Declared 2s first, then 1s. At 1.5 only the 1s window is active,
        # so it applies; the 2s event has not started.
        scene = scene_with(
            TimelineEvent(time=2, animations=(fade("x", "in", 1),)),
            TimelineEvent(time=1, animations=(fade("x", "out", 1),)),
        )
        assert opacity_of(scene, 1.5) == pytest.approx(0.5)
        # At 2.5 both match: the 2s fade-in gives 0.5 but the later-declared
        # 1s fade-out has ended and clamps to 0, overriding it.
        assert opacity_of(scene, 2.5) == 0.0

    def test_sorted_order_would_differ(self):
        in_declaration_order = scene_with(
            TimelineEvent(time=2, animations=(fade("x", "in", 1),)),
            TimelineEvent(time=1, animations=(fade("x", "out", 1),)),
        )
        chronological = scene_with(
            TimelineEvent(time=1, animations=(fade("x", "out", 1),)),
            TimelineEvent(time=2, animations=(fade("x", "in", 1),)),
        )
        assert opacity_of(in_declaration_order, 2.5) == 0.0
        assert opacity_of(chronological, 2.5) == pytest.approx(0.5)

    def test_commands_within_event_apply_in_order(self):
        scene = scene_with(TimelineEvent(time=0, animations=(fade("x", "out", 1), fade("x", "in", 4))))
        assert opacity_of(scene, 2) == pytest.approx(0.5)

    def test_duplicate_ids_resolve_to_last_declared(self):
        visuals = (
            CircleElement(id="x", at=Point(x=0, y=0), radius=1),
            CircleElement(id="x", at=Point(x=5, y=5), radius=2),
        )
        scene = scene_with(TimelineEvent(time=0, animations=(fade("x", "out", 0),)), visuals=visuals)
        first, second = evaluate_scene(scene, 1)
        assert first.opacity == 1.0
        assert second.opacity == 0.0


class TestTotality:
    def test_unresolved_target_is_a_no_op(self):
        scene = scene_with(TimelineEvent(time=0, animations=(fade("missing_id", "out", 0),)))
        for t in (0, 1, 5):
            assert [s.opacity for s in evaluate_scene(scene, t)] == [1.0, 1.0]

    def test_deterministic(self, intro):
        assert evaluate_scene(intro, 1.37) == evaluate_scene(intro, 1.37)

    def test_fresh_states_per_call(self, intro):
        first = evaluate_scene(intro, 1.5)
        first[1].opacity = 0.9
        assert evaluate_scene(intro, 1.5)[1].opacity == pytest.approx(0.5)

    def test_concurrent_calls(self, intro):
        times = [i / 30 for i in range(150)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            parallel = list(executor.map(lambda t: evaluate_scene(intro, t), times))
        assert parallel == [evaluate_scene(intro, t) for t in times]


class TestEndToEnd:
    def test_fade_out_then_in(self):
        program = parse("""
        video { dimensions: (1280, 720) }
        scene "Demo" {
          duration: 5s
          visuals { circle(id: "c", radius: 1, at: (0, 0)) }
          timeline {
            at 0s { fade("c", out, duration: 0s) }
            at 1s { fade("c", in, duration: 1s) }
          }
        }
        """)
        scene = program.scenes[0]
        assert opacity_of(scene, 0, "c") == 0.0
        assert opacity_of(scene, 1.5, "c") == pytest.approx(0.5)
        assert opacity_of(scene, 3, "c") == 1.0

    def test_example_fixture(self, intro):
        states = {s.id: s for s in evaluate_scene(intro, 1.5)}
        assert states["title"].opacity == 1.0
        assert states["c"].opacity == pytest.approx(0.5)
        assert (states["c"].x, states["c"].y) == (-2.5, 0.0)
