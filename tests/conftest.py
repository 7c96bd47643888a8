"""Shared fixtures for EduScript tests."""

import pytest

from eduscript.parser import parse

EXAMPLE_SCRIPT = """\
// Example lesson
video {
  dimensions: (1280, 720)
}

scene "Intro" {
  duration: 5s
  narration: "Watch the circle."
  visuals {
    text(id: "title", content: "Circles", at: (0, 3))
    circle(id: "c", radius: 1, at: (-2.5, 0))
  }
  timeline {
    at 0s { fade("c", out, duration: 0s) }
    at 1s { fade("c", in, duration: 1s) }
  }
}

scene "Outro" {
  duration: 2s
}
"""


def _wrap_scene(scene_body: str, title: str = "S") -> str:
    return "video { dimensions: (640, 480) }\n" f'scene "{title}" {{\n{scene_body}\n}}\n'


@pytest.fixture
def example_text():
    return EXAMPLE_SCRIPT


@pytest.fixture
def program():
    return parse(EXAMPLE_SCRIPT)


@pytest.fixture
def intro(program):
    return program.scenes[0]


@pytest.fixture
def make_script():
    """Wrap a scene body in a minimal valid program."""
    return _wrap_scene


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "lesson.eduscript"
    path.write_text(EXAMPLE_SCRIPT, encoding="utf-8")
    return path
