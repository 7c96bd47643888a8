"""EduScript: parse narrated animation scripts and evaluate their timelines."""

__version__ = "0.1.0"

from .models import ElementState, FrameSnapshot, Program, SceneSpec
from .parser import ScriptSyntaxError, parse, parse_file
from .timeline import evaluate_scene, sample_scene
from .validation import ScriptWarning, validate_program

__all__ = [
    "__version__",
    "parse",
    "parse_file",
    "ScriptSyntaxError",
    "Program",
    "SceneSpec",
    "ElementState",
    "FrameSnapshot",
    "evaluate_scene",
    "sample_scene",
    "ScriptWarning",
    "validate_program",
]
