"""CLI entry point for EduScript."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from . import __version__
from .config import config
from .models import Program
from .parser import ScriptSyntaxError, parse_file
from .plan import plan_build
from .timeline import evaluate_scene, sample_scene
from .validation import validate_program

app = typer.Typer(
    name="eduscript",
    help="Parse EduScript files and evaluate their timelines",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"eduscript version {__version__}")
        raise typer.Exit()


def load_program(script: Path) -> Program:
    """Parse a script, reporting syntax errors and exiting on failure."""
    if not script.exists():
        typer.echo(f"❌ File not found: {script}")
        raise typer.Exit(1)

    try:
        return parse_file(script)
    except ScriptSyntaxError as e:
        typer.echo("❌ Error parsing script:")
        typer.echo(f"   Message: {e.message}")
        typer.echo(f"   Location: Line {e.line}, Column {e.column}")
        raise typer.Exit(1)


def require_valid_config() -> None:
    """Exit with an error when EDUSCRIPT_* settings are out of range."""
    try:
        config.validate_required()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)


def write_yaml(data: object, output: Optional[Path]) -> None:
    """Dump data as YAML to a file, or to stdout when output is None."""
    text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    if output is None:
        typer.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text)
    typer.echo(f"✅ Written: {output}")


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """EduScript - compile narrated animation scripts."""
    pass


@app.command()
def check(
    script: Path = typer.Argument(..., help="Path to the .eduscript file"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with an error when warnings are found"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Parse and lint a script, then summarize its scenes."""
    setup_logging(verbose)
    program = load_program(script)

    dims = program.video.dimensions
    typer.echo(f"✅ Script parsed successfully: {script}")
    typer.echo(f"   Dimensions: {dims.width}x{dims.height}")
    typer.echo(f"   Scenes: {len(program.scenes)}")

    total_duration = sum(scene.duration for scene in program.scenes)
    typer.echo(f"   Total declared duration: {total_duration:.1f}s")

    typer.echo("\n🎬 Scenes:")
    for i, scene in enumerate(program.scenes, start=1):
        typer.echo(f"   {i}. {scene.title}: {scene.duration:g}s, "
                   f"{len(scene.visuals)} visual(s), {len(scene.timeline)} event(s)")
        if scene.narration:
            preview = scene.narration[:60] + "..." if len(scene.narration) > 60 else scene.narration
            typer.echo(f"      → {preview}")

    warnings = validate_program(program)
    if warnings:
        typer.echo(f"\n⚠️  {len(warnings)} warning(s):")
        for warning in warnings:
            typer.echo(f"   - {warning}")
        if strict:
            raise typer.Exit(1)


@app.command()
def ast(
    script: Path = typer.Argument(..., help="Path to the .eduscript file"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write YAML here instead of stdout"
    ),
) -> None:
    """Dump the parsed program tree as YAML."""
    program = load_program(script)
    write_yaml(program.to_dict(), output)


@app.command()
def frames(
    script: Path = typer.Argument(..., help="Path to the .eduscript file"),
    scene_number: int = typer.Option(
        1,
        "--scene",
        "-s",
        help="Scene number, starting at 1",
        min=1
    ),
    fps: int = typer.Option(
        config.fps,
        "--fps",
        "-f",
        help="Sampling rate",
        min=1
    ),
    at: Optional[float] = typer.Option(
        None,
        "--at",
        "-t",
        help="Evaluate a single instant (seconds) instead of every frame",
        min=0
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write YAML here instead of stdout"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Evaluate a scene's timeline and dump the element states as YAML."""
    setup_logging(verbose)
    require_valid_config()
    program = load_program(script)

    if scene_number > len(program.scenes):
        typer.echo(f"❌ Scene {scene_number} does not exist (script has {len(program.scenes)})")
        raise typer.Exit(1)
    scene = program.scenes[scene_number - 1]

    if at is not None:
        states = evaluate_scene(scene, at)
        write_yaml({"time": at, "elements": [s.to_dict() for s in states]}, output)
        return

    snapshots = sample_scene(scene, fps=fps)
    data: List[dict] = [snap.to_dict() for snap in snapshots]
    write_yaml(data, output)


@app.command()
def plan(
    script: Path = typer.Argument(..., help="Path to the .eduscript file"),
    workspace: Path = typer.Option(
        config.workspace,
        "--workspace",
        "-w",
        help="Directory for build artefacts"
    ),
) -> None:
    """Show where each scene's audio, frames and clip will be written."""
    require_valid_config()
    program = load_program(script)
    build = plan_build(program, workspace)

    typer.echo(f"📋 Build plan ({len(build.scenes)} scene(s)):")
    for scene in build.scenes:
        typer.echo(f"\n   {scene.index}. {scene.title} ({scene.duration:g}s)")
        if scene.narration:
            typer.echo(f"      Audio:  {scene.audio_path}")
        else:
            typer.echo("      Audio:  (no narration)")
        typer.echo(f"      Frames: {scene.frame_pattern}")
        typer.echo(f"      Clip:   {scene.clip_path}")
    typer.echo(f"\n   Output: {build.output_path}")


if __name__ == "__main__":
    app()
