"""Script-space to raster-space coordinate mapping for rasterizers.

Script space is centered on the canvas with Y increasing upward. Raster
space has its origin at the top-left corner with Y increasing downward.
"""

from typing import Optional, Tuple

from .config import config
from .models import Dimensions, ElementState


def _scale(unit_scale: Optional[float], render_scale: Optional[int]) -> float:
    unit = config.unit_scale if unit_scale is None else unit_scale
    render = config.render_scale if render_scale is None else render_scale
    return unit * render


def canvas_size(dimensions: Dimensions, render_scale: Optional[int] = None) -> Tuple[int, int]:
    """Pixel size of the supersampled canvas."""
    render = config.render_scale if render_scale is None else render_scale
    return dimensions.width * render, dimensions.height * render


def to_raster(
    x: float,
    y: float,
    dimensions: Dimensions,
    unit_scale: Optional[float] = None,
    render_scale: Optional[int] = None,
) -> Tuple[float, float]:
    """Map a script-space point onto the canvas.

    Args:
        x: Horizontal script coordinate.
        y: Vertical script coordinate, up is positive.
        dimensions: Video dimensions; the point is centered on the
            supersampled canvas of that size.
        unit_scale: Pixels per script unit. Defaults to config.unit_scale.
        render_scale: Supersampling factor. Defaults to config.render_scale.

    Returns:
        (x, y) in raster pixels, origin top-left, down is positive.
    """
    width, height = canvas_size(dimensions, render_scale)
    scale = _scale(unit_scale, render_scale)
    return width / 2 + x * scale, height / 2 - y * scale


def raster_radius(
    radius: float,
    unit_scale: Optional[float] = None,
    render_scale: Optional[int] = None,
) -> float:
    """Scale a script-space length to raster pixels."""
    return radius * _scale(unit_scale, render_scale)


def element_position(
    state: ElementState,
    dimensions: Dimensions,
    unit_scale: Optional[float] = None,
    render_scale: Optional[int] = None,
) -> Tuple[float, float]:
    """Raster position of an evaluated element."""
    return to_raster(state.x, state.y, dimensions, unit_scale, render_scale)
