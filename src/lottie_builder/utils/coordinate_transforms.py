"""Coordinate transformation utilities for views that display a composition.

Provides conversion from view/viewport pixels into composition space for
the resize modes a player can use:
- contain: whole composition visible, letterboxed
- cover: viewport filled, composition cropped
- center: composition drawn at native size around the viewport center
"""

from typing import Iterable, Tuple

RESIZE_MODES = ('contain', 'cover', 'center')


def viewport_point_to_comp_point(x: float, y: float, viewport_size: Iterable[float],
                                 comp_size: Iterable[float], resize_mode: str = 'contain') -> Tuple[float, float]:
    """Convert a viewport point to composition coordinates.

    Args:
        x: Viewport X position (pixels)
        y: Viewport Y position (pixels)
        viewport_size: (width, height) of the viewport/view
        comp_size: (width, height) of the target composition
        resize_mode: 'contain', 'cover' or 'center'

    Returns:
        (comp_x, comp_y): Point in composition space

    A zero viewport or composition dimension leaves no scale to apply;
    the point is returned unchanged.

    Raises:
        ValueError: If resize_mode is unknown
    """
    if resize_mode not in RESIZE_MODES:
        raise ValueError(f"resize_mode must be one of {RESIZE_MODES}, got {resize_mode!r}")

    view_w, view_h = viewport_size
    comp_w, comp_h = comp_size

    if not (view_w and view_h and comp_w and comp_h):
        return x, y

    view_ratio = view_w / view_h
    comp_ratio = comp_w / comp_h

    # contain and cover pick opposite axes to fit
    fit_width = view_ratio < comp_ratio
    if resize_mode == 'cover':
        fit_width = not fit_width

    if resize_mode == 'center':
        x += (comp_w - view_w) / 2
        y += (comp_h - view_h) / 2
    elif fit_width:
        scale = comp_w / view_w
        x *= scale
        y = y * scale - (view_h * scale - comp_h) / 2
    else:
        scale = comp_h / view_h
        y *= scale
        x = x * scale - (view_w * scale - comp_w) / 2

    return x, y
