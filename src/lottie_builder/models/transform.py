"""Transform data structures and the default transform builder."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from lottie_builder.constants import (
    TRANSFORM_INDEX_ANCHOR, TRANSFORM_INDEX_POSITION, TRANSFORM_INDEX_SCALE,
    TRANSFORM_INDEX_ROTATION, TRANSFORM_INDEX_OPACITY,
)


@dataclass
class Point:
    """2D point in composition pixels."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = point"""
        return iter((self.x, self.y))


@dataclass
class Point3D:
    """3D point in composition pixels."""
    x: float
    y: float
    z: float

    def __iter__(self):
        return iter((self.x, self.y, self.z))


@dataclass
class Size:
    """Width/height pair.

    Used both for pixel sizes and for Lottie scale values (percent).
    """
    width: float
    height: float

    def __iter__(self):
        """Allow tuple unpacking: w, h = size"""
        return iter((self.width, self.height))


@dataclass
class Size3D:
    """Width/height/depth triple (3D scale values)."""
    width: float
    height: float
    depth: float

    def __iter__(self):
        return iter((self.width, self.height, self.depth))


@dataclass
class TransformOptions:
    """Options for create_transform.

    Scale and opacity are unit values (1.0 == 100%); create_transform
    converts them to Lottie's x100 representation. x/y left as None mean 0
    here; Composition builders read None as the composition center.
    scale_x/y/z fall back to scale when left as None.
    """
    x: Optional[float] = None
    y: Optional[float] = None
    z: float = 0
    anchor_x: float = 0
    anchor_y: float = 0
    anchor_z: float = 0
    scale: float = 1
    scale_x: Optional[float] = None
    scale_y: Optional[float] = None
    scale_z: Optional[float] = None
    rotation: float = 0
    opacity: float = 1


@dataclass
class TransformOptionsWithSize(TransformOptions):
    """Transform options plus the layer size used for precomposition layers."""
    width: Optional[float] = None
    height: Optional[float] = None


def create_transform(options: Optional[TransformOptions] = None) -> Dict[str, Any]:
    """Build a static Lottie transform ('ks') object.

    Args:
        options: Transform options (defaults to identity transform)

    Returns:
        Dict with o, r, p, a, s channels, each {a: 0, k: value, ix: index}
    """
    if options is None:
        options = TransformOptions()

    def channel(value, index):
        return {'a': 0, 'k': value, 'ix': index}

    scale_x = options.scale if options.scale_x is None else options.scale_x
    scale_y = options.scale if options.scale_y is None else options.scale_y
    scale_z = options.scale if options.scale_z is None else options.scale_z

    return {
        'o': channel(options.opacity * 100, TRANSFORM_INDEX_OPACITY),
        'r': channel(options.rotation, TRANSFORM_INDEX_ROTATION),
        'p': channel([options.x or 0, options.y or 0, options.z], TRANSFORM_INDEX_POSITION),
        'a': channel([options.anchor_x, options.anchor_y, options.anchor_z], TRANSFORM_INDEX_ANCHOR),
        's': channel([scale_x * 100, scale_y * 100, scale_z * 100], TRANSFORM_INDEX_SCALE),
    }
