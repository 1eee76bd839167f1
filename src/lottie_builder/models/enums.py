"""Lottie schema enumerations (integer values as stored in documents)."""

from enum import Enum, IntEnum


class LayerType(IntEnum):
    """Layer 'ty' discriminator values."""
    PRECOMPOSITION = 0
    SOLID = 1
    IMAGE = 2
    GROUP = 3
    SHAPE = 4
    TEXT = 5
    AUDIO = 6
    VIDEO_PLACEHOLDER = 7
    IMAGE_SEQUENCE = 8
    VIDEO = 9
    IMAGE_PLACEHOLDER = 10
    GUIDE = 11
    ADJUSTMENT = 12
    CAMERA = 13
    LIGHT = 14


class BlendMode(IntEnum):
    """Layer 'bm' values."""
    NORMAL = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3
    DARKEN = 4
    LIGHTEN = 5
    COLOR_DODGE = 6
    COLOR_BURN = 7
    HARD_LIGHT = 8
    SOFT_LIGHT = 9
    DIFFERENCE = 10
    EXCLUSION = 11
    HUE = 12
    SATURATION = 13
    COLOR = 14
    LUMINOSITY = 15


class MatteMode(IntEnum):
    """Layer 'tt' values."""
    NORMAL = 0
    ALPHA = 1
    INVERTED_ALPHA = 2
    LUMA = 3
    INVERTED_LUMA = 4


class ObjectType(str, Enum):
    """Kinds of object reported by Composition.on_object_change."""
    COMPOSITION = 'composition'
    LAYER = 'layer'
    ASSET = 'asset'
