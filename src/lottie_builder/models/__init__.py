"""
Lottie Builder - Data Models

This module contains the model classes over an animation document.

Public API: Import Composition and the layer classes from models.composition
The models/composition/_internal/ subdirectory contains internal implementation only.
"""

from .color import Color
from .enums import BlendMode, LayerType, MatteMode, ObjectType
from .transform import Point, Point3D, Size, Size3D, TransformOptions, TransformOptionsWithSize, create_transform
from .text import TextDataOptions, create_text_data, create_text_data_from
from .composition import (
    Composition, Layer, GroupLayer, ImageLayer, PrecompositionLayer, ShapeLayer, SolidLayer, TextLayer,
    Asset, Marker, Meta, create_layer,
)

__all__ = [
    'Color', 'BlendMode', 'LayerType', 'MatteMode', 'ObjectType',
    'Point', 'Point3D', 'Size', 'Size3D', 'TransformOptions', 'TransformOptionsWithSize', 'create_transform',
    'TextDataOptions', 'create_text_data', 'create_text_data_from',
    'Composition', 'Layer', 'GroupLayer', 'ImageLayer', 'PrecompositionLayer', 'ShapeLayer', 'SolidLayer',
    'TextLayer', 'Asset', 'Marker', 'Meta', 'create_layer',
]
