"""
Lottie Builder

Typed, mutable object model over Lottie/bodymovin animation documents:
edit layers and assets, import other animations with asset merging, and
export the result.

Usage:
    from lottie_builder import Composition

    comp = Composition(document)
    comp.add_lottie_layer('Badge', badge_document)
    document = comp.export()
"""

from .version import VERSION
from .config import BuilderConfig, DEFAULT_CONFIG, config_from_dict, load_config
from .exceptions import LottieBuilderError, MaxDepthExceededError, InvalidAnimationError, ConfigError
from .models import (
    Color, BlendMode, LayerType, MatteMode, ObjectType,
    Point, Point3D, Size, Size3D, TransformOptions, TransformOptionsWithSize, create_transform,
    TextDataOptions, create_text_data, create_text_data_from,
    Composition, Layer, GroupLayer, ImageLayer, PrecompositionLayer, ShapeLayer, SolidLayer, TextLayer,
    Asset, Marker, Meta, create_layer,
)
from .services import Accelerator, Capability, FallbackAccelerator
from .utils import (
    EventSource, SequentialIdGenerator, clone_obj, configure_logging, deep_compare,
    new_id, viewport_point_to_comp_point,
)

__version__ = VERSION

__all__ = [
    'Composition', 'Layer', 'GroupLayer', 'ImageLayer', 'PrecompositionLayer', 'ShapeLayer', 'SolidLayer',
    'TextLayer', 'Asset', 'Marker', 'Meta', 'create_layer',
    'Color', 'BlendMode', 'LayerType', 'MatteMode', 'ObjectType',
    'Point', 'Point3D', 'Size', 'Size3D', 'TransformOptions', 'TransformOptionsWithSize', 'create_transform',
    'TextDataOptions', 'create_text_data', 'create_text_data_from',
    'BuilderConfig', 'DEFAULT_CONFIG', 'config_from_dict', 'load_config',
    'LottieBuilderError', 'MaxDepthExceededError', 'InvalidAnimationError', 'ConfigError',
    'Accelerator', 'Capability', 'FallbackAccelerator',
    'EventSource', 'SequentialIdGenerator', 'clone_obj', 'configure_logging', 'deep_compare',
    'new_id', 'viewport_point_to_comp_point',
]
