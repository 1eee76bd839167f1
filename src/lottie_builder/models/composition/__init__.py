"""Composition model package"""

from .query_mixin import CompositionQueryMixin
from .layer_mixin import CompositionLayerMixin
from .asset_mixin import CompositionAssetMixin
from .core import Composition, COMPOSITION_PROP_MAP
from ._internal.node import Node, PropertyInfo, create_prop_map, create_rev_prop_map
from ._internal.asset import Asset, Marker, Meta
from ._internal.layer import (
    Layer, GroupLayer, ImageLayer, PrecompositionLayer, ShapeLayer, SolidLayer, TextLayer,
    create_layer, get_layer_class,
)

__all__ = [
    'Composition',
    'COMPOSITION_PROP_MAP',
    'Node',
    'PropertyInfo',
    'create_prop_map',
    'create_rev_prop_map',
    'Asset',
    'Marker',
    'Meta',
    'Layer',
    'GroupLayer',
    'ImageLayer',
    'PrecompositionLayer',
    'ShapeLayer',
    'SolidLayer',
    'TextLayer',
    'create_layer',
    'get_layer_class',
    'CompositionQueryMixin',
    'CompositionLayerMixin',
    'CompositionAssetMixin',
]
