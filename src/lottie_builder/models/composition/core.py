"""
Lottie Builder - Composition Data Model

THE MODEL for one Lottie/bodymovin animation document.

This class handles:
- Typed wrappers over the document (layers, assets, markers, meta)
- Name and id lookups kept in sync with the document arrays
- Layer management (add, remove, reorder, prune hidden)
- Asset management with reference-counted cascading removal
- Importing other animations as precomposition layers, merging their assets
- Change notification for renderers (on_source_change, on_object_change)

The Composition is INDEPENDENT of any renderer:
- No rendering logic; renderer shortcuts go through the accelerator
- A renderer re-reads get_animation_object() when on_source_change fires

Usage:
    comp = Composition(document)

    # Modify layers
    star = comp.get_layer('MyStar')
    star.set_position_xy(200, 120)
    comp.add_text_layer('Title', 'Hello')

    # Merge another animation
    comp.add_lottie_layer('Confetti', confetti_document)

    # Export without hidden layers and unused assets
    document = comp.export()
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from lottie_builder.config import DEFAULT_CONFIG, BuilderConfig
from lottie_builder.constants import KEY_ASSETS, KEY_LAYERS
from lottie_builder.exceptions import InvalidAnimationError
from lottie_builder.models.enums import ObjectType
from lottie_builder.services.accelerator import Accelerator, FallbackAccelerator
from lottie_builder.utils.events import EventSource
from lottie_builder.utils.ids import IdGenerator, new_id
from lottie_builder.utils.logger import logger_raise
from lottie_builder.utils.structural import clone_obj

from ._internal.asset import Asset, Marker, Meta
from ._internal.layer import Layer, create_layer
from ._internal.node import Node, SourceObject, create_prop_map, create_rev_prop_map, mapped_property
from .asset_mixin import CompositionAssetMixin
from .layer_mixin import CompositionLayerMixin
from .query_mixin import CompositionQueryMixin

COMPOSITION_PROP_MAP = create_prop_map(
    'assets', 'layers', 'markers', 'meta',
    frame_rate='fr',
    height='h',
    in_point='ip',
    is_3d='ddd',
    name='nm',
    out_point='op',
    version='v',
    width='w',
    assets='assets',
    layers='layers',
    markers='markers',
    meta='meta',
)
COMPOSITION_REV_PROP_MAP = create_rev_prop_map(COMPOSITION_PROP_MAP)


class Composition(CompositionLayerMixin, CompositionAssetMixin, CompositionQueryMixin, Node):
    """Animation document model with full operation API

    Properties:
        name, version, frame_rate, in_point, out_point, is_3d: document fields
        width, height: document size (0 when absent)
        layers: Layer wrappers, same order as the document's 'layers'
        assets: Asset wrappers, same order as the document's 'assets'
        markers: Marker wrappers or None
        meta: Meta wrapper or None
        acc: FallbackAccelerator (always present)
    """

    name = mapped_property(COMPOSITION_PROP_MAP['name'])
    version = mapped_property(COMPOSITION_PROP_MAP['version'])
    frame_rate = mapped_property(COMPOSITION_PROP_MAP['frame_rate'])
    in_point = mapped_property(COMPOSITION_PROP_MAP['in_point'])
    out_point = mapped_property(COMPOSITION_PROP_MAP['out_point'])
    is_3d = mapped_property(COMPOSITION_PROP_MAP['is_3d'])

    def __init__(self, source: SourceObject, accelerator: Optional[Accelerator] = None,
                 clone_source: bool = True, id_generator: Optional[IdGenerator] = None,
                 config: Optional[BuilderConfig] = None):
        """Wrap an animation document

        Args:
            source: Animation document (root object of a lottie file)
            accelerator: Optional renderer accelerator
            clone_source: If True the document is deep-copied first so the
                caller's object is never mutated
            id_generator: Source of fresh ids for renamed assets and layers
            config: Settings (defaults apply when None)
        """
        self._logger = logging.getLogger('Composition')
        self.config = config or DEFAULT_CONFIG
        self._id_generator = id_generator or new_id

        if clone_source:
            source = clone_obj(source, self.config.max_depth)
        super().__init__(source, COMPOSITION_PROP_MAP, COMPOSITION_REV_PROP_MAP)

        for key in (KEY_LAYERS, KEY_ASSETS):
            source[key] = self._as_array(source, key)

        self.on_source_change = EventSource('source_change')
        self.on_object_change = EventSource('object_change')

        self.acc = FallbackAccelerator(
            accelerator,
            reload=self.notify_source_change,
            layer_at_pt=self._get_layer_index_at_pt,
            composition_size=lambda: (self.width, self.height),
        )

        prop_map = COMPOSITION_PROP_MAP
        self.layers: List[Layer] = self._map_prop(prop_map['layers'], lambda s: create_layer(self, s)) or []
        self.assets: List[Asset] = self._map_prop(prop_map['assets'], Asset) or []
        self.markers: Optional[List[Marker]] = self._map_prop(prop_map['markers'], Marker)
        meta = self._map_prop(prop_map['meta'], Meta)
        self.meta: Optional[Meta] = meta[0] if meta else None

        self._layer_lookup: Dict[str, Layer] = {}
        self._asset_lookup: Dict[str, Asset] = {}
        self._update_layer_lookup()
        self._update_asset_lookup()

        self._logger.debug(f"Composition {self.name!r}: {len(self.layers)} layers, {len(self.assets)} assets")

    def _as_array(self, source: SourceObject, key: str) -> List[Any]:
        """The array stored at key; a bare object becomes a one-element array

        Raises:
            InvalidAnimationError: If the value is neither an array nor an object
        """
        value = source.get(key)
        if not value:
            return []
        if isinstance(value, list):
            return value
        if isinstance(value, dict):
            return [value]
        logger_raise(InvalidAnimationError(f"'{key}' must be an array, got {type(value).__name__}"),
                     "Cannot load animation", self._logger)

    @property
    def width(self) -> float:
        return self.get_value(COMPOSITION_PROP_MAP['width']) or 0

    @width.setter
    def width(self, value: Optional[float]):
        self.set_value(COMPOSITION_PROP_MAP['width'], value)

    @property
    def height(self) -> float:
        return self.get_value(COMPOSITION_PROP_MAP['height']) or 0

    @height.setter
    def height(self, value: Optional[float]):
        self.set_value(COMPOSITION_PROP_MAP['height'], value)

    @property
    def size(self) -> Tuple[float, float]:
        return self.width, self.height

    # ========================================
    # Notification
    # ========================================

    def notify_source_change(self) -> None:
        """Announce that the document changed (renderers should reload it)"""
        self.on_source_change.trigger()

    def _trigger_object_change(self, object_type: ObjectType, obj: Any) -> None:
        self.on_object_change.trigger(object_type, obj)

    # ========================================
    # Document Access
    # ========================================

    def get_animation_object(self) -> SourceObject:
        """The live document (not a copy); pass it to a renderer"""
        return self.get_source()

    def clone(self) -> 'Composition':
        """Independent Composition over a deep copy of the current document"""
        return Composition(self.get_source(), self.acc.accelerator, True, self._id_generator, self.config)

    def export(self) -> SourceObject:
        """Copy of the document without hidden layers and unused assets"""
        exported = Composition(self.get_source(), None, True, self._id_generator, self.config)
        exported.remove_hidden_layers()
        exported.remove_unused_assets()
        return exported.get_animation_object()

    def __repr__(self) -> str:
        return f"Composition(name={self.name!r}, layers={len(self.layers)}, assets={len(self.assets)})"
