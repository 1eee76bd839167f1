"""
Composition Layer Management Mixin

This mixin provides the layer operations of the Composition model.

Methods:
    Layer CRUD:
        - add_layer
        - remove_layer
        - remove_hidden_layers
        - set_layer_index

    Builders:
        - add_text_layer
        - add_lottie_layer

    Derived views:
        - _update_layer_lookup
        - _update_layer_indexes
        - _get_unique_layer_name
"""

import dataclasses
from typing import Any, Dict, Optional, Union

from lottie_builder.constants import KEY_LAYERS
from lottie_builder.exceptions import InvalidAnimationError
from lottie_builder.models.enums import BlendMode, LayerType
from lottie_builder.models.text import TextDataOptions, create_text_data_from
from lottie_builder.models.transform import TransformOptions, TransformOptionsWithSize, create_transform
from lottie_builder.utils.logger import logger_raise
from lottie_builder.utils.structural import ary_remove_item, clone_obj

from ._internal.layer import (
    LAYER_PROP_MAP, TEXT_LAYER_PROP_MAP,
    Layer, PrecompositionLayer, TextLayer, create_layer,
)


def _key(name: str) -> str:
    return LAYER_PROP_MAP[name].key


class CompositionLayerMixin:
    """Mixin providing layer management for Composition

    This mixin assumes the parent class has:
        - self._source: root document (dict with a 'layers' list)
        - self.layers: list of Layer wrappers, 1:1 with the 'layers' list
        - self._layer_lookup: dict of name -> Layer
        - self._logger: logging.Logger instance
        - self.notify_source_change(): source-changed notification
    """

    @property
    def _source_layers(self):
        return self._source[KEY_LAYERS]

    # ========================================
    # Layer CRUD Operations
    # ========================================

    def add_layer(self, layer_source: Dict[str, Any], index: int = 0,
                  trigger_source_change: bool = True) -> Layer:
        """Insert a layer fragment

        The fragment is inserted as-is (not copied); later edits through the
        returned Layer mutate it.

        Args:
            layer_source: Layer fragment in bodymovin format
            index: Insert position, clamped into the valid range
            trigger_source_change: If False no source change is announced

        Returns:
            Layer wrapping layer_source
        """
        if not isinstance(layer_source, dict):
            raise TypeError(f"Expected dict layer source, got {type(layer_source).__name__}")

        count = len(self._source_layers)
        if index > count:
            index = count - 1
        if index < 0:
            index = 0

        self._source_layers.insert(index, layer_source)
        layer = create_layer(self, layer_source)
        self.layers.insert(index, layer)

        self._update_layer_lookup()
        self._update_layer_indexes()
        self._logger.debug(f"Added layer {layer.name!r} at {index}")

        if trigger_source_change:
            self.notify_source_change()
        return layer

    def remove_layer(self, layer: Layer, remove_unused_assets: bool = True,
                     trigger_source_change: bool = True) -> bool:
        """Remove a layer and, optionally, assets only it referenced

        Args:
            layer: Layer to remove
            remove_unused_assets: Cascade-remove the referenced asset once
                nothing references it anymore
            trigger_source_change: If False no source change is announced

        Returns:
            False if the layer is not part of this composition
        """
        layer_source = layer.get_source()
        if not ary_remove_item(self._source_layers, layer_source):
            return False
        ary_remove_item(self.layers, layer)

        ref_id = layer_source.get(_key('ref_id'))
        if ref_id and remove_unused_assets and self.get_asset_ref_count(ref_id) == 0:
            self.remove_asset(ref_id, False)

        self._update_layer_lookup()
        self._update_layer_indexes()
        self._logger.debug(f"Removed layer {layer.name!r}")

        if trigger_source_change:
            self.notify_source_change()
        return True

    def remove_hidden_layers(self) -> int:
        """Remove every hidden layer with a single source change

        Returns:
            Number of layers removed
        """
        hidden = [layer for layer in self.layers if layer.is_hidden]
        if not hidden:
            return 0
        for layer in hidden:
            self.remove_layer(layer, True, False)
        self.notify_source_change()
        return len(hidden)

    def set_layer_index(self, layer: Layer, index: int) -> bool:
        """Move a layer to a new position (clamped)

        Returns:
            False if the layer is not part of this composition
        """
        current = self._index_of(layer)
        if current == -1:
            return False

        if index >= len(self.layers):
            index = len(self.layers) - 1
        if index < 0:
            index = 0
        if index == current:
            return True

        del self.layers[current]
        del self._source_layers[current]
        self.layers.insert(index, layer)
        self._source_layers.insert(index, layer.get_source())

        self._update_layer_lookup()
        self._update_layer_indexes()
        self._logger.debug(f"Moved layer {layer.name!r} from {current} to {index}")

        self.notify_source_change()
        return True

    # ========================================
    # Builders
    # ========================================

    def _centered(self, transform: Optional[TransformOptions], options_type=TransformOptions):
        """Copy of transform with missing x/y set to the composition center"""
        transform = dataclasses.replace(transform) if transform is not None else options_type()
        if transform.x is None:
            transform.x = self.width / 2
        if transform.y is None:
            transform.y = self.height / 2
        return transform

    def add_text_layer(self, name: str, text: Union[TextDataOptions, str],
                       transform: Optional[TransformOptions] = None, index: int = 0) -> TextLayer:
        """Create and insert a text layer

        Args:
            name: Layer name
            text: Plain text (styled with the configured defaults) or full options
            transform: Transform options; x/y default to the composition center
            index: Insert position

        Returns:
            The new TextLayer
        """
        if isinstance(text, str):
            text = TextDataOptions(
                font_size=self.config.default_font_size,
                font_family=self.config.default_font_family,
                font_color=self.config.default_font_color,
                text=text,
            )
        transform = self._centered(transform)

        layer_source = {
            TEXT_LAYER_PROP_MAP['text_data'].key: create_text_data_from(text),
            _key('is_3d'): 0,
            _key('index'): 0,
            _key('type'): int(LayerType.TEXT),
            _key('name'): name,
            _key('time_stretch'): 1,
            _key('auto_orient'): 0,
            _key('in_point'): self.in_point,
            _key('out_point'): self.out_point,
            _key('start_time'): 0,
            _key('blend_mode'): int(BlendMode.NORMAL),
            _key('transform'): create_transform(transform),
        }
        layer_source = {key: value for key, value in layer_source.items() if value is not None}

        return self.add_layer(layer_source, index)

    def add_lottie_layer(self, name: str, animation: Dict[str, Any],
                         transform: Optional[TransformOptionsWithSize] = None,
                         index: int = 0) -> PrecompositionLayer:
        """Import an animation as a precomposition layer

        The animation's layers become a composition asset referenced by the
        new layer. Its assets are merged into this composition; duplicates of
        existing assets are reused and colliding ids are renamed.

        Args:
            name: Layer name (suffixed if already taken)
            animation: Animation document; it is cloned, never mutated
            transform: Transform and size options; x/y default to the
                composition center, width/height to the animation's w/h
            index: Insert position

        Returns:
            The new PrecompositionLayer

        Raises:
            InvalidAnimationError: If animation has no 'layers' list
            MaxDepthExceededError: If the animation nests deeper than config.max_depth;
                assets merged before the failure stay in this composition
        """
        if not isinstance(animation, dict) or not isinstance(animation.get(KEY_LAYERS), list):
            logger_raise(InvalidAnimationError("animation.layers expected"),
                         "Cannot import animation", self._logger)

        animation = clone_obj(animation, self.config.max_depth)

        transform = self._centered(transform, TransformOptionsWithSize)
        if getattr(transform, 'width', None) is None:
            transform.width = animation.get('w') or self.config.default_lottie_size
        if getattr(transform, 'height', None) is None:
            transform.height = animation.get('h') or self.config.default_lottie_size

        self._add_assets(animation, False)

        name = self._get_unique_layer_name(name)

        comp = {
            'id': self._get_unique_asset_id(),
            KEY_LAYERS: animation[KEY_LAYERS],
        }
        matching_comp = self._get_matching_asset(comp, animation.get('assets'))
        if matching_comp is not None:
            comp = matching_comp

        layer_source = {
            _key('name'): name,
            _key('is_3d'): 0,
            _key('type'): int(LayerType.PRECOMPOSITION),
            _key('index'): 0,
            _key('ref_id'): comp['id'],
            _key('auto_orient'): 0,
            _key('width'): transform.width,
            _key('height'): transform.height,
            _key('in_point'): self.in_point,
            _key('out_point'): self.out_point,
            _key('start_time'): 0,
            _key('blend_mode'): int(BlendMode.NORMAL),
            _key('transform'): create_transform(transform),
        }
        layer_source = {key: value for key, value in layer_source.items() if value is not None}

        if matching_comp is None:
            self.add_asset(comp, False)
        else:
            self._logger.debug(f"Reusing composition asset {comp['id']!r} for {name!r}")

        layer = self.add_layer(layer_source, index, False)
        self.notify_source_change()
        return layer

    # ========================================
    # Derived Views
    # ========================================

    def _index_of(self, layer: Layer) -> int:
        for i, existing in enumerate(self.layers):
            if existing is layer:
                return i
        return -1

    def _update_layer_lookup(self) -> None:
        """Rebuild name -> Layer (first layer wins on duplicate names)"""
        lookup = {}
        for layer in self.layers:
            name = layer.name
            if name and name not in lookup:
                lookup[name] = layer
        self._layer_lookup = lookup

    def _update_layer_indexes(self) -> None:
        """Write each layer's position into its 'ind'"""
        index_key = _key('index')
        for i, layer_source in enumerate(self._source_layers):
            layer_source[index_key] = i

    def _get_unique_layer_name(self, name: str) -> str:
        if name not in self._layer_lookup:
            return name
        return f"{name}_{self._id_generator()}"
