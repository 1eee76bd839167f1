"""
Lottie Builder - Layer Data Model

Provides object-oriented access to layer fragments of an animation
document with:
- Readable property names over schema keys (nm, ks, refId, ...)
- One wrapper class per layer type, chosen from the 'ty' discriminator
- Transform accessors that create missing transform channels on demand
- Forwarding of render-facing edits to the composition's accelerator

This is part of the MODEL layer - the fragment is the single source of
truth; a Layer holds no state of its own besides its composition link.

Usage:
    layer = create_layer(composition, fragment)
    layer.set_position_xy(100, 50)
    x, y = layer.get_position()
"""

import logging
import weakref
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

from lottie_builder.constants import (
    DEFAULT_SCALE, DEFAULT_POSITION, DEFAULT_ROTATION, DEFAULT_OPACITY,
)
from lottie_builder.models.color import convert_to_lottie_color_rgba
from lottie_builder.models.enums import LayerType, ObjectType
from lottie_builder.models.text import create_text_data_from
from lottie_builder.models.transform import Point, Point3D, Size, Size3D

from .node import (
    Node, PropertyMap, SourceObject,
    create_prop_map, create_rev_prop_map, extend_prop_map, mapped_property,
)

if TYPE_CHECKING:
    from lottie_builder.models.composition.core import Composition
    from lottie_builder.services.accelerator import FallbackAccelerator

LAYER_PROP_MAP = create_prop_map(
    type='ty',
    auto_orient='ao',
    blend_mode='bm',
    class_names='cl',
    effects='ef',
    height='h',
    id='ln',
    index='ind',
    ref_id='refId',
    in_point='ip',
    is_3d='ddd',
    name='nm',
    out_point='op',
    start_time='st',
    time_stretch='sr',
    width='w',
    matte_mode='tt',
    matte_target='td',
    is_hidden='hd',
    match_name='mn',
    transform='ks',
)
LAYER_REV_PROP_MAP = create_rev_prop_map(LAYER_PROP_MAP)

# Shape item types that carry a 'c' color channel
_COLORED_SHAPE_TYPES = ('fl', 'st')


def _static_value(channel: Any, default: Any) -> Any:
    """Value of a transform channel, using the first keyframe if animated"""
    if not isinstance(channel, dict) or 'k' not in channel:
        return default
    value = channel['k']
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0].get('s', default)
    return value


def _vector(value: Any, size: int, fill: float) -> List[float]:
    """Pad/truncate a channel value to a fixed-length vector"""
    if not isinstance(value, list):
        value = [value] if isinstance(value, (int, float)) else []
    return (list(value) + [fill] * size)[:size]


class Layer(Node):
    """Wrapper for one entry of a 'layers' array

    Properties map to the base layer schema keys; variants add their own.
    The positional 'index' (ind) is maintained by the owning Composition.
    """

    type = mapped_property(LAYER_PROP_MAP['type'], "LayerType discriminator ('ty')")
    auto_orient = mapped_property(LAYER_PROP_MAP['auto_orient'])
    blend_mode = mapped_property(LAYER_PROP_MAP['blend_mode'], "BlendMode ('bm')")
    class_names = mapped_property(LAYER_PROP_MAP['class_names'])
    effects = mapped_property(LAYER_PROP_MAP['effects'])
    height = mapped_property(LAYER_PROP_MAP['height'])
    id = mapped_property(LAYER_PROP_MAP['id'], "Layer id attribute ('ln')")
    index = mapped_property(LAYER_PROP_MAP['index'], "Position in the owning layers array ('ind')")
    ref_id = mapped_property(LAYER_PROP_MAP['ref_id'], "Id of the referenced asset")
    in_point = mapped_property(LAYER_PROP_MAP['in_point'])
    is_3d = mapped_property(LAYER_PROP_MAP['is_3d'])
    name = mapped_property(LAYER_PROP_MAP['name'])
    out_point = mapped_property(LAYER_PROP_MAP['out_point'])
    start_time = mapped_property(LAYER_PROP_MAP['start_time'])
    time_stretch = mapped_property(LAYER_PROP_MAP['time_stretch'])
    width = mapped_property(LAYER_PROP_MAP['width'])
    matte_mode = mapped_property(LAYER_PROP_MAP['matte_mode'], "MatteMode ('tt')")
    matte_target = mapped_property(LAYER_PROP_MAP['matte_target'])
    is_hidden = mapped_property(LAYER_PROP_MAP['is_hidden'], "Hidden flag ('hd'), truthy when hidden")
    match_name = mapped_property(LAYER_PROP_MAP['match_name'])
    transform = mapped_property(LAYER_PROP_MAP['transform'], "Raw transform object ('ks')")

    def __init__(self, composition: Optional['Composition'], source: SourceObject,
                 prop_map: PropertyMap = LAYER_PROP_MAP, rev_prop_map: PropertyMap = LAYER_REV_PROP_MAP):
        """Wrap a layer fragment

        Args:
            composition: Owning composition (held weakly), or None
            source: Layer fragment
            prop_map: Property map of the concrete layer class
            rev_prop_map: Reverse of prop_map
        """
        super().__init__(source, prop_map, rev_prop_map)
        self._composition_ref = weakref.ref(composition) if composition is not None else None
        self._logger = logging.getLogger('Layer')

    @property
    def composition(self) -> Optional['Composition']:
        """Owning composition, or None if detached/collected"""
        return self._composition_ref() if self._composition_ref is not None else None

    # ========================================
    # Composition Plumbing
    # ========================================

    def _accelerator(self) -> Optional['FallbackAccelerator']:
        comp = self.composition
        return comp.acc if comp is not None else None

    def _layer_index(self) -> int:
        """Index in the owning composition, -1 if not a member"""
        comp = self.composition
        if comp is None:
            return -1
        for i, layer in enumerate(comp.layers):
            if layer is self:
                return i
        return -1

    def _key_path(self, prop: str) -> str:
        return f"{self.name or ''}.Transform.{prop}"

    def _notify_changed(self) -> None:
        comp = self.composition
        if comp is not None:
            comp._trigger_object_change(ObjectType.LAYER, self)

    # ========================================
    # Transform Access
    # ========================================

    def _get_transform(self) -> Dict[str, Any]:
        """Transform object with scale/position/rotation/opacity channels present

        Missing channels are created with identity values and written to the
        fragment.
        """
        trans = self.transform
        if not isinstance(trans, dict):
            trans = {}
            self.transform = trans

        defaults = (
            ('s', DEFAULT_SCALE),
            ('p', DEFAULT_POSITION),
            ('r', DEFAULT_ROTATION),
            ('o', DEFAULT_OPACITY),
        )
        for key, default in defaults:
            channel = trans.get(key)
            if not isinstance(channel, dict):
                channel = {'a': 0}
                trans[key] = channel
            if channel.get('k') is None:
                channel['k'] = list(default) if isinstance(default, list) else default

        return trans

    def _set_static(self, key: str, value: Any) -> None:
        channel = self._get_transform()[key]
        channel['a'] = 0
        channel['k'] = value

    def set_scale(self, scale: float) -> None:
        """Uniform X/Y scale in percent (100 == original size)"""
        self.set_scale_xyz(scale, scale, 100)

    def set_scale_xy(self, scale_x: float, scale_y: float) -> None:
        self.set_scale_xyz(scale_x, scale_y, 100)

    def set_scale_xyz(self, scale_x: float, scale_y: float, scale_z: float) -> None:
        self._set_static('s', [scale_x, scale_y, scale_z])
        acc = self._accelerator()
        if acc is not None:
            acc.set_size(self._key_path('Scale'), scale_x, scale_y)
        self._notify_changed()

    def get_scale(self) -> Size:
        value = _vector(_static_value(self._get_transform()['s'], DEFAULT_SCALE), 2, 100)
        return Size(value[0], value[1])

    def get_scale_3d(self) -> Size3D:
        value = _vector(_static_value(self._get_transform()['s'], DEFAULT_SCALE), 3, 100)
        return Size3D(value[0], value[1], value[2])

    def set_position(self, pt: Point) -> None:
        self.set_position_xyz(pt.x, pt.y, 0)

    def set_position_xy(self, x: float, y: float) -> None:
        self.set_position_xyz(x, y, 0)

    def set_position_xyz(self, x: float, y: float, z: float) -> None:
        self._set_static('p', [x, y, z])
        acc = self._accelerator()
        if acc is not None:
            acc.set_point(self._key_path('Position'), x, y)
        self._notify_changed()

    def get_position(self) -> Point:
        value = _vector(_static_value(self._get_transform()['p'], DEFAULT_POSITION), 2, 0)
        return Point(value[0], value[1])

    def get_position_3d(self) -> Point3D:
        value = _vector(_static_value(self._get_transform()['p'], DEFAULT_POSITION), 3, 0)
        return Point3D(value[0], value[1], value[2])

    def peek_position(self) -> Optional[Point]:
        """Static position without creating a transform; None if unavailable"""
        trans = self.transform
        if not isinstance(trans, dict):
            return None
        value = _static_value(trans.get('p'), None)
        if not isinstance(value, list) or len(value) < 2:
            return None
        return Point(value[0], value[1])

    def set_rotation(self, degrees: float) -> None:
        self._set_static('r', degrees)
        acc = self._accelerator()
        if acc is not None:
            acc.set_float(self._key_path('Rotation'), degrees)
        self._notify_changed()

    def get_rotation(self) -> float:
        return _static_value(self._get_transform()['r'], DEFAULT_ROTATION)

    def set_opacity(self, opacity: float) -> None:
        """Opacity as a unit value (1.0 == fully opaque); stored x100"""
        value = opacity * 100
        self._set_static('o', value)
        acc = self._accelerator()
        if acc is not None:
            acc.set_float(self._key_path('Opacity'), value)
        self._notify_changed()

    def get_opacity(self) -> float:
        """Opacity as a unit value"""
        return _static_value(self._get_transform()['o'], DEFAULT_OPACITY) / 100

    # ========================================
    # Render State
    # ========================================

    def set_highlighted(self, enabled: bool) -> None:
        """Ask the renderer to outline this layer (no-op without support)"""
        acc = self._accelerator()
        if acc is None:
            return
        config = self.composition.config
        acc.set_layer_highlight(self._layer_index(), enabled, config.highlight_color, config.highlight_weight)

    def set_hidden(self, hidden: bool) -> None:
        """Set or clear the hidden flag ('hd' is removed when visible)"""
        self.is_hidden = True if hidden else None
        acc = self._accelerator()
        if acc is not None:
            acc.set_layer_hidden(self._layer_index(), bool(hidden))
        self._notify_changed()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, index={self.index!r})"


class GroupLayer(Layer):
    """Null/group layer (ty=3)"""

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, GROUP_LAYER_PROP_MAP, GROUP_LAYER_REV_PROP_MAP)


GROUP_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP)
GROUP_LAYER_REV_PROP_MAP = create_rev_prop_map(GROUP_LAYER_PROP_MAP)


class ImageLayer(Layer):
    """Image layer (ty=2); ref_id names an image asset"""

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, IMAGE_LAYER_PROP_MAP, IMAGE_LAYER_REV_PROP_MAP)


IMAGE_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP)
IMAGE_LAYER_REV_PROP_MAP = create_rev_prop_map(IMAGE_LAYER_PROP_MAP)

PRECOMPOSITION_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP, time_remap='tm')
PRECOMPOSITION_LAYER_REV_PROP_MAP = create_rev_prop_map(PRECOMPOSITION_LAYER_PROP_MAP)


class PrecompositionLayer(Layer):
    """Precomposition layer (ty=0); ref_id names a composition asset"""

    time_remap = mapped_property(PRECOMPOSITION_LAYER_PROP_MAP['time_remap'], "Time remapping ('tm')")

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, PRECOMPOSITION_LAYER_PROP_MAP,
                         PRECOMPOSITION_LAYER_REV_PROP_MAP)


SHAPE_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP, shapes='shapes')
SHAPE_LAYER_REV_PROP_MAP = create_rev_prop_map(SHAPE_LAYER_PROP_MAP)


class ShapeLayer(Layer):
    """Shape layer (ty=4)"""

    shapes = mapped_property(SHAPE_LAYER_PROP_MAP['shapes'], "Raw shape items")

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, SHAPE_LAYER_PROP_MAP, SHAPE_LAYER_REV_PROP_MAP)

    def set_shape_color(self, shape_name: str, color_hex: str) -> int:
        """Recolor every fill and stroke inside the shape item named shape_name

        Args:
            shape_name: 'nm' of a shape group or fill/stroke item
            color_hex: Hex color (#RGB, #RRGGBB or #RRGGBBAA)

        Returns:
            Number of color channels rewritten (0 if the shape was not found)

        Raises:
            ValueError: If color_hex is not a valid hex color
        """
        rgba = convert_to_lottie_color_rgba(color_hex)

        count = 0
        for item in _find_shapes(self.shapes or [], shape_name):
            for colored in _colored_items(item):
                channel = colored.get('c')
                ix = channel.get('ix') if isinstance(channel, dict) else None
                colored['c'] = {'a': 0, 'k': list(rgba)}
                if ix is not None:
                    colored['c']['ix'] = ix
                count += 1

        if count == 0:
            self._logger.debug(f"No colorable shape '{shape_name}' in layer {self.name!r}")
            return 0

        acc = self._accelerator()
        if acc is not None:
            acc.set_color(f"{self.name or ''}.**.{shape_name}.Color", color_hex)
        self._notify_changed()
        return count


def _find_shapes(items: List[Any], shape_name: str) -> List[Dict[str, Any]]:
    """Depth-first search of shape items (and group children) named shape_name"""
    found = []
    for item in items:
        if not isinstance(item, dict):
            continue
        if item.get('nm') == shape_name:
            found.append(item)
        elif isinstance(item.get('it'), list):
            found.extend(_find_shapes(item['it'], shape_name))
    return found


def _colored_items(item: Dict[str, Any]) -> List[Dict[str, Any]]:
    """The item itself if it is a fill/stroke, else all fills/strokes below it"""
    if item.get('ty') in _COLORED_SHAPE_TYPES:
        return [item]
    result = []
    for child in item.get('it') or []:
        if isinstance(child, dict):
            result.extend(_colored_items(child))
    return result


SOLID_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP, solid_color='sc', solid_height='sh', solid_width='sw')
SOLID_LAYER_REV_PROP_MAP = create_rev_prop_map(SOLID_LAYER_PROP_MAP)


class SolidLayer(Layer):
    """Solid color layer (ty=1)"""

    solid_color = mapped_property(SOLID_LAYER_PROP_MAP['solid_color'], "Hex color ('sc')")
    solid_height = mapped_property(SOLID_LAYER_PROP_MAP['solid_height'])
    solid_width = mapped_property(SOLID_LAYER_PROP_MAP['solid_width'])

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, SOLID_LAYER_PROP_MAP, SOLID_LAYER_REV_PROP_MAP)


TEXT_LAYER_PROP_MAP = extend_prop_map(LAYER_PROP_MAP, text_data='t')
TEXT_LAYER_REV_PROP_MAP = create_rev_prop_map(TEXT_LAYER_PROP_MAP)


class TextLayer(Layer):
    """Text layer (ty=5)"""

    text_data = mapped_property(TEXT_LAYER_PROP_MAP['text_data'], "Raw text document ('t')")

    def __init__(self, composition: Optional['Composition'], source: SourceObject):
        super().__init__(composition, source, TEXT_LAYER_PROP_MAP, TEXT_LAYER_REV_PROP_MAP)

    def _first_text_document(self) -> Optional[Dict[str, Any]]:
        """'s' object of the first text keyframe, if present"""
        data = self.text_data
        if not isinstance(data, dict):
            return None
        keyframes = (data.get('d') or {}).get('k')
        if not isinstance(keyframes, list) or not keyframes:
            return None
        document = keyframes[0].get('s') if isinstance(keyframes[0], dict) else None
        return document if isinstance(document, dict) else None

    @property
    def text(self) -> Optional[str]:
        """Text of the first keyframe"""
        document = self._first_text_document()
        return document.get('t') if document is not None else None

    def set_text(self, text: str) -> None:
        """Replace the text of the first keyframe (creates text data if missing)"""
        document = self._first_text_document()
        if document is None:
            self.text_data = create_text_data_from(text)
        else:
            document['t'] = text

        acc = self._accelerator()
        if acc is not None:
            acc.set_layer_text(self._layer_index(), text)
        self._notify_changed()


_LAYER_REGISTRY: Dict[int, Type[Layer]] = {
    LayerType.PRECOMPOSITION: PrecompositionLayer,
    LayerType.SOLID: SolidLayer,
    LayerType.IMAGE: ImageLayer,
    LayerType.GROUP: GroupLayer,
    LayerType.SHAPE: ShapeLayer,
    LayerType.TEXT: TextLayer,
}


def get_layer_class(layer_type: Any) -> Type[Layer]:
    """Wrapper class for a 'ty' value; unknown types use the base Layer"""
    if isinstance(layer_type, bool) or not isinstance(layer_type, int):
        return Layer
    return _LAYER_REGISTRY.get(layer_type, Layer)


def create_layer(composition: Optional['Composition'], source: SourceObject) -> Layer:
    """Wrap a layer fragment with the class matching its 'ty' discriminator"""
    return get_layer_class(source.get(LAYER_PROP_MAP['type'].key))(composition, source)
