"""
Composition Query Mixin

Read-only lookups over the Composition model. Nothing here mutates the
document (get_layer_at_pt in particular never creates missing transforms).

Methods:
    - get_layer
    - get_layer_at_pt
    - hit_test_layer_at_pt_async
    - get_size_async
"""

import math
from typing import Optional

from lottie_builder.models.transform import Size

from ._internal.layer import Layer


class CompositionQueryMixin:
    """Mixin providing query operations for Composition

    This mixin assumes the parent class has:
        - self.layers: list of Layer wrappers
        - self._layer_lookup: dict of name -> Layer
        - self.acc: FallbackAccelerator
        - self.config: BuilderConfig
    """

    def get_layer(self, name: str) -> Optional[Layer]:
        """First layer with the given name, or None"""
        return self._layer_lookup.get(name)

    def get_layer_at_pt(self, x: float, y: float, radius: Optional[float] = None) -> Optional[Layer]:
        """First visible layer whose position lies within radius of (x, y)

        A cheap approximation of hit testing: only the layer's static
        position is considered, not its rendered content. Hidden layers,
        fully transparent layers and layers without a static position are
        skipped.

        Args:
            x: X in composition coordinates
            y: Y in composition coordinates
            radius: Search radius (defaults to the configured hit test radius)
        """
        if radius is None:
            radius = self.config.hit_test_radius

        for layer in self.layers:
            if layer.is_hidden or _is_transparent(layer):
                continue
            center = layer.peek_position()
            if center is None:
                continue
            if math.hypot(x - center.x, y - center.y) <= radius:
                return layer
        return None

    def _get_layer_index_at_pt(self, x: float, y: float, radius: Optional[float] = None) -> int:
        layer = self.get_layer_at_pt(x, y, radius)
        return self._index_of(layer) if layer is not None else -1

    async def hit_test_layer_at_pt_async(self, x: float, y: float,
                                         radius: Optional[float] = None) -> Optional[Layer]:
        """Topmost rendered layer at (x, y), or None

        Uses the accelerator's pixel hit test when available. The layers
        may have changed while waiting; an index outside the current layer
        list resolves to None.
        """
        if radius is None:
            radius = self.config.hit_test_radius

        index = await self.acc.hit_test_layer_at_pt_async(x, y, radius)
        if index is None or index < 0 or index >= len(self.layers):
            return None
        return self.layers[index]

    async def get_size_async(self) -> Size:
        """Rendered composition size (document w/h without accelerator support)"""
        width, height = await self.acc.get_composition_size_async()
        return Size(width, height)


def _is_transparent(layer: Layer) -> bool:
    transform = layer.transform
    if not isinstance(transform, dict):
        return False
    opacity = transform.get('o')
    return isinstance(opacity, dict) and opacity.get('k') == 0
