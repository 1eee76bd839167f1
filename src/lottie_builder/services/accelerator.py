"""
Lottie Builder - Render Accelerator

An accelerator lets a renderer apply single-property edits (a color, a
position, a text) without re-reading the whole document. Each capability
is optional; an implementation declares what it supports through
`capabilities` and overrides the matching methods.

FallbackAccelerator is what the Composition talks to. It checks
`supports()` before delegating and otherwise degrades:
- property and layer edits -> reload callback (full re-render)
- highlight -> nothing
- hit test -> name/position based lookup on the document
- composition size -> document width/height

Usage:
    class PlayerAccelerator(Accelerator):
        capabilities = Capability.SET_COLOR | Capability.SET_POINT

        def set_color(self, key_path, color_hex):
            player.set_color(key_path, color_hex)

        def set_point(self, key_path, x, y):
            player.set_point(key_path, x, y)

    comp = Composition(document, accelerator=PlayerAccelerator())
"""

import logging
from enum import Flag, auto
from typing import Any, Callable, Optional, Tuple


class Capability(Flag):
    """Operations an accelerator can perform"""
    NONE = 0
    SET_COLOR = auto()
    SET_FLOAT = auto()
    SET_POINT = auto()
    SET_SIZE = auto()
    HIT_TEST = auto()
    LAYER_HIGHLIGHT = auto()
    LAYER_HIDDEN = auto()
    LAYER_TEXT = auto()
    COMPOSITION_SIZE = auto()


class Accelerator:
    """Base class for renderer-side accelerators

    Subclasses set `capabilities` and override the methods they declare.
    Methods not overridden raise NotImplementedError.
    """

    capabilities: Capability = Capability.NONE

    def supports(self, capability: Capability) -> bool:
        """True if every flag in capability is declared"""
        if not capability:
            return False
        return (self.capabilities & capability) == capability

    def set_color(self, key_path: str, color_hex: str) -> Any:
        raise NotImplementedError("set_color")

    def set_float(self, key_path: str, value: float) -> Any:
        raise NotImplementedError("set_float")

    def set_point(self, key_path: str, x: float, y: float) -> Any:
        raise NotImplementedError("set_point")

    def set_size(self, key_path: str, width: float, height: float) -> Any:
        raise NotImplementedError("set_size")

    async def hit_test_layer_at_pt_async(self, x: float, y: float, radius: float) -> int:
        """Index of the rendered layer under (x, y), -1 if none"""
        raise NotImplementedError("hit_test_layer_at_pt_async")

    def set_layer_highlight(self, layer_index: int, enabled: bool, color_hex: str, weight: float) -> Any:
        raise NotImplementedError("set_layer_highlight")

    def set_layer_hidden(self, layer_index: int, hidden: bool) -> Any:
        raise NotImplementedError("set_layer_hidden")

    def set_layer_text(self, layer_index: int, text: str) -> Any:
        raise NotImplementedError("set_layer_text")

    async def get_composition_size_async(self) -> Optional[Tuple[float, float]]:
        """Rendered (width, height) of the composition"""
        raise NotImplementedError("get_composition_size_async")


class FallbackAccelerator:
    """Delegates to an optional Accelerator, degrading where unsupported

    Callers never need to check capabilities themselves.
    """

    def __init__(self, accelerator: Optional[Accelerator],
                 reload: Callable[[], None],
                 layer_at_pt: Callable[[float, float, float], int],
                 composition_size: Callable[[], Tuple[float, float]]):
        """Create delegator

        Args:
            accelerator: Renderer accelerator, or None
            reload: Full-document refresh used when an edit is unsupported
            layer_at_pt: Document-based hit test returning a layer index or -1
            composition_size: Document-based (width, height)
        """
        self._accelerator = accelerator
        self._reload = reload
        self._layer_at_pt = layer_at_pt
        self._composition_size = composition_size
        self._logger = logging.getLogger('FallbackAccelerator')

    @property
    def accelerator(self) -> Optional[Accelerator]:
        """The wrapped accelerator (None when running without one)"""
        return self._accelerator

    def supports(self, capability: Capability) -> bool:
        return self._accelerator is not None and self._accelerator.supports(capability)

    def _fallback_reload(self, operation: str) -> None:
        self._logger.debug(f"{operation} not accelerated, reloading")
        self._reload()

    # ========================================
    # Property Edits
    # ========================================

    def set_color(self, key_path: str, color_hex: str) -> Any:
        if self.supports(Capability.SET_COLOR):
            return self._accelerator.set_color(key_path, color_hex)
        self._fallback_reload('set_color')
        return None

    def set_float(self, key_path: str, value: float) -> Any:
        if self.supports(Capability.SET_FLOAT):
            return self._accelerator.set_float(key_path, value)
        self._fallback_reload('set_float')
        return None

    def set_point(self, key_path: str, x: float, y: float) -> Any:
        if self.supports(Capability.SET_POINT):
            return self._accelerator.set_point(key_path, x, y)
        self._fallback_reload('set_point')
        return None

    def set_size(self, key_path: str, width: float, height: float) -> Any:
        if self.supports(Capability.SET_SIZE):
            return self._accelerator.set_size(key_path, width, height)
        self._fallback_reload('set_size')
        return None

    # ========================================
    # Layer Edits
    # ========================================

    def set_layer_highlight(self, layer_index: int, enabled: bool, color_hex: str, weight: float) -> Any:
        """Outline a layer; silently ignored without renderer support"""
        if self.supports(Capability.LAYER_HIGHLIGHT):
            return self._accelerator.set_layer_highlight(layer_index, enabled, color_hex, weight)
        return None

    def set_layer_hidden(self, layer_index: int, hidden: bool) -> Any:
        if self.supports(Capability.LAYER_HIDDEN):
            return self._accelerator.set_layer_hidden(layer_index, hidden)
        self._fallback_reload('set_layer_hidden')
        return None

    def set_layer_text(self, layer_index: int, text: str) -> Any:
        if self.supports(Capability.LAYER_TEXT):
            return self._accelerator.set_layer_text(layer_index, text)
        self._fallback_reload('set_layer_text')
        return None

    # ========================================
    # Queries
    # ========================================

    async def hit_test_layer_at_pt_async(self, x: float, y: float, radius: float) -> int:
        """Layer index under (x, y) or -1; may be stale by the time it returns"""
        if self.supports(Capability.HIT_TEST):
            return await self._accelerator.hit_test_layer_at_pt_async(x, y, radius)
        return self._layer_at_pt(x, y, radius)

    async def get_composition_size_async(self) -> Tuple[float, float]:
        if self.supports(Capability.COMPOSITION_SIZE):
            size = await self._accelerator.get_composition_size_async()
            if size is not None:
                return size
        return self._composition_size()
