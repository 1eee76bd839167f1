"""
Lottie Builder - Node and Property Maps

Every model object wraps one JSON fragment (a dict) of the animation
document and reads/writes it in place. A property map translates readable
property names to the compact schema keys stored in the fragment:

    LAYER_PROP_MAP = create_prop_map(name='nm', transform='ks', ...)
    layer.name           # reads fragment['nm']
    layer.name = None    # deletes fragment['nm']

Keys the map does not know about are never touched and survive
serialization unchanged.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

T = TypeVar('T')

SourceObject = Dict[str, Any]


@dataclass(frozen=True)
class PropertyInfo:
    """One entry of a property map

    Attributes:
        name: Readable property name (python attribute name)
        key: Schema key in the JSON fragment
        wrapped: True if the value is exposed as typed child objects
            (layers, assets, ...) rather than the raw value
    """
    name: str
    key: str
    wrapped: bool = False


PropertyMap = Mapping[str, PropertyInfo]


def create_prop_map(*wrapped: str, **keys: str) -> Dict[str, PropertyInfo]:
    """Build a property map from name=schema_key pairs

    Args:
        *wrapped: Names (from keys) whose values are wrapped child objects
        **keys: readable_name='schema_key'

    Returns:
        Dict of readable name -> PropertyInfo
    """
    unknown = set(wrapped) - set(keys)
    if unknown:
        raise ValueError(f"Wrapped names not in map: {sorted(unknown)}")
    return {name: PropertyInfo(name, key, name in wrapped) for name, key in keys.items()}


def extend_prop_map(base: PropertyMap, *wrapped: str, **keys: str) -> Dict[str, PropertyInfo]:
    """Copy of base with extra entries (used by layer variants)"""
    result = dict(base)
    result.update(create_prop_map(*wrapped, **keys))
    return result


def create_rev_prop_map(prop_map: PropertyMap) -> Dict[str, PropertyInfo]:
    """Reverse a property map: schema key -> PropertyInfo"""
    return {info.key: info for info in prop_map.values()}


def mapped_property(prop: PropertyInfo, doc: Optional[str] = None) -> property:
    """Property reading/writing prop.key on the node's fragment"""

    def getter(self):
        return self.get_value(prop)

    def setter(self, value):
        self.set_value(prop, value)

    return property(getter, setter, doc=doc or f"Schema key '{prop.key}'")


class Node:
    """Base class for all document wrappers

    Owns (by reference, never by copy) one fragment of the document.
    """

    def __init__(self, source: SourceObject, prop_map: PropertyMap, rev_prop_map: PropertyMap):
        """Wrap a fragment

        Args:
            source: JSON fragment to wrap (mutated in place)
            prop_map: readable name -> PropertyInfo
            rev_prop_map: schema key -> PropertyInfo
        """
        if not isinstance(source, dict):
            raise TypeError(f"Expected dict source, got {type(source).__name__}")
        self._prop_map = prop_map
        self._rev_prop_map = rev_prop_map
        self._source = source

    @property
    def prop_map(self) -> PropertyMap:
        return self._prop_map

    @property
    def additional_props(self) -> Optional[SourceObject]:
        """Fragment entries whose keys are not in the property map (None if none)"""
        extra = {key: value for key, value in self._source.items() if key not in self._rev_prop_map}
        return extra or None

    def get_source(self) -> SourceObject:
        """The wrapped fragment itself (not a copy)"""
        return self._source

    def get_value(self, prop: PropertyInfo) -> Any:
        """Raw value at prop.key, or None when absent"""
        return self._source.get(prop.key)

    def set_value(self, prop: PropertyInfo, value: Any) -> None:
        """Write value at prop.key; None removes the key"""
        if value is None:
            self._source.pop(prop.key, None)
        else:
            self._source[prop.key] = value

    def _map_prop(self, prop: PropertyInfo, mapper: Callable[[SourceObject], T]) -> Optional[List[T]]:
        """Wrap a child value that may be absent, a single object, or a list

        Returns:
            None when the value is absent or empty, otherwise one mapped
            item per element (a bare object counts as a one-element list)
        """
        value = self.get_value(prop)
        if not value:
            return None

        if isinstance(value, list):
            source_ary = value
        elif isinstance(value, dict):
            source_ary = [value]
        else:
            source_ary = []

        if not source_ary:
            return None
        return [mapper(item) for item in source_ary]

    def to_dict(self) -> Dict[str, Any]:
        """Readable view of the fragment

        Mapped keys are emitted under their readable names (wrapped children
        as their own to_dict output), unmapped keys verbatim.
        """
        result: Dict[str, Any] = {}
        for key, value in self._source.items():
            prop = self._rev_prop_map.get(key)
            if prop is None:
                result[key] = value
            elif prop.wrapped:
                result[prop.name] = _wrapped_to_dict(getattr(self, prop.name, None), value)
            else:
                result[prop.name] = value
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._source)} keys)"


def _wrapped_to_dict(wrapped: Any, raw: Any) -> Any:
    """Serialize a wrapped child (node, list of nodes) or fall back to raw"""
    if isinstance(wrapped, Node):
        return wrapped.to_dict()
    if isinstance(wrapped, list):
        return [item.to_dict() if isinstance(item, Node) else item for item in wrapped]
    return raw
