"""Asset, Marker and Meta wrappers"""

from .node import Node, SourceObject, create_prop_map, create_rev_prop_map, mapped_property

ASSET_PROP_MAP = create_prop_map(
    id='id',
    name='nm',
    width='w',
    height='h',
    directory='u',
    file_name='p',
    embedded='e',
    frame_rate='fr',
    layers='layers',
)
ASSET_REV_PROP_MAP = create_rev_prop_map(ASSET_PROP_MAP)


class Asset(Node):
    """Entry of the document's 'assets' array

    Image assets carry a file reference (u/p or embedded data); composition
    assets carry a raw 'layers' list. Nested layers are not wrapped.
    """

    id = mapped_property(ASSET_PROP_MAP['id'], "Asset id, referenced by layer refId")
    name = mapped_property(ASSET_PROP_MAP['name'])
    width = mapped_property(ASSET_PROP_MAP['width'])
    height = mapped_property(ASSET_PROP_MAP['height'])
    directory = mapped_property(ASSET_PROP_MAP['directory'], "Image directory ('u')")
    file_name = mapped_property(ASSET_PROP_MAP['file_name'], "Image file name or data URI ('p')")
    embedded = mapped_property(ASSET_PROP_MAP['embedded'], "1 if 'p' holds embedded data")
    frame_rate = mapped_property(ASSET_PROP_MAP['frame_rate'])
    layers = mapped_property(ASSET_PROP_MAP['layers'], "Raw nested layer fragments (read-only by convention)")

    def __init__(self, source: SourceObject):
        super().__init__(source, ASSET_PROP_MAP, ASSET_REV_PROP_MAP)

    @property
    def is_precomposition(self) -> bool:
        """True for composition assets (assets that hold layers)"""
        return isinstance(self.layers, list)

    def __repr__(self) -> str:
        return f"Asset(id={self.id!r})"


MARKER_PROP_MAP = create_prop_map(comment='cm', time='tm', duration='dr')
MARKER_REV_PROP_MAP = create_rev_prop_map(MARKER_PROP_MAP)


class Marker(Node):
    """Entry of the document's 'markers' array"""

    comment = mapped_property(MARKER_PROP_MAP['comment'])
    time = mapped_property(MARKER_PROP_MAP['time'], "Marker frame")
    duration = mapped_property(MARKER_PROP_MAP['duration'], "Duration in frames")

    def __init__(self, source: SourceObject):
        super().__init__(source, MARKER_PROP_MAP, MARKER_REV_PROP_MAP)


META_PROP_MAP = create_prop_map(generator='g', author='a', keywords='k', description='d', theme_color='tc')
META_REV_PROP_MAP = create_rev_prop_map(META_PROP_MAP)


class Meta(Node):
    """The document's 'meta' object"""

    generator = mapped_property(META_PROP_MAP['generator'])
    author = mapped_property(META_PROP_MAP['author'])
    keywords = mapped_property(META_PROP_MAP['keywords'])
    description = mapped_property(META_PROP_MAP['description'])
    theme_color = mapped_property(META_PROP_MAP['theme_color'])

    def __init__(self, source: SourceObject):
        super().__init__(source, META_PROP_MAP, META_REV_PROP_MAP)
