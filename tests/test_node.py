"""
Tests for Node and property maps.

Verifies:
- get/set through mapped properties, None deletes the key
- _map_prop accepts absent / single object / list
- Unmapped keys survive untouched (additional_props, to_dict)
- Composition round-trip without mutation
"""
import copy

import pytest

from lottie_builder import Asset, Composition, InvalidAnimationError, Marker, Meta
from lottie_builder.models.composition import Node, PropertyInfo, create_prop_map, create_rev_prop_map


# ══════════════════════════════════════════════════════════════════════════
# Property Maps
# ══════════════════════════════════════════════════════════════════════════

class TestPropertyMaps:

    def test_create_prop_map(self):
        prop_map = create_prop_map('children', name='nm', children='ch')
        assert prop_map['name'] == PropertyInfo('name', 'nm', False)
        assert prop_map['children'] == PropertyInfo('children', 'ch', True)

    def test_wrapped_name_must_exist(self):
        with pytest.raises(ValueError):
            create_prop_map('missing', name='nm')

    def test_rev_prop_map(self):
        rev = create_rev_prop_map(create_prop_map(name='nm', width='w'))
        assert set(rev) == {'nm', 'w'}
        assert rev['nm'].name == 'name'


# ══════════════════════════════════════════════════════════════════════════
# Node Values
# ══════════════════════════════════════════════════════════════════════════

class TestNodeValues:
    """get_value / set_value write through to the fragment."""

    def test_get_value(self):
        asset = Asset({'id': 'a', 'w': 10})
        assert asset.id == 'a'
        assert asset.width == 10
        assert asset.height is None

    def test_set_value_writes_in_place(self):
        source = {'id': 'a'}
        asset = Asset(source)
        asset.name = 'Named'
        assert source['nm'] == 'Named'
        assert asset.get_source() is source

    def test_set_none_deletes_key(self):
        source = {'id': 'a', 'nm': 'x'}
        asset = Asset(source)
        asset.name = None
        assert 'nm' not in source

    def test_set_none_on_absent_key(self):
        source = {'id': 'a'}
        Asset(source).name = None
        assert source == {'id': 'a'}

    def test_falsy_values_are_written(self):
        source = {}
        marker = Marker(source)
        marker.time = 0
        marker.comment = ''
        assert source == {'tm': 0, 'cm': ''}

    def test_non_dict_source_rejected(self):
        with pytest.raises(TypeError):
            Asset(['not', 'a', 'dict'])


# ══════════════════════════════════════════════════════════════════════════
# Wrapped Children
# ══════════════════════════════════════════════════════════════════════════

class TestMapProp:
    """_map_prop trichotomy: absent, single object, list."""

    prop_map = create_prop_map('items', items='it')

    def _node(self, source):
        return Node(source, self.prop_map, create_rev_prop_map(self.prop_map))

    def test_absent(self):
        assert self._node({})._map_prop(self.prop_map['items'], lambda s: s) is None

    def test_single_object(self):
        child = {'a': 1}
        result = self._node({'it': child})._map_prop(self.prop_map['items'], lambda s: s)
        assert result == [child]
        assert result[0] is child

    def test_list(self):
        children = [{'a': 1}, {'a': 2}]
        result = self._node({'it': children})._map_prop(self.prop_map['items'], lambda s: s['a'])
        assert result == [1, 2]

    def test_empty_list(self):
        assert self._node({'it': []})._map_prop(self.prop_map['items'], lambda s: s) is None

    def test_composition_meta_is_single_object(self, comp):
        assert isinstance(comp.meta, Meta)
        assert comp.meta.generator == 'LottieFiles'
        assert comp.meta.author == 'tests'

    def test_markers(self, comp):
        assert len(comp.markers) == 1
        assert comp.markers[0].comment == 'intro'
        assert comp.markers[0].duration == 30

    def test_missing_markers_and_meta(self, empty_comp):
        assert empty_comp.markers is None
        assert empty_comp.meta is None


# ══════════════════════════════════════════════════════════════════════════
# Serialization
# ══════════════════════════════════════════════════════════════════════════

class TestSerialization:

    def test_additional_props(self, comp):
        assert comp.layers[0].additional_props == {'x_extra': 'unmapped'}
        assert comp.additional_props == {'x_custom': {'keep': [1, 2, 3]}}

    def test_additional_props_none(self):
        assert Asset({'id': 'a', 'w': 1}).additional_props is None

    def test_to_dict_uses_readable_names(self):
        asset = Asset({'id': 'a', 'nm': 'Name', 'w': 4, 'custom': True})
        assert asset.to_dict() == {'id': 'a', 'name': 'Name', 'width': 4, 'custom': True}

    def test_to_dict_recurses_into_wrapped_children(self, comp):
        result = comp.to_dict()
        assert result['name'] == 'Sample'
        assert result['x_custom'] == {'keep': [1, 2, 3]}
        assert result['layers'][0]['name'] == 'MyStar'
        assert result['layers'][0]['x_extra'] == 'unmapped'
        assert result['meta'] == {'generator': 'LottieFiles', 'author': 'tests'}
        assert result['markers'] == [{'comment': 'intro', 'time': 0, 'duration': 30}]

    def test_to_dict_reflects_edits(self, comp):
        comp.layers[1].name = 'Renamed'
        assert comp.to_dict()['layers'][1]['name'] == 'Renamed'


# ══════════════════════════════════════════════════════════════════════════
# Round-trip
# ══════════════════════════════════════════════════════════════════════════

class TestRoundTrip:

    def test_unmodified_document_round_trips(self, document):
        original = copy.deepcopy(document)
        comp = Composition(document)
        assert comp.get_animation_object() == original

    def test_source_is_cloned_by_default(self, document):
        comp = Composition(document)
        comp.layers[0].name = 'Changed'
        assert document['layers'][0]['nm'] == 'MyStar'

    def test_source_shared_without_clone(self, document):
        comp = Composition(document, clone_source=False)
        comp.layers[0].name = 'Changed'
        assert document['layers'][0]['nm'] == 'Changed'
        assert comp.get_animation_object() is document

    def test_single_object_arrays_are_kept(self):
        solo = {'ty': 3, 'nm': 'Solo'}
        image = {'id': 'image_0', 'p': 'solo.png'}
        comp = Composition({'layers': solo, 'assets': image})

        assert comp.get_animation_object()['layers'] == [solo]
        assert comp.get_animation_object()['assets'] == [image]
        assert comp.get_asset('image_0').file_name == 'solo.png'
        assert len(comp.layers) == 1

    def test_invalid_arrays_rejected(self):
        with pytest.raises(InvalidAnimationError):
            Composition({'layers': 'not layers'})

    def test_missing_arrays_are_created(self):
        comp = Composition({'v': '5.7.4'})
        assert comp.get_animation_object() == {'v': '5.7.4', 'layers': [], 'assets': []}
        assert comp.layers == []
        assert comp.assets == []

    def test_size_defaults_to_zero(self):
        comp = Composition({})
        assert comp.width == 0
        assert comp.height == 0
