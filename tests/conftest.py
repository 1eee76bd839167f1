"""
Shared fixtures for Lottie Builder tests.

Provides sample animation documents, compositions built from them, a
deterministic id generator and accelerator doubles.
"""
import sys
import os
import pytest

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from lottie_builder import Accelerator, Capability, Composition, SequentialIdGenerator  # noqa: E402


# ── Sample documents ────────────────────────────────────────────────────

def _static(value, ix):
    return {'a': 0, 'k': value, 'ix': ix}


def _transform(x, y, opacity=100):
    return {
        'o': _static(opacity, 11),
        'r': _static(0, 10),
        'p': _static([x, y, 0], 2),
        'a': _static([0, 0, 0], 1),
        's': _static([100, 100, 100], 6),
    }


def make_document():
    """Document with shape, image and precomposition layers plus nested assets"""
    return {
        'v': '5.7.4',
        'fr': 30,
        'ip': 0,
        'op': 90,
        'w': 400,
        'h': 300,
        'nm': 'Sample',
        'ddd': 0,
        'x_custom': {'keep': [1, 2, 3]},
        'assets': [
            {'id': 'image_0', 'w': 64, 'h': 64, 'u': 'images/', 'p': 'img_0.png', 'e': 0},
            {
                'id': 'comp_0',
                'nm': 'Badge',
                'fr': 30,
                'layers': [
                    {'ty': 2, 'nm': 'Badge Image', 'ind': 0, 'refId': 'image_1', 'ks': _transform(0, 0)},
                ],
            },
            {'id': 'image_1', 'w': 32, 'h': 32, 'u': 'images/', 'p': 'img_1.png', 'e': 0},
        ],
        'layers': [
            {
                'ty': 4,
                'nm': 'MyStar',
                'ind': 0,
                'ip': 0,
                'op': 90,
                'st': 0,
                'ks': _transform(50, 60),
                'x_extra': 'unmapped',
                'shapes': [
                    {
                        'ty': 'gr',
                        'nm': 'Star',
                        'it': [
                            {'ty': 'sr', 'nm': 'Star Path'},
                            {'ty': 'fl', 'nm': 'Fill 1', 'c': _static([1, 0, 0, 1], 4)},
                            {'ty': 'st', 'nm': 'Stroke 1', 'c': _static([0, 0, 0, 1], 3)},
                        ],
                    },
                ],
            },
            {'ty': 4, 'nm': 'MyRect', 'ind': 1, 'ks': _transform(200, 100), 'shapes': []},
            {'ty': 2, 'nm': 'Photo', 'ind': 2, 'refId': 'image_0', 'ks': _transform(300, 200)},
            {'ty': 0, 'nm': 'Badge', 'ind': 3, 'refId': 'comp_0', 'ks': _transform(100, 250)},
        ],
        'markers': [{'cm': 'intro', 'tm': 0, 'dr': 30}],
        'meta': {'g': 'LottieFiles', 'a': 'tests'},
    }


def make_foreign_animation():
    """Animation to import: image asset referenced from a nested composition"""
    return {
        'v': '5.7.4',
        'fr': 30,
        'ip': 0,
        'op': 60,
        'w': 120,
        'h': 80,
        'assets': [
            {'id': 'image_0', 'w': 16, 'h': 16, 'u': 'images/', 'p': 'spark.png', 'e': 0},
            {
                'id': 'comp_0',
                'layers': [
                    {'ty': 2, 'nm': 'Spark', 'ind': 0, 'refId': 'image_0'},
                ],
            },
        ],
        'layers': [
            {'ty': 0, 'nm': 'Sparks', 'ind': 0, 'refId': 'comp_0'},
            {'ty': 2, 'nm': 'Lone Spark', 'ind': 1, 'refId': 'image_0'},
        ],
    }


# ── Accelerator doubles ─────────────────────────────────────────────────

class RecordingAccelerator(Accelerator):
    """Accelerator supporting everything and recording each call"""

    capabilities = (
        Capability.SET_COLOR | Capability.SET_FLOAT | Capability.SET_POINT | Capability.SET_SIZE
        | Capability.HIT_TEST | Capability.LAYER_HIGHLIGHT | Capability.LAYER_HIDDEN
        | Capability.LAYER_TEXT | Capability.COMPOSITION_SIZE
    )

    def __init__(self, hit_index=-1, size=(800, 600)):
        self.calls = []
        self.hit_index = hit_index
        self.size = size

    def set_color(self, key_path, color_hex):
        self.calls.append(('set_color', key_path, color_hex))

    def set_float(self, key_path, value):
        self.calls.append(('set_float', key_path, value))

    def set_point(self, key_path, x, y):
        self.calls.append(('set_point', key_path, x, y))

    def set_size(self, key_path, width, height):
        self.calls.append(('set_size', key_path, width, height))

    async def hit_test_layer_at_pt_async(self, x, y, radius):
        self.calls.append(('hit_test', x, y, radius))
        return self.hit_index

    def set_layer_highlight(self, layer_index, enabled, color_hex, weight):
        self.calls.append(('set_layer_highlight', layer_index, enabled, color_hex, weight))

    def set_layer_hidden(self, layer_index, hidden):
        self.calls.append(('set_layer_hidden', layer_index, hidden))

    def set_layer_text(self, layer_index, text):
        self.calls.append(('set_layer_text', layer_index, text))

    async def get_composition_size_async(self):
        return self.size


class ColorOnlyAccelerator(Accelerator):
    """Accelerator that only supports set_color"""

    capabilities = Capability.SET_COLOR

    def __init__(self):
        self.colors = []

    def set_color(self, key_path, color_hex):
        self.colors.append((key_path, color_hex))
        return True


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def document():
    """Fresh sample document"""
    return make_document()


@pytest.fixture
def foreign_animation():
    """Fresh animation to import"""
    return make_foreign_animation()


@pytest.fixture
def id_generator():
    """Deterministic ids: '1', '2', ..."""
    return SequentialIdGenerator()


@pytest.fixture
def comp(document, id_generator):
    """Composition over the sample document"""
    return Composition(document, id_generator=id_generator)


@pytest.fixture
def empty_comp(id_generator):
    """Composition with no layers or assets"""
    return Composition({'v': '5.7.4', 'fr': 30, 'ip': 0, 'op': 60, 'w': 200, 'h': 100,
                        'assets': [], 'layers': []}, id_generator=id_generator)


@pytest.fixture
def recording_accelerator():
    """Accelerator double that supports every capability"""
    return RecordingAccelerator()


@pytest.fixture
def accelerated_comp(document, id_generator, recording_accelerator):
    """Composition wired to the recording accelerator"""
    return Composition(document, accelerator=recording_accelerator, id_generator=id_generator)


@pytest.fixture
def color_only_accelerator():
    return ColorOnlyAccelerator()


@pytest.fixture
def source_changes(comp):
    """List that receives one entry per source change of comp"""
    changes = []
    comp.on_source_change.subscribe(lambda: changes.append(True))
    return changes
