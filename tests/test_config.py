"""
Tests for BuilderConfig loading and its use by Composition.
"""
import json
import logging

import pytest

from lottie_builder import (
    DEFAULT_CONFIG, BuilderConfig, Composition, ConfigError, config_from_dict, load_config,
)


class TestConfigFromDict:

    def test_empty_mapping_gives_defaults(self):
        assert config_from_dict({}) == DEFAULT_CONFIG

    def test_overrides(self):
        config = config_from_dict({'hit_test_radius': 2, 'highlight_color': '#ff0000'})
        assert config.hit_test_radius == 2
        assert config.highlight_color == '#ff0000'
        assert config.max_depth == DEFAULT_CONFIG.max_depth

    def test_base_supplies_missing_values(self):
        base = BuilderConfig(default_font_size=10)
        assert config_from_dict({'max_depth': 50}, base).default_font_size == 10

    @pytest.mark.parametrize("data", [
        {'max_depth': '10'},
        {'max_depth': 1.5},
        {'hit_test_radius': True},
        {'highlight_color': 3},
    ])
    def test_wrong_type(self, data):
        with pytest.raises(ConfigError):
            config_from_dict(data)

    def test_max_depth_must_be_positive(self):
        with pytest.raises(ConfigError):
            config_from_dict({'max_depth': 0})

    def test_unknown_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger='BuilderConfig'):
            config = config_from_dict({'colour': 'red'})
        assert config == DEFAULT_CONFIG
        assert 'colour' in caplog.text


class TestLoadConfig:

    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / 'missing.json')) == DEFAULT_CONFIG

    def test_load(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text(json.dumps({'default_lottie_size': 256}), encoding='utf-8')
        assert load_config(str(path)).default_lottie_size == 256

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('{not json', encoding='utf-8')
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / 'config.json'
        path.write_text('[1, 2]', encoding='utf-8')
        with pytest.raises(ConfigError):
            load_config(str(path))


class TestConfigInComposition:

    def test_default(self, comp):
        assert comp.config is DEFAULT_CONFIG

    def test_hit_test_radius(self, document):
        comp = Composition(document, config=BuilderConfig(hit_test_radius=20))
        assert comp.get_layer_at_pt(60, 60) is comp.get_layer('MyStar')

    def test_text_defaults(self, document):
        config = BuilderConfig(default_font_family='Mono', default_font_size=12)
        comp = Composition(document, config=config)
        document = comp.add_text_layer('Title', 'Hi').text_data['d']['k'][0]['s']
        assert (document['f'], document['s']) == ('Mono', 12)

    def test_default_lottie_size(self, document):
        comp = Composition(document, config=BuilderConfig(default_lottie_size=64))
        layer = comp.add_lottie_layer('Bare', {'layers': []})
        assert (layer.width, layer.height) == (64, 64)
