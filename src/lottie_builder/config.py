"""Configuration for the composition model

Settings are plain values with defaults from constants.py. They can be
overridden from a JSON file or an in-memory mapping:

    config = load_config('lottie_builder.json')
    comp = Composition(document, config=config)
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

from lottie_builder.constants import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_HIT_TEST_RADIUS,
    DEFAULT_HIGHLIGHT_COLOR, DEFAULT_HIGHLIGHT_WEIGHT,
    DEFAULT_FONT_SIZE, DEFAULT_FONT_FAMILY, DEFAULT_FONT_COLOR,
    DEFAULT_LOTTIE_SIZE,
)
from lottie_builder.exceptions import ConfigError
from lottie_builder.utils.logger import logger_raise

_logger = logging.getLogger('BuilderConfig')


@dataclass(frozen=True)
class BuilderConfig:
    """Tunable settings shared by a Composition and its layers"""
    max_depth: int = DEFAULT_MAX_DEPTH
    hit_test_radius: float = DEFAULT_HIT_TEST_RADIUS
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR
    highlight_weight: float = DEFAULT_HIGHLIGHT_WEIGHT
    default_font_size: float = DEFAULT_FONT_SIZE
    default_font_family: str = DEFAULT_FONT_FAMILY
    default_font_color: str = DEFAULT_FONT_COLOR
    default_lottie_size: float = DEFAULT_LOTTIE_SIZE


DEFAULT_CONFIG = BuilderConfig()

# Accepted python types per field (bool is rejected for numeric fields)
_FIELD_TYPES = {
    'max_depth': (int,),
    'hit_test_radius': (int, float),
    'highlight_color': (str,),
    'highlight_weight': (int, float),
    'default_font_size': (int, float),
    'default_font_family': (str,),
    'default_font_color': (str,),
    'default_lottie_size': (int, float),
}


def config_from_dict(data: Mapping[str, Any], base: BuilderConfig = DEFAULT_CONFIG) -> BuilderConfig:
    """Build a config from a mapping, keeping defaults for missing keys

    Args:
        data: Mapping of field name to value
        base: Config supplying values for missing keys

    Returns:
        New BuilderConfig

    Raises:
        ConfigError: If a value has the wrong type
    """
    known = {f.name for f in fields(BuilderConfig)}
    overrides: Dict[str, Any] = {}

    for key, value in data.items():
        if key not in known:
            _logger.warning(f"Ignoring unknown config key: {key}")
            continue
        expected = _FIELD_TYPES[key]
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(
                f"Config key '{key}' expects {'/'.join(t.__name__ for t in expected)}, "
                f"got {type(value).__name__}"
            )
        overrides[key] = value

    if overrides.get('max_depth', 1) < 1:
        raise ConfigError("max_depth must be at least 1")

    return replace(base, **overrides)


def load_config(path: str) -> BuilderConfig:
    """Load config from a JSON file

    A missing file yields the defaults.

    Args:
        path: Path to a JSON object file

    Returns:
        BuilderConfig

    Raises:
        ConfigError: If the file is not a JSON object or a value is invalid
    """
    if not os.path.exists(path):
        _logger.debug(f"No config file at {path}, using defaults")
        return DEFAULT_CONFIG

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger_raise(ConfigError(f"Invalid JSON in {path}: {e}"), "Error loading config", _logger)

    if not isinstance(data, dict):
        logger_raise(ConfigError(f"Config file {path} must contain a JSON object"),
                     "Error loading config", _logger)

    return config_from_dict(data)
