"""
Lottie Builder - Constants

This module contains constant values used throughout the package:
- Schema keys shared between modules
- Default transform values
- Default text settings
- Recursion bounds and hit-test defaults

Based on: the Lottie/bodymovin JSON schema
"""

# ======================================================================
# SCHEMA KEYS
# ======================================================================

KEY_LAYERS = 'layers'
KEY_ASSETS = 'assets'
KEY_ID = 'id'
KEY_REF_ID = 'refId'

# ======================================================================
# RECURSION BOUNDS
# ======================================================================

# Upper bound for clone_obj/deep_compare recursion (cycle guard)
DEFAULT_MAX_DEPTH = 200

# ======================================================================
# TRANSFORM DEFAULTS
# ======================================================================
# Lottie stores scale and opacity multiplied by 100

DEFAULT_SCALE = [100, 100, 100]
DEFAULT_POSITION = [0, 0, 0]
DEFAULT_ROTATION = 0
DEFAULT_OPACITY = 100

# Property indexes written by After Effects for each transform channel
TRANSFORM_INDEX_ANCHOR = 1
TRANSFORM_INDEX_POSITION = 2
TRANSFORM_INDEX_SCALE = 6
TRANSFORM_INDEX_ROTATION = 10
TRANSFORM_INDEX_OPACITY = 11

# ======================================================================
# TEXT DEFAULTS
# ======================================================================

DEFAULT_FONT_SIZE = 36
DEFAULT_FONT_FAMILY = 'Arial'
DEFAULT_FONT_COLOR = '#333333'
DEFAULT_LINE_HEIGHT = 43.2
DEFAULT_TEXT_JUSTIFY = 2

# ======================================================================
# INTERACTION DEFAULTS
# ======================================================================

DEFAULT_HIT_TEST_RADIUS = 8.0
DEFAULT_HIGHLIGHT_COLOR = '#00ff00'
DEFAULT_HIGHLIGHT_WEIGHT = 5

# Size given to imported animations that declare no w/h
DEFAULT_LOTTIE_SIZE = 100

# Prefix for the synthetic asset created when importing an animation
PRECOMP_ASSET_PREFIX = 'comp'
