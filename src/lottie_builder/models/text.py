"""Text document builder for text layers ('t' property)."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from lottie_builder.constants import (
    DEFAULT_FONT_SIZE, DEFAULT_FONT_FAMILY, DEFAULT_FONT_COLOR,
    DEFAULT_LINE_HEIGHT, DEFAULT_TEXT_JUSTIFY,
)
from lottie_builder.models.color import convert_to_lottie_color_rgb


@dataclass
class TextDataOptions:
    """Options for create_text_data. font_color is a hex string."""
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    font_color: str = DEFAULT_FONT_COLOR
    text: str = ''


def create_text_data(options: Optional[TextDataOptions] = None) -> Dict[str, Any]:
    """Build a Lottie text data object with a single static keyframe.

    Raises:
        ValueError: If options.font_color is not a valid hex color
    """
    if options is None:
        options = TextDataOptions()

    return {
        'd': {
            'k': [
                {
                    's': {
                        's': options.font_size,
                        'f': options.font_family,
                        't': options.text,
                        'j': DEFAULT_TEXT_JUSTIFY,
                        'tr': 0,
                        'lh': DEFAULT_LINE_HEIGHT,
                        'ls': 0,
                        'fc': convert_to_lottie_color_rgb(options.font_color),
                    },
                    't': 0,
                }
            ]
        },
        'p': {},
        'm': {
            'g': 1,
            'a': {'a': 0, 'k': [0, 0], 'ix': 2},
        },
        'a': [],
    }


def create_text_data_from(options: Union[TextDataOptions, str]) -> Dict[str, Any]:
    """Build text data from either plain text or full options."""
    if isinstance(options, str):
        options = TextDataOptions(text=options)
    return create_text_data(options)
