"""Generic helpers: structural clone/compare, events, ids, logging, coordinates"""

from .structural import clone_obj, deep_compare, ary_remove_item, KeyComparer
from .events import EventSource
from .ids import new_id, SequentialIdGenerator, IdGenerator
from .logger import configure_logging, logger_raise
from .coordinate_transforms import viewport_point_to_comp_point

__all__ = [
    'clone_obj',
    'deep_compare',
    'ary_remove_item',
    'KeyComparer',
    'EventSource',
    'new_id',
    'SequentialIdGenerator',
    'IdGenerator',
    'configure_logging',
    'logger_raise',
    'viewport_point_to_comp_point',
]
