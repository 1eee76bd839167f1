"""Id generation for assets and imported layer names

A Composition receives its id generator at construction so tests can
substitute a deterministic sequence.
"""

import uuid as uuid_module
from typing import Callable

IdGenerator = Callable[[], str]


def new_id() -> str:
    """Random id suitable for asset ids and name suffixes"""
    return uuid_module.uuid4().hex


class SequentialIdGenerator:
    """Deterministic id generator: '1', '2', '3', ...

    Args:
        start: First id produced
        prefix: Optional text placed before each number
    """

    def __init__(self, start: int = 1, prefix: str = ''):
        self._next = start
        self._prefix = prefix

    def __call__(self) -> str:
        value = f"{self._prefix}{self._next}"
        self._next += 1
        return value
