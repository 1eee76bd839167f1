"""
Lottie Builder - Exceptions

Errors raised by the composition model. Lookups never raise (they return
None); these are reserved for malformed input and recursion guards.
"""


class LottieBuilderError(Exception):
    """Base class for all lottie_builder errors"""


class MaxDepthExceededError(LottieBuilderError, RecursionError):
    """Raised when clone_obj or deep_compare walks deeper than the allowed depth

    Indicates cyclic or pathologically nested input. Fatal for the
    operation that raised it.
    """


class InvalidAnimationError(LottieBuilderError, ValueError):
    """Raised when an animation document is missing required structure"""


class ConfigError(LottieBuilderError, ValueError):
    """Raised when configuration values have the wrong type"""
