"""
Resolução de requisições: normalização de forma e interpolação.
"""

from .interpolator import DEFAULT_INTERPOLATION_PATTERN, Interpolator, compile_pattern
from .normalizer import WILDCARD, CanonicalRequest, normalize

__all__ = [
    "CanonicalRequest",
    "DEFAULT_INTERPOLATION_PATTERN",
    "Interpolator",
    "WILDCARD",
    "compile_pattern",
    "normalize",
]
