"""
Engine do Atlas Sources: despacho por tipo de fonte, agregação concorrente
e a fachada `SourceEngine`.
"""

from .aggregator import gather_entries, gather_fail_fast
from .dispatcher import Dispatcher, file_extension
from .engine import SourceEngine

__all__ = [
    "Dispatcher",
    "SourceEngine",
    "file_extension",
    "gather_entries",
    "gather_fail_fast",
]
