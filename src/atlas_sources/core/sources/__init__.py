"""
Fontes de dados do Atlas Sources.

- **types**: variantes canônicas de Source e `coerce_source`
- **registry**: `SourceRegistry`, mapeamento id → Source
"""

from .registry import SourceRegistry
from .types import (
    ArraySource,
    FunctionSource,
    MapSource,
    Params,
    Source,
    TemplateSource,
    coerce_source,
)

__all__ = [
    "ArraySource",
    "FunctionSource",
    "MapSource",
    "Params",
    "Source",
    "SourceRegistry",
    "TemplateSource",
    "coerce_source",
]
