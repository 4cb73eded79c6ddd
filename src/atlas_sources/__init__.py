"""
Atlas Sources — motor declarativo de resolução de fontes de dados.

Dado um registry de fontes nomeadas (arquivos, estruturas aninhadas ou
funções) e parâmetros de requisição, resolve um subconjunto de fontes em
dados concretos, com interpolação de `:parametros`, referências `#id`
entre fontes e agregação que preserva a forma pedida.

Arquitetura em alto nível:
    - core.sources  → variantes de Source e registry
    - core.resolve  → normalização e interpolação
    - core.engine   → despacho, agregação e SourceEngine
    - core.config   → configuração do motor (YAML/JSON)
    - loaders       → loaders de arquivo embutidos
    - transforms    → fontes derivadas (transform, filter, find_by_param)
    - middleware    → adapter request → load → response
"""

from .core.context import LoadContext
from .core.engine.engine import SourceEngine
from .core.errors import SourceErrorPayload, exception_to_error
from .core.exceptions import (
    InvalidRequestError,
    InvalidSourceIdError,
    InvalidSourceKindError,
    InvalidSourcesTypeError,
    LoadTimeoutError,
    MissingParameterError,
    NoLoaderFoundError,
    ReferenceCycleError,
    SourceException,
    UnknownReferenceError,
    UnknownSourceError,
)

__all__ = [
    "InvalidRequestError",
    "InvalidSourceIdError",
    "InvalidSourceKindError",
    "InvalidSourcesTypeError",
    "LoadContext",
    "LoadTimeoutError",
    "MissingParameterError",
    "NoLoaderFoundError",
    "ReferenceCycleError",
    "SourceEngine",
    "SourceErrorPayload",
    "SourceException",
    "UnknownReferenceError",
    "UnknownSourceError",
    "exception_to_error",
]
