# src/atlas_sources/core/sources/types.py
"""
Tipos canônicos de fonte de dados do Atlas Sources.

Uma fonte (Source) é uma união fechada de quatro variantes:
    - TemplateSource → caminho de arquivo, com placeholders (`:nome`) e
      prefixo opcional `#` de referência a outra fonte
    - FunctionSource → callable `fn(params)` que produz dados (sync ou async)
    - ArraySource    → sequência ordenada de fontes aninhadas
    - MapSource      → mapeamento alias → fonte aninhada

Valores Python "soltos" (str, callable, list, dict) são convertidos para
as variantes por `coerce_source`, no momento do registro. Assim o
dispatcher trabalha apenas com variantes conhecidas.

Invariantes:
    - Variantes são imutáveis após criadas
    - ArraySource preserva ordem e tamanho
    - MapSource preserva as chaves (aliases)

Limites explícitos:
    - Não interpola templates
    - Não carrega dados
    - Não consulta o registry
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Tuple, Union

from atlas_sources.core.exceptions import InvalidSourceKindError


#: Parâmetros de requisição: alias → escalar.
Params = Mapping[str, Any]

SourceFunction = Callable[[Params], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class TemplateSource:
    template: str


@dataclass(frozen=True)
class FunctionSource:
    fn: SourceFunction


@dataclass(frozen=True)
class ArraySource:
    items: Tuple["Source", ...]


@dataclass(frozen=True)
class MapSource:
    entries: Dict[str, "Source"]


Source = Union[TemplateSource, FunctionSource, ArraySource, MapSource]

SOURCE_TYPES = (TemplateSource, FunctionSource, ArraySource, MapSource)


def coerce_source(value: Any) -> Source:
    """
    Converte um valor Python para a variante de Source correspondente.

    Regras (v1):
        - Source já construída → mantida
        - str                 → TemplateSource
        - callable            → FunctionSource
        - list / tuple        → ArraySource (recursivo)
        - mapping com "file"  → TemplateSource do arquivo (forma objeto)
        - outro mapping       → MapSource (recursivo)

    Raises:
        InvalidSourceKindError: para qualquer outro valor (números,
            booleanos, None, ...).
    """
    if isinstance(value, SOURCE_TYPES):
        return value

    if isinstance(value, str):
        return TemplateSource(value)

    if callable(value):
        return FunctionSource(value)

    if isinstance(value, (list, tuple)):
        return ArraySource(tuple(coerce_source(v) for v in value))

    if isinstance(value, Mapping):
        file_value = value.get("file")
        if file_value:
            return TemplateSource(str(file_value))
        return MapSource({str(k): coerce_source(v) for k, v in value.items()})

    raise InvalidSourceKindError(
        f"invalid source type: {type(value).__name__}",
        details={"value": repr(value), "type": type(value).__name__},
        hint="Use um caminho (str), uma função, uma lista ou um mapeamento de fontes",
    )
