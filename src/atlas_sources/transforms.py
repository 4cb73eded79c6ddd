"""
Fontes derivadas: transformação, filtro e busca por parâmetro.

Cada helper devolve uma função de fonte `fn(params)` que carrega outra
fonte do mesmo motor (com os parâmetros vivos da requisição) e aplica
uma transformação ao resultado. A função pode ser registrada como
qualquer outra fonte:

    engine.set_source("count", engine.transform("rows", lambda data, params: len(data)))

Decisões arquiteturais:
    - O motor é capturado explicitamente na criação da função
    - Filtros recebem `params` como segundo argumento explícito
    - `find_by_param` compara valores como string (CSV entrega strings,
      parâmetros de rota podem chegar como números)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from atlas_sources.core.exceptions import InvalidSourceIdError
from atlas_sources.core.sources.types import Params

if TYPE_CHECKING:  # pragma: no cover
    from atlas_sources.core.engine.engine import SourceEngine


def require_source_id(source_id: Any, operation: str) -> str:
    if not isinstance(source_id, str) or not source_id:
        raise InvalidSourceIdError(
            f"{operation}() requires a single source id as the first argument",
            details={"source_id": repr(source_id), "operation": operation},
        )
    return source_id


def transform(
    engine: "SourceEngine",
    source_id: str,
    fn: Callable[[Any, Params], Any],
) -> Callable[[Params], Any]:
    sid = require_source_id(source_id, "transform")

    async def transformed(params: Params) -> Any:
        data = await engine.load(sid, params)
        return fn(data[sid], params)

    transformed.__name__ = f"transform[{sid}]"
    return transformed


def filter_source(
    engine: "SourceEngine",
    source_id: str,
    predicate: Callable[[Any, Params], Any],
) -> Callable[[Params], Any]:
    require_source_id(source_id, "filter")

    def apply(data: Any, params: Params) -> Any:
        if isinstance(data, list):
            return [row for row in data if predicate(row, params)]
        return predicate(data, params)

    return transform(engine, source_id, apply)


def find_by_param(
    engine: "SourceEngine",
    source_id: str,
    param: str,
    key: Optional[str] = None,
) -> Callable[[Params], Any]:
    """Primeira linha de `source_id` cujo `row[key]` é igual a `params[param]`."""
    require_source_id(source_id, "find_by_param")
    column = key or param

    def lookup(data: Any, params: Params) -> Any:
        wanted = params.get(param)
        for row in data or []:
            if str(row.get(column)) == str(wanted):
                return row
        return None

    return transform(engine, source_id, lookup)
