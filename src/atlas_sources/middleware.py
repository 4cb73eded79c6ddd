"""
Adapter de middleware por requisição.

`make_middleware(engine, request)` devolve uma corrotina
`adapter(req, res, call_next)` que:

    1. extrai parâmetros de `req.path_params` e `req.query_params`
       (a query vence em caso de conflito)
    2. chama `engine.load(request, params)`
    3. mescla o resultado em `res.data` (criado como dict se ausente)
    4. chama `call_next()` no sucesso ou `call_next(error)` na falha

O adapter é duck-typed: funciona com qualquer objeto de requisição que
exponha esses atributos (ex.: Starlette/FastAPI) e não conhece o modelo
de dados do núcleo. `call_next` pode ser síncrono ou assíncrono.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Dict

if TYPE_CHECKING:  # pragma: no cover
    from atlas_sources.core.engine.engine import SourceEngine


def request_params(req: Any) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    params.update(getattr(req, "path_params", None) or {})
    params.update(getattr(req, "query_params", None) or {})
    return params


async def _continue(call_next: Callable[..., Any], *args: Any) -> Any:
    result = call_next(*args)
    if inspect.isawaitable(result):
        return await result
    return result


def make_middleware(engine: "SourceEngine", request: Any) -> Callable[[Any, Any, Callable[..., Any]], Any]:
    async def adapter(req: Any, res: Any, call_next: Callable[..., Any]) -> Any:
        if getattr(res, "data", None) is None:
            res.data = {}

        try:
            data = await engine.load(request, request_params(req))
        except Exception as error:
            return await _continue(call_next, error)

        res.data.update(data)
        return await _continue(call_next)

    return adapter
