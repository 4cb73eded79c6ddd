# src/atlas_sources/core/engine/aggregator.py
"""
Agregação concorrente de cargas de fontes.

Este módulo dispara todas as cargas de um mapeamento (ou de uma lista)
ao mesmo tempo e recombina os resultados preservando a forma original:
cada resultado é gravado no slot da sua chave/posição, independente da
ordem em que as cargas terminam.

Política de falha (v1):
    - A primeira falha, por ordem de conclusão, é a falha da agregação
    - As cargas irmãs ainda em andamento são canceladas e aguardadas antes
      de a falha ser propagada (concorrência estruturada)
    - Nenhum resultado parcial é exposto

Invariantes:
    - Sem limite de concorrência além do número de entradas
    - Resultados de listas mantêm ordem e tamanho
    - Resultados de mapas mantêm as chaves na ordem de declaração

Limites explícitos:
    - Não faz retry
    - Não aplica timeout (responsabilidade do dispatcher)
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Mapping, TypeVar

T = TypeVar("T")


async def gather_fail_fast(awaitables: Iterable[Awaitable[Any]]) -> List[Any]:
    tasks = [asyncio.ensure_future(aw) for aw in awaitables]
    if not tasks:
        return []

    completed: List["asyncio.Future[Any]"] = []
    for task in tasks:
        task.add_done_callback(completed.append)

    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        pending = [t for t in tasks if not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    errors = [t.exception() for t in completed if not t.cancelled()]
    for error in errors:
        if error is not None:
            raise error

    return [t.result() for t in tasks]


async def gather_entries(
    entries: Mapping[str, T],
    load_one: Callable[[T], Awaitable[Any]],
) -> Dict[str, Any]:
    keys = list(entries)
    results = await gather_fail_fast(load_one(entries[key]) for key in keys)
    return dict(zip(keys, results))
