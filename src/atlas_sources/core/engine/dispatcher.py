# src/atlas_sources/core/engine/dispatcher.py
"""
Despacho de carga por tipo de fonte.

Dada uma Source já interpolada, o `Dispatcher` produz os dados
correspondentes de forma assíncrona:

    - TemplateSource → caminho de arquivo; o loader é escolhido pela
      extensão na tabela da instância (com fallback "default")
    - FunctionSource → `fn(params)` com os parâmetros originais da
      requisição (não interpolados); awaitables são aguardados
    - ArraySource    → carga concorrente de cada item, resultado em lista
      na ordem de declaração
    - MapSource      → agregação concorrente, resultado em dict por alias

Decisões arquiteturais:
    - Caminhos relativos são unidos ao `base_path`; absolutos vencem
    - Loaders podem ser síncronos ou assíncronos
    - `load_timeout` (opcional) limita cada chamada de loader/função

Limites explícitos:
    - Não interpola templates (recebe Sources já resolvidas)
    - Não faz retry nem cache
"""

from __future__ import annotations

import asyncio
import inspect
from pathlib import Path, PurePath
from typing import Any, Dict, Optional, Union

from atlas_sources.core.context import LoadContext
from atlas_sources.core.exceptions import (
    InvalidSourceKindError,
    LoadTimeoutError,
    NoLoaderFoundError,
)
from atlas_sources.core.sources.types import (
    ArraySource,
    FunctionSource,
    MapSource,
    Params,
    Source,
    TemplateSource,
)
from atlas_sources.loaders.table import DEFAULT_LOADER_KEY, Loader

from .aggregator import gather_entries, gather_fail_fast


def file_extension(filename: str) -> str:
    return PurePath(filename).suffix.lstrip(".").lower()


class Dispatcher:
    """Carrega uma Source resolvida usando a tabela de loaders da instância."""

    def __init__(
        self,
        loaders: Dict[str, Loader],
        base_path: Optional[Union[str, Path]] = None,
        load_timeout: Optional[float] = None,
    ):
        self.loaders = loaders
        self.base_path = base_path
        self.load_timeout = load_timeout

    def resolve_path(self, filename: str) -> str:
        if self.base_path:
            return str(Path(self.base_path) / filename)
        return filename

    def find_loader(self, path: str) -> Loader:
        ext = file_extension(path)
        loader = self.loaders.get(ext) or self.loaders.get(DEFAULT_LOADER_KEY)
        if loader is None:
            raise NoLoaderFoundError(
                f'no loader found for: "{path}"',
                details={"path": path, "extension": ext},
                hint="Registre um loader para a extensão ou um loader 'default'",
            )
        return loader

    async def load_source(self, source: Source, params: Params, ctx: LoadContext) -> Any:
        if isinstance(source, TemplateSource):
            return await self.load_file(source.template, ctx)

        if isinstance(source, FunctionSource):
            return await self._call(source.fn, params, label=getattr(source.fn, "__name__", "function"))

        if isinstance(source, ArraySource):
            return await gather_fail_fast(self.load_source(item, params, ctx) for item in source.items)

        if isinstance(source, MapSource):
            return await self.load_entries(source.entries, params, ctx)

        raise InvalidSourceKindError(
            f"invalid source type: {type(source).__name__}",
            details={"type": type(source).__name__},
        )

    async def load_entries(self, entries: Dict[str, Source], params: Params, ctx: LoadContext) -> Dict[str, Any]:
        return await gather_entries(entries, lambda src: self.load_source(src, params, ctx))

    async def load_file(self, filename: str, ctx: LoadContext) -> Any:
        path = self.resolve_path(filename)
        loader = self.find_loader(path)
        data = await self._call(loader, path, label=path)
        ctx.log(
            source_id=None,
            level="debug",
            message="file loaded",
            path=path,
            extension=file_extension(path),
        )
        return data

    async def _call(self, fn: Any, arg: Any, *, label: str) -> Any:
        result = fn(arg)
        if not inspect.isawaitable(result):
            return result
        if self.load_timeout is None:
            return await result
        try:
            return await asyncio.wait_for(result, timeout=self.load_timeout)
        except asyncio.TimeoutError as e:
            raise LoadTimeoutError(
                f'load timed out after {self.load_timeout}s: "{label}"',
                details={"target": label, "timeout": self.load_timeout},
            ) from e
