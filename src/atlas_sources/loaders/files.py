"""Loaders de arquivo embutidos (json / csv / tsv / txt / yaml / parquet).

Contrato de loader: `loader(path) -> dados` (corrotina). A leitura em disco
é bloqueante e roda em `asyncio.to_thread`, para não travar o event loop
enquanto outras fontes são carregadas em paralelo.

Limites explícitos (v1):
- NÃO infere schema
- NÃO aplica coerção de tipos (csv/tsv retornam valores string)
- NÃO faz cache de conteúdo
"""

from __future__ import annotations

import asyncio
import csv
import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import yaml  # PyYAML


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _read_json(path: str) -> Any:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def _read_yaml(path: str) -> Any:
    with Path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_delimited(path: str, delimiter: str) -> List[Dict[str, Any]]:
    with Path(path).open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        # csv.DictReader retorna tudo como string; isso é OK (sem coerções no loader)
        return list(reader)


def _read_parquet(path: str) -> List[Dict[str, Any]]:
    try:
        import pandas as pd  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError(
            "Parquet support requires pandas + a parquet engine (pyarrow or fastparquet)."
        ) from e

    df = pd.read_parquet(path)
    return df.to_dict(orient="records")


async def load_json(path: str) -> Any:
    return await asyncio.to_thread(_read_json, path)


async def load_yaml(path: str) -> Any:
    return await asyncio.to_thread(_read_yaml, path)


async def load_text(path: str) -> str:
    return await asyncio.to_thread(_read_text, path)


async def load_parquet(path: str) -> List[Dict[str, Any]]:
    return await asyncio.to_thread(_read_parquet, path)


def tabular_loader(delimiter: str) -> Callable[[str], Any]:
    """Cria um loader de texto delimitado que retorna uma lista de linhas (dict)."""

    async def load_tabular(path: str) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(_read_delimited, path, delimiter)

    return load_tabular


load_csv = tabular_loader(",")
load_tsv = tabular_loader("\t")
