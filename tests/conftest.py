# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Sources.

Este módulo define fixtures reutilizáveis que fornecem:
- o diretório de arquivos de dados de teste (csv/tsv/json/txt/yaml)
- um motor pré-configurado com as fontes canônicas de teste
- loaders falsos que registram os caminhos recebidos

Decisões arquiteturais:
    - Arquivos de dados ficam em `tests/fixtures/data` e são apenas lidos
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas
    - Código assíncrono é executado com `asyncio.run` (sem plugin)

Limites explícitos:
    - Não substituir testes de integração
    - Não escrever nos arquivos de fixture
"""

import asyncio
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "fixtures" / "data"


@pytest.fixture
def data_dir() -> Path:
    """Diretório com os arquivos de dados de teste (foo.csv, bar.csv, ...)."""
    return DATA_DIR


@pytest.fixture
def fixture_sources() -> dict:
    """
    Fontes canônicas de teste.

    - foo   → caminho simples
    - list  → lista de caminhos (resultado posicional)
    - named → mapa alias → caminho (resultado por alias)
    """
    return {
        "foo": "foo.csv",
        "list": ["foo.csv", "bar.csv"],
        "named": {"foo": "foo.csv", "bar": "bar.csv"},
    }


@pytest.fixture
def engine(data_dir, fixture_sources):
    """
    Motor com `path` apontando para os dados de teste e as fontes canônicas.

    Returns:
        SourceEngine: instância isolada por teste.
    """
    from atlas_sources import SourceEngine

    return SourceEngine(path=str(data_dir), sources=fixture_sources)


class RecordingLoader:
    """Loader assíncrono falso: registra caminhos e devolve dados fixos."""

    def __init__(self, data=None, delays=None):
        self.data = data
        self.delays = delays or {}
        self.calls = []

    async def __call__(self, path):
        self.calls.append(path)
        delay = self.delays.get(path)
        if delay:
            await asyncio.sleep(delay)
        if self.data is None:
            return {"path": path}
        return self.data


@pytest.fixture
def recording_loader():
    """Factory de RecordingLoader (um novo loader a cada chamada)."""
    return RecordingLoader


@pytest.fixture
def run():
    """Executa uma corrotina até o fim em um event loop novo."""
    return asyncio.run
