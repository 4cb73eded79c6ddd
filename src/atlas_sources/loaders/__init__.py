"""
Loaders de conteúdo plugáveis do Atlas Sources.

O núcleo conhece apenas o contrato (caminho → dados, assíncrono). Este
pacote fornece os loaders embutidos e a construção da tabela por instância.
"""

from .files import load_csv, load_json, load_parquet, load_text, load_tsv, load_yaml, tabular_loader
from .table import DEFAULT_LOADER_KEY, DEFAULT_LOADERS, Loader, build_loader_table, import_loader

__all__ = [
    "DEFAULT_LOADERS",
    "DEFAULT_LOADER_KEY",
    "Loader",
    "build_loader_table",
    "import_loader",
    "load_csv",
    "load_json",
    "load_parquet",
    "load_text",
    "load_tsv",
    "load_yaml",
    "tabular_loader",
]
