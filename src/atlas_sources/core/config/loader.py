# src/atlas_sources/core/config/loader.py
"""
Loader canônico de configuração do motor de fontes.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Chaves reconhecidas (v1):
    - path                  → diretório base para fontes relativas
    - sources               → mapa id → fonte (caminho, lista, mapa)
    - loaders               → mapa extensão → "modulo:atributo"
    - interpolation_pattern → regex de placeholder (1 grupo de captura)
    - max_reference_depth   → limite de referências `#id` encadeadas
    - load_timeout          → segundos por chamada de loader (null = sem limite)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não importa loaders (isso ocorre na construção do motor)
    - Não valida a existência dos arquivos de fonte
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)

_EXPECTED_TYPES = {
    "path": (str,),
    "sources": (dict, list),
    "loaders": (dict,),
    "interpolation_pattern": (str,),
    "max_reference_depth": (int,),
    "load_timeout": (int, float),
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Valida os tipos das chaves conhecidas; chaves desconhecidas são mantidas."""
    for key, expected in _EXPECTED_TYPES.items():
        value = config.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, expected):
            names = " | ".join(t.__name__ for t in expected)
            raise InvalidConfigValueError(
                f"Chave '{key}' deve ser {names}, recebido: {type(value).__name__}"
            )
    return config


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do motor.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional (ausente no disco = ignorado)
        - Quando presente, o local sempre tem prioridade sobre defaults
        - `path` relativo é resolvido contra o diretório do defaults

    Args:
        defaults_path (str): Caminho para o arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.
    """
    defaults_file = Path(defaults_path)
    effective = _load_file(defaults_file)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    validate_config(effective)

    base = effective.get("path")
    if base and not Path(base).is_absolute():
        effective["path"] = str(defaults_file.parent / base)

    return effective
