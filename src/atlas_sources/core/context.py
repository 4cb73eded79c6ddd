"""
Contexto de uma chamada de `load`.

Este módulo define o `LoadContext`, a estrutura que acompanha uma única
resolução de fontes e registra seus eventos de forma estruturada.

O LoadContext consolida:
    - identidade da chamada (load_id, created_at)
    - requisição e parâmetros recebidos
    - eventos de log estruturados (normalização, arquivos lidos, falhas)

Princípios fundamentais:
    - Isolamento por chamada (cada `load` possui seu próprio contexto,
      a menos que o chamador forneça um)
    - Logs são eventos estruturados, não strings livres
    - Nenhum estado global compartilhado

Invariantes:
    - Todo evento inclui `load_id`, `source_id`, `level` e `timestamp`
    - A lista de eventos cresce apenas por `log`

Limites explícitos:
    - Não executa carregamento
    - Não persiste eventos
    - Não decide políticas de erro
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class LoadContext:
    load_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request: Any = None
    params: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, source_id: Optional[str], level: str, message: str, **extra: Any) -> None:
        event = {
            "load_id": self.load_id,
            "source_id": source_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, level: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["level"] == level]
