"""
Core do Atlas Sources.

Componentes principais:
    - sources  → variantes de Source e registry id → Source
    - resolve  → normalização de requisições e interpolação de templates
    - engine   → despacho por tipo de fonte, agregação e fachada SourceEngine
    - config   → carregamento, merge e validação da configuração do motor

Princípios fundamentais:
    - Nenhuma decisão silenciosa: erros são tipados e propagados
    - Nenhum estado global: tabelas de loaders são por instância

Limites explícitos:
    - Não contém loaders de formato (ver `atlas_sources.loaders`)
    - Não depende de frameworks web (ver `atlas_sources.middleware`)
"""
