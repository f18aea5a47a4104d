# src/scriptmeta/core/__init__.py
"""
Core do scriptmeta.

Reúne a implementação canônica de:
    - core.script   → extração de parâmetros do preâmbulo de scripts
    - core.pipeline → contrato de Stage, prioridades e registro
    - core.engine   → planejamento por prioridade e execução de Stages
    - core.config   → carregamento e merge de configuração
    - core.context  → capacidades externas e canal de diagnóstico

Limites explícitos:
    - Não executa scripts
    - Não renderiza UI para coletar valores
    - Não implementa engines de armazenamento
"""
