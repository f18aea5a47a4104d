# src/scriptmeta/core/pipeline/__init__.py
"""
Contratos do pipeline de preparação de scripts.

Componentes:
    - stage    → protocolo Stage (id, priority, process)
    - priority → constantes de prioridade
    - types    → StageStatus, StageResult, PipelineResult
    - registry → StageRegistry (ordem de registro = desempate)

Limites explícitos:
    - Não ordena nem executa Stages (ver core.engine)
"""
