# src/scriptmeta/core/engine/__init__.py
"""
Engine do pipeline de preparação de scripts.

Componentes principais:
    - planner → validação estrutural e ordenação estável por prioridade
    - runner  → aplicação linear dos Stages a um ScriptModule

Invariantes:
    - Stage de prioridade maior termina antes do de prioridade menor começar
    - Empates seguem a ordem de registro
    - Falha de um Stage nunca interrompe o pipeline

Limites explícitos:
    - Não executa o script
    - Não coleta valores interativamente
"""
