# src/scriptmeta/core/config/__init__.py
"""
Configuração do scriptmeta.

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults + override local)
    - Resolução da configuração final via deep-merge determinístico
    - Validação estrutural das chaves reconhecidas (`stages`, `persistence`)

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
"""
