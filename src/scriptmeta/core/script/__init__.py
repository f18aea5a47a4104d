# src/scriptmeta/core/script/__init__.py
"""
Metadata de parâmetros de scripts.

Componentes:
    - item       → ParameterItem, ItemIO, ItemVisibility
    - types      → TypeLookup / Converter e implementações padrão
    - attributes → parsing da cláusula de atributos e de `choices`
    - directive  → parsing de uma linha de diretiva
    - info       → ScriptInfo (varredura do preâmbulo)
    - module     → ScriptModule (valores de uma execução)
    - version    → identidade/versão do arquivo do script

Fluxo:
    texto do script → ScriptInfo → ParameterItems → ScriptModule
"""
