# src/pkgs_importer/core/__init__.py
"""
Core do Packages Importer.

Este pacote reúne as responsabilidades independentes de ecossistema:

Componentes principais:
    - config   → carregamento, schema, fonte de pacotes e hashing
    - pipeline → modelo do documento (stages, hidden jobs, jobs por pacote)
    - engine   → Generator (ordenação determinística + limite de tamanho)
    - errors / exceptions → exceções tipadas e payload canônico de erro

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo erro interrompe a geração
    - Toda coleção indexada por nome é percorrida em ordem explícita
    - A mesma entrada sempre produz o mesmo documento

Limites explícitos:
    - Não executa scripts gerados
    - Não se comunica com registries de pacotes
"""
