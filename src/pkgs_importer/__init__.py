# src/pkgs_importer/__init__.py
"""
Packages Importer - gerador de child pipelines de cópia de pacotes.

A partir de uma configuração declarativa de imports (registry de origem,
registry de destino e ecossistema: npm, Maven, NuGet ou PyPI) e do
conjunto de pacotes/versões de cada import, este pacote produz um
documento de pipeline de CI que, quando executado, faz a cópia.

Arquitetura em alto nível:
    - core.config   → carregamento e validação da configuração, pacotes
    - registries    → scripts por ecossistema e seleção por tipo
    - core.pipeline → modelo do documento de pipeline
    - core.engine   → Generator (ordenação determinística, limite de tamanho)
    - cli           → comando `pkgs_importer generate`

Limites explícitos:
    - Não executa os scripts gerados
    - Não se comunica com nenhum registry
"""

from .core.config import PackagesSource, load_config, load_raw_config, parse_configuration
from .core.engine import GenerationResult, Generator
from .core.pipeline import PipelineDocument
from .registries import get_registry

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "Generator",
    "PackagesSource",
    "PipelineDocument",
    "__version__",
    "get_registry",
    "load_config",
    "load_raw_config",
    "parse_configuration",
]
