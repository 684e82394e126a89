# src/pkgs_importer/core/config/__init__.py

"""
Camada de configuração do importer.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
validar estruturalmente e identificar a configuração de imports.

A configuração é:
    - declarativa (um mapa `nome do import -> import`)
    - validada antes de qualquer geração
    - imutável após o carregamento

Responsabilidades do pacote:
    - Carregamento do arquivo de configuração (YAML ou JSON)
    - Conversão para `Configuration` / `Import` / `Registry` / `Credentials`
    - Validação de campos e validação cruzada por import
    - Resolução do mapa pacote -> versões (inline ou CSV), com cache
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não gera scripts nem pipeline
    - Não se comunica com registries de pacotes
"""

from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config, load_config_with_packages, load_raw_config
from .packages import PackagesSource
from .schema import (
    BASE64_TOKEN_KEY,
    Configuration,
    Credentials,
    Import,
    ImporterType,
    Registry,
    parse_configuration,
)

__all__ = [
    "BASE64_TOKEN_KEY",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "Configuration",
    "Credentials",
    "Import",
    "ImporterType",
    "InvalidConfigRootTypeError",
    "PackagesSource",
    "Registry",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "load_config_with_packages",
    "load_raw_config",
    "parse_configuration",
]
