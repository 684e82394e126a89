# src/pkgs_importer/core/config/loader.py
"""
Loader canônico do arquivo de configuração de imports.

Este módulo é responsável por ler o arquivo de configuração
(`config.yml` por padrão), validar sua estrutura mínima e produzir
a `Configuration` tipada consumida pelo Generator.

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Validar requisitos estruturais mínimos (existência, formato, tipo raiz)
    - Delegar a conversão e a validação de campos ao schema

Invariantes:
    - O arquivo deve existir no momento do carregamento
    - Arquivos vazios são interpretados como configuração sem imports
    - O conteúdo raiz é sempre um dicionário

Limites explícitos:
    - Não resolve pacotes/versões (responsabilidade de `PackagesSource`)
    - Não gera pipeline
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .packages import PackagesSource
from .schema import Configuration, parse_configuration

logger = logging.getLogger(__name__)


def load_raw_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega o arquivo de configuração e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Args:
        path: Caminho para o arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo bruto do arquivo (nome do import -> import).

    Raises:
        ConfigFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o conteúdo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    config_file = Path(path)
    if not config_file.exists():
        raise ConfigFileNotFoundError(f"Arquivo de configuração não encontrado: {config_file}")

    suffix = config_file.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {config_file.suffix}")

    try:
        with config_file.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Falha ao interpretar {config_file}: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(path: Union[str, Path]) -> Configuration:
    """
    Carrega, converte e valida a configuração de imports.

    Política:
        - Estrutura do arquivo validada por `load_raw_config`
        - Campos e validação cruzada por import validados por
          `parse_configuration` (primeiro erro interrompe)
        - O hash canônico é calculado apenas para rastreabilidade em log

    Raises:
        ConfigError: Qualquer falha estrutural ou de schema.
        ImportValidationError: Se a validação cruzada de um import falhar.
    """
    configuration, _ = load_config_with_packages(path)
    return configuration


def load_config_with_packages(path: Union[str, Path]) -> Tuple[Configuration, PackagesSource]:
    """
    Carrega a configuração e a fonte de pacotes a partir de uma única leitura.

    O `PackagesSource` é construído sobre o mesmo conteúdo bruto que
    originou a `Configuration`: ambos refletem exatamente o mesmo arquivo.

    Raises:
        ConfigError: Qualquer falha estrutural ou de schema.
        ImportValidationError: Se a validação cruzada de um import falhar.
    """
    data = load_raw_config(path)
    configuration = parse_configuration(data)
    packages = PackagesSource.from_config(data)

    logger.info(
        "Config loaded from %s (%d import(s), hash %s)",
        path,
        len(configuration.imports),
        compute_config_hash(configuration.to_dict())[:12],
    )
    return configuration, packages
