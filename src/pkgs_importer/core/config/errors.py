# src/pkgs_importer/core/config/errors.py
"""
Exceções canônicas da camada de configuração do importer.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento e a validação estrutural do arquivo de configuração
(`config.yml` por padrão).

As exceções aqui definidas representam **violações estruturais
explícitas** do arquivo, e não falhas de geração do pipeline.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Validações cruzadas entre campos de um import (URLs iguais, token
      de destino ausente) pertencem a `ImportValidationError`, não a esta
      hierarquia

Limites explícitos:
    - Não gera pipeline
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do importer.

    Permite captura genérica de falhas de configuração e distinção clara
    entre erros do arquivo e erros de geração.
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração não existe
    no caminho informado.

    Limites explícitos:
        - Não tenta localizar o arquivo em outros diretórios
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do arquivo de configuração
    não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando o conteúdo do arquivo não pode ser
    interpretado como YAML/JSON válido.
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um mapa `nome do import -> import`.
    """


class ConfigValidationError(ConfigError):
    """
    Exceção levantada quando um campo de um import viola o schema:
    campo obrigatório ausente, URL inválida, tipo fora do enum
    ou valor com tipo incompatível.

    A mensagem sempre nomeia o import e o caminho do campo.
    """
