# src/pkgs_importer/core/engine/__init__.py
"""
Engine de geração do importer.

Este pacote contém o `Generator`, responsável por ligar a configuração
validada, os registries de ecossistema e o documento de pipeline numa
única passagem determinística, além de impor o limite de tamanho do
documento aceito pela engine de CI.
"""

from .generator import FIVE_MEGABYTES, GenerationResult, Generator

__all__ = ["FIVE_MEGABYTES", "GenerationResult", "Generator"]
