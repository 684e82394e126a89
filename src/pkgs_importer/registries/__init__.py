"""
Registries de ecossistema (npm, Maven, NuGet, PyPI).

Cada registry traduz um import em linhas de shell que copiam um par
(pacote, versão) da origem para o destino. `get_registry` escolhe a
implementação pelo tipo declarado no import.
"""

from .base import BaseRegistry, ScriptBuilder, validate_credentials
from .maven import MavenRegistry
from .npm import NpmRegistry
from .nuget import NugetRegistry
from .pypi import PypiRegistry
from .selector import REGISTRY_CLASSES, get_registry, supported_types

__all__ = [
    "BaseRegistry",
    "MavenRegistry",
    "NpmRegistry",
    "NugetRegistry",
    "PypiRegistry",
    "REGISTRY_CLASSES",
    "ScriptBuilder",
    "get_registry",
    "supported_types",
    "validate_credentials",
]
