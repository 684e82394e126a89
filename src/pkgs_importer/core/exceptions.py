"""
Packages Importer - Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas do gerador de pipelines.

Objetivo:
- Permitir que registries, pipeline e generator levantem exceções semânticas
- Facilitar o mapeamento determinístico para ImporterErrorPayload
- Evitar ValueError/RuntimeError genéricos em validações críticas

Regras:
- Não contém lógica de ecossistema (npm, Maven, NuGet, PyPI).
- Exceções carregam apenas dados estruturados (serializáveis).
- Cada exceção declara um `code` estável, usado no payload de erro.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional


@dataclass(frozen=True, eq=False)
class ImporterException(Exception):
    """Base class para exceções internas do importer.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Nunca embedar tokens ou senhas em `details`
    - Mensagem deve ser curta, humana e nomear o import envolvido
    """

    code: ClassVar[str] = "GENERATION_ERROR"

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Validação de imports
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class ImportValidationError(ImporterException):
    """Import malformado (URLs iguais, token de destino ausente, tipo incoerente)."""

    code: ClassVar[str] = "IMPORT_VALIDATION_ERROR"


@dataclass(frozen=True, eq=False)
class InvalidCredentialsError(ImportValidationError):
    """Credenciais incompletas para o ecossistema do import."""

    code: ClassVar[str] = "INVALID_CREDENTIALS"


@dataclass(frozen=True, eq=False)
class InvalidMavenCoordinatesError(ImportValidationError):
    """Nome de pacote ou versão Maven fora da sintaxe `group:artifact` / `version[:packaging]`."""

    code: ClassVar[str] = "INVALID_MAVEN_COORDINATES"


@dataclass(frozen=True, eq=False)
class UnknownRegistryTypeError(ImportValidationError):
    """Nenhum registry implementa o tipo declarado no import."""

    code: ClassVar[str] = "UNKNOWN_REGISTRY_TYPE"


# ---------------------------------------------------------------------------
# Fonte de pacotes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class PackagesSourceError(ImporterException):
    """Falha ao obter o mapa pacote -> versões (CSV ausente, malformado, valor inválido)."""

    code: ClassVar[str] = "PACKAGES_SOURCE_ERROR"


# ---------------------------------------------------------------------------
# Documento / saída
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class PipelineStructureError(ImporterException):
    """Violação estrutural do documento (ex.: label de hidden job sem ponto)."""

    code: ClassVar[str] = "PIPELINE_STRUCTURE_ERROR"


@dataclass(frozen=True, eq=False)
class OutputTooLargeError(ImporterException):
    """Documento serializado atinge o limite aceito pela engine de CI."""

    code: ClassVar[str] = "OUTPUT_TOO_LARGE"
