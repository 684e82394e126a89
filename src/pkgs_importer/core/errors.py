"""
Packages Importer - Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados pelo importer.
Erros são artefatos do contrato operacional da ferramenta, devendo ser:

- explícitos
- serializáveis
- acionáveis

Qualquer falha encerra a geração: não existe retry nem recuperação parcial.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .config.errors import ConfigError
from .exceptions import ImporterException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImporterErrorPayload:
    """
    Payload canônico de erro do importer.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Configuração
CONFIG_ERROR = "CONFIG_ERROR"

# Validação de imports
IMPORT_VALIDATION_ERROR = "IMPORT_VALIDATION_ERROR"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
INVALID_MAVEN_COORDINATES = "INVALID_MAVEN_COORDINATES"
UNKNOWN_REGISTRY_TYPE = "UNKNOWN_REGISTRY_TYPE"

# Fonte de pacotes
PACKAGES_SOURCE_ERROR = "PACKAGES_SOURCE_ERROR"

# Saída
PIPELINE_STRUCTURE_ERROR = "PIPELINE_STRUCTURE_ERROR"
OUTPUT_TOO_LARGE = "OUTPUT_TOO_LARGE"
OUTPUT_WRITE_ERROR = "OUTPUT_WRITE_ERROR"

# Fallback
GENERATION_ERROR = "GENERATION_ERROR"


def exception_to_error(exc: BaseException) -> ImporterErrorPayload:
    """Converte exceções em ImporterErrorPayload (serializável, acionável).

    Regras:
    - ImporterException: já carrega message/details/hint e um `code` estável.
    - ConfigError: falha estrutural do arquivo de configuração.
    - OSError: falha ao escrever o arquivo de saída.
    - Outras exceções: encapsuladas como GENERATION_ERROR, sem stack trace.
    """
    if isinstance(exc, ImporterException):
        return ImporterErrorPayload(
            type=exc.code,
            message=exc.message,
            details=dict(exc.details),
            hint=exc.hint,
        )

    if isinstance(exc, ConfigError):
        return ImporterErrorPayload(
            type=CONFIG_ERROR,
            message=str(exc) or "Configuração inválida",
            details={"exception_class": exc.__class__.__name__},
            hint="Revise o arquivo de configuração indicado por --config.",
        )

    if isinstance(exc, OSError):
        return ImporterErrorPayload(
            type=OUTPUT_WRITE_ERROR,
            message=str(exc) or "Falha de I/O",
            details={
                "exception_class": exc.__class__.__name__,
                "filename": getattr(exc, "filename", None),
            },
            hint="Verifique permissões e espaço em disco do caminho de saída.",
        )

    return ImporterErrorPayload(
        type=GENERATION_ERROR,
        message=str(exc) or "Erro inesperado durante a geração",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log técnico e a configuração dos imports.",
    )
