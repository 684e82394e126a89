"""
Contrato comum dos registries de ecossistema.

Um registry de ecossistema recebe um `Import` já validado e sabe:
- produzir as linhas de shell que copiam um par (pacote, versão)
- indicar a imagem de container padrão que provê as ferramentas necessárias
- fornecer variáveis de ambiente extras por (pacote, versão)

A validação específica do ecossistema roda na construção (`build`): um
registry inválido nunca é devolvido.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, List, Protocol, Sequence, Tuple, runtime_checkable

from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.config.schema import Credentials, Import, ImporterType
from pkgs_importer.core.exceptions import ImportValidationError, InvalidCredentialsError


SOURCE_REGISTRY_LABEL = "pkgs_importer_source"
DESTINATION_REGISTRY_LABEL = "pkgs_importer_destination"


@runtime_checkable
class ScriptBuilder(Protocol):
    """Capacidades que o Generator usa de um registry de ecossistema."""

    def scripts(self) -> List[str]:
        ...

    def image_name(self) -> str:
        ...

    def additional_env_vars(self, package_name: str, package_version: str) -> Dict[str, str]:
        ...


def validate_credentials(
    credentials: Credentials,
    *,
    required_parameters: Sequence[str],
    message: str,
    registry_label: str,
    import_name: str,
) -> None:
    """Credenciais com token exigem exatamente um dos parâmetros indicados.

    Sem token o registry é tratado como anônimo e nada é exigido.
    """
    if not credentials.token or not required_parameters:
        return

    present = [p for p in required_parameters if credentials.parameter(p)]
    if len(present) == 1:
        return

    raise InvalidCredentialsError(
        f"{message} ({registry_label} of import {import_name!r})",
        details={
            "import": import_name,
            "registry": registry_label,
            "required_one_of": list(required_parameters),
            "present": present,
        },
        hint=f"Declare {' ou '.join(required_parameters)} em {registry_label}.credentials.",
    )


class BaseRegistry(ABC):
    """Base dos registries npm, Maven, NuGet e PyPI."""

    importer_type: ClassVar[ImporterType]
    default_image: ClassVar[str]
    # parâmetros adicionais dos quais exatamente um acompanha o token
    credential_parameters: ClassVar[Tuple[str, ...]] = ()
    credentials_message: ClassVar[str] = ""

    def __init__(self, pkgs_import: Import, import_name: str):
        if pkgs_import.type != self.importer_type.value:
            raise ImportValidationError(
                f"{self.__class__.__name__} received the wrong import type: {pkgs_import.type!r}",
                details={"import": import_name, "type": pkgs_import.type},
            )
        self.pkgs_import = pkgs_import
        self.import_name = import_name

    @classmethod
    def build(cls, pkgs_import: Import, import_name: str, packages: PackagesSource) -> "BaseRegistry":
        registry = cls(pkgs_import, import_name)
        registry.validate(packages)
        return registry

    def validate(self, packages: PackagesSource) -> None:
        for label, registry in (
            ("source", self.pkgs_import.source),
            ("destination", self.pkgs_import.destination),
        ):
            validate_credentials(
                registry.credentials,
                required_parameters=self.credential_parameters,
                message=self.credentials_message,
                registry_label=label,
                import_name=self.import_name,
            )

    @abstractmethod
    def scripts(self) -> List[str]:
        """Linhas de shell que copiam `$PACKAGE_NAME`@`$PACKAGE_VERSION`."""

    def image_name(self) -> str:
        return self.default_image

    def additional_env_vars(self, package_name: str, package_version: str) -> Dict[str, str]:
        return {}
