"""
Seleção do registry de ecossistema a partir do tipo declarado no import.

O catálogo é explícito: um novo ecossistema entra aqui como uma nova
entrada de `REGISTRY_CLASSES`, sem alterar o fluxo de `get_registry`.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type

from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.config.schema import Import, ImporterType
from pkgs_importer.core.exceptions import UnknownRegistryTypeError

from .base import BaseRegistry
from .maven import MavenRegistry
from .npm import NpmRegistry
from .nuget import NugetRegistry
from .pypi import PypiRegistry


REGISTRY_CLASSES: Dict[str, Type[BaseRegistry]] = {
    ImporterType.NPM.value: NpmRegistry,
    ImporterType.MAVEN.value: MavenRegistry,
    ImporterType.NUGET.value: NugetRegistry,
    ImporterType.PYPI.value: PypiRegistry,
}


def supported_types() -> List[str]:
    return sorted(REGISTRY_CLASSES)


def get_registry(
    pkgs_import: Import,
    import_name: str,
    packages: Optional[PackagesSource] = None,
) -> BaseRegistry:
    """Constrói e valida o registry do import.

    Raises:
        UnknownRegistryTypeError: Se nenhum registry implementa `pkgs_import.type`.
        ImportValidationError: Se a validação do ecossistema falhar.
        PackagesSourceError: Se os pacotes do import não puderem ser lidos (Maven).
    """
    registry_cls = REGISTRY_CLASSES.get(pkgs_import.type)
    if registry_cls is None:
        raise UnknownRegistryTypeError(
            f"no registry object for type {pkgs_import.type!r} in import {import_name!r}",
            details={"import": import_name, "type": pkgs_import.type, "supported": supported_types()},
        )
    if packages is None:
        packages = PackagesSource(raw={})
    return registry_cls.build(pkgs_import, import_name, packages)
