"""
Registry NuGet.

Autenticação e origem são configuradas como sources do CLI `nuget`; o
source padrão `nuget.org` é removido para que o install resolva apenas
no registry de origem do import.
"""

from __future__ import annotations

from typing import List

from pkgs_importer.core.config.schema import BASE64_TOKEN_KEY, ImporterType, Registry
from pkgs_importer.core.ordering import ordered_items

from .base import DESTINATION_REGISTRY_LABEL, SOURCE_REGISTRY_LABEL, BaseRegistry


class NugetRegistry(BaseRegistry):
    importer_type = ImporterType.NUGET
    default_image = "mono:6"
    credential_parameters = ("username",)
    credentials_message = "NuGet credentials require a token and a username in authenticated registries"

    def scripts(self) -> List[str]:
        return [
            "nuget sources Remove -Name nuget.org",
            self._configure_access(self.pkgs_import.source, SOURCE_REGISTRY_LABEL),
            *self._install_script(SOURCE_REGISTRY_LABEL),
            f"nuget sources Remove -Name {SOURCE_REGISTRY_LABEL}",
            "cd _pkg && cd $(ls -d */|head -n 1)",
            self._configure_access(self.pkgs_import.destination, DESTINATION_REGISTRY_LABEL),
            f"nuget push $(ls *.nupkg | head -n 1) -Source {DESTINATION_REGISTRY_LABEL}",
        ]

    @staticmethod
    def _configure_access(registry: Registry, label: str) -> str:
        cmd = f'nuget sources Add -Name {label} -Source "{registry.url}"'
        if registry.credentials.token:
            cmd += f' -password "{registry.credentials.token}"'
        for key, value in ordered_items(
            registry.credentials.additional_parameters, exclude=(BASE64_TOKEN_KEY,)
        ):
            cmd += f" -{key} {value}"
        return cmd

    @staticmethod
    def _install_script(label: str) -> List[str]:
        return [
            "mkdir _pkg",
            "nuget install $PACKAGE_NAME -Version $PACKAGE_VERSION -NoCache -DirectDownload "
            f"-NonInteractive -DependencyVersion Ignore -Source {label} -OutputDirectory _pkg",
        ]
