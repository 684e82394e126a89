"""
Registry Maven.

Autenticação via `settings.xml`, escrito a partir de um de dois templates
mutuamente exclusivos:
- basic auth: parâmetro `username` + token como senha
- header customizado: parâmetro `header_name` + token como valor

A cópia usa `mvn dependency:get` para baixar o artefato num repositório
local e `mvn deploy:deploy-file` para publicá-lo no destino.

Coordenadas:
- nome do pacote: `groupId:artifactId` (exatamente um `:`)
- versão: `version[:packaging]`, com packaging restrito a `VALID_PACKAGINGS`

Diferente dos outros ecossistemas, o conjunto inteiro de pacotes/versões
do import é validado na construção do registry, antes de qualquer script.

Referências:
- https://maven.apache.org/plugins/maven-dependency-plugin/get-mojo.html
- https://maven.apache.org/plugins/maven-deploy-plugin/deploy-file-mojo.html
"""

from __future__ import annotations

from html import escape
from typing import Dict, List, Optional

from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.config.schema import Credentials, ImporterType
from pkgs_importer.core.exceptions import InvalidMavenCoordinatesError
from pkgs_importer.core.ordering import ordered_items

from .base import DESTINATION_REGISTRY_LABEL, SOURCE_REGISTRY_LABEL, BaseRegistry


COORDINATES_SEPARATOR = ":"
DEFAULT_PACKAGING = "jar"
VALID_PACKAGINGS = ["pom", "jar", "maven-plugin", "ejb", "war", "ear", "rar", "aar"]

SETTINGS_FILE = "settings.xml"
MAVEN_REPO_LOCAL = "deps"

_BASIC_AUTH_TEMPLATE = (
    "<settings><servers><server><id>{label}</id>"
    "<username>{username}</username><password>{password}</password>"
    "</server></servers></settings>"
)
_CUSTOM_HEADER_TEMPLATE = (
    "<settings><servers><server><id>{label}</id>"
    "<configuration><httpHeaders><property>"
    "<name>{header_name}</name><value>{header_value}</value>"
    "</property></httpHeaders></configuration>"
    "</server></servers></settings>"
)


def split_version(version: str) -> Optional[str]:
    """Retorna o packaging embutido em `version[:packaging]`, ou None se ausente/malformado."""
    if version.count(COORDINATES_SEPARATOR) == 1:
        return version.split(COORDINATES_SEPARATOR)[1]
    return None


class MavenRegistry(BaseRegistry):
    importer_type = ImporterType.MAVEN
    default_image = "maven:eclipse-temurin"
    credential_parameters = ("username", "header_name")
    credentials_message = (
        "Maven credentials require a token and a username or a token and a "
        "header_name for authenticated registries"
    )

    def additional_env_vars(self, package_name: str, package_version: str) -> Dict[str, str]:
        return {"PACKAGE_PACKAGING": split_version(package_version) or DEFAULT_PACKAGING}

    def scripts(self) -> List[str]:
        source = self.pkgs_import.source
        destination = self.pkgs_import.destination

        scripts: List[str] = []
        if source.credentials.token:
            scripts.append(self._configure_access(source.credentials, SOURCE_REGISTRY_LABEL))
        scripts.append(self._pull_script(SOURCE_REGISTRY_LABEL))
        scripts.extend(self._cd_into_package_directory())
        scripts.append(self._configure_access(destination.credentials, DESTINATION_REGISTRY_LABEL))
        scripts.append(self._push_script(DESTINATION_REGISTRY_LABEL))
        return scripts

    # ------------------------------------------------------------------
    # Scripts
    # ------------------------------------------------------------------

    def _configure_access(self, credentials: Credentials, label: str) -> str:
        if credentials.parameter("username"):
            settings = _BASIC_AUTH_TEMPLATE.format(
                label=escape(label),
                username=escape(credentials.parameter("username")),
                password=escape(credentials.token),
            )
        elif credentials.parameter("header_name"):
            settings = _CUSTOM_HEADER_TEMPLATE.format(
                label=escape(label),
                header_name=escape(credentials.parameter("header_name")),
                header_value=escape(credentials.token),
            )
        else:
            settings = ""
        return f'echo "{settings}" > {SETTINGS_FILE}'

    def _pull_script(self, label: str) -> str:
        cmd = (
            f"mvn dependency:get -Dmaven.repo.local={MAVEN_REPO_LOCAL} -Dtransitive=false "
            f"-Dartifact=$PACKAGE_NAME:$PACKAGE_VERSION "
            f"-DremoteRepositories={label}::::{self.pkgs_import.source.url}"
        )
        if self.pkgs_import.source.credentials.token:
            cmd += f" -s {SETTINGS_FILE}"
        return cmd

    @staticmethod
    def _cd_into_package_directory() -> List[str]:
        return [
            'pkg_dir=$(echo $PACKAGE_NAME | cut -d ":" -f 1 | tr "." "/")/'
            '$(echo $PACKAGE_NAME | cut -d ":" -f 2)/'
            '$(echo $PACKAGE_VERSION | cut -d ":" -f 1)',
            f'cd $(find {MAVEN_REPO_LOCAL} -path "*/$pkg_dir")',
        ]

    def _push_script(self, label: str) -> str:
        return (
            f"mvn deploy:deploy-file -Durl={self.pkgs_import.destination.url} "
            f"-DrepositoryId={label} "
            '-Dfile="$(find . -type f -name "*.$PACKAGE_PACKAGING")" '
            '-Dpackaging="$PACKAGE_PACKAGING" '
            f"-DpomFile=$(ls *.pom | head -n 1) -s {SETTINGS_FILE}"
        )

    # ------------------------------------------------------------------
    # Validação
    # ------------------------------------------------------------------

    def validate(self, packages: PackagesSource) -> None:
        super().validate(packages)
        for package_name, versions in ordered_items(packages.get_packages_map(self.import_name)):
            self._validate_package_name(package_name)
            for version in versions:
                self._validate_package_version(version)

    def _validate_package_name(self, name: str) -> None:
        parts = name.split(COORDINATES_SEPARATOR)
        if len(parts) == 2 and all(parts):
            return
        raise InvalidMavenCoordinatesError(
            f"{name} is an invalid Maven package name. It must contain : between "
            f"the group ID and the artifact ID.",
            details={"import": self.import_name, "package": name},
        )

    def _validate_package_version(self, version: str) -> None:
        count = version.count(COORDINATES_SEPARATOR)
        if count == 0:
            return
        if count == 1:
            packaging = version.split(COORDINATES_SEPARATOR)[1]
            if packaging in VALID_PACKAGINGS:
                return
            raise InvalidMavenCoordinatesError(
                f"{packaging} is an invalid Maven packaging string. It must be one of : "
                f"{', '.join(VALID_PACKAGINGS)}.",
                details={"import": self.import_name, "version": version, "packaging": packaging},
            )
        raise InvalidMavenCoordinatesError(
            f"{version} is an invalid Maven version string. It must be in the form of : "
            f"version[:packaging].",
            details={"import": self.import_name, "version": version},
        )
