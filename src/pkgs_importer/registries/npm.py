"""
Registry npm.

Autenticação via arquivo `.npmrc`; a cópia usa `npm pack` na origem e
`npm publish` no destino, removendo `publishConfig` do pacote para que o
publish vá para o registry configurado e não para o original.

Referências:
- https://docs.npmjs.com/cli/v9/commands/npm-pack#description
- https://docs.npmjs.com/cli/v9/commands/npm-publish#description
"""

from __future__ import annotations

from typing import List

from pkgs_importer.core.config.schema import BASE64_TOKEN_KEY, ImporterType, Registry
from pkgs_importer.core.ordering import ordered_items

from .base import BaseRegistry


NPMRC = ".npmrc"


class NpmRegistry(BaseRegistry):
    importer_type = ImporterType.NPM
    default_image = "node:alpine"

    def scripts(self) -> List[str]:
        scripts: List[str] = []
        scripts.extend(self._configure_access(self.pkgs_import.source))
        scripts.extend(self._pack_script())
        scripts.append(self._reset_access())
        scripts.extend(self._process_package())
        scripts.extend(self._configure_access(self.pkgs_import.destination))
        scripts.append(self._publish_script())
        return scripts

    def _configure_access(self, registry: Registry) -> List[str]:
        scripts = [self._set_config_value("registry", registry.url)]
        if registry.credentials.token:
            scripts.append(self._set_auth_token(registry))
        for key, value in ordered_items(
            registry.credentials.additional_parameters, exclude=(BASE64_TOKEN_KEY,)
        ):
            scripts.append(self._set_config_value(key, value))
        return scripts

    def _set_auth_token(self, registry: Registry) -> str:
        schemaless_url = registry.url
        for scheme in ("https:", "http:"):
            if schemaless_url.startswith(scheme):
                schemaless_url = schemaless_url[len(scheme):]
                break
        auth_key = "_auth" if registry.credentials.use_base64_token else "_authToken"
        return self._set_config_value(f"{schemaless_url}:{auth_key}", registry.credentials.token)

    @staticmethod
    def _set_config_value(key: str, value: str) -> str:
        return f'echo "{key} = {value}" >> {NPMRC}'

    @staticmethod
    def _reset_access() -> str:
        return f"rm -f {NPMRC}"

    @staticmethod
    def _pack_script() -> List[str]:
        return [
            "mkdir _pkg",
            'npm pack --pack-destination="_pkg" $PACKAGE_NAME@$PACKAGE_VERSION',
        ]

    @staticmethod
    def _process_package() -> List[str]:
        return [
            "cd _pkg",
            "ls *.tgz | xargs tar zxvf",
            "cd package",
            "npm pkg delete publishConfig",
            "npm pack",
        ]

    @staticmethod
    def _publish_script() -> str:
        return "ls *.tgz | xargs npm publish"
