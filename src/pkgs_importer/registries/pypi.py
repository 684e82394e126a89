"""
Registry PyPI.

Na origem, usuário e senha são embutidos na URL do índice (user-info);
no destino, são passados como flags do `twine upload`.
"""

from __future__ import annotations

from typing import List, Tuple
from urllib.parse import quote, urlsplit, urlunsplit

from pkgs_importer.core.config.schema import Credentials, ImporterType, Registry

from .base import BaseRegistry


class PypiRegistry(BaseRegistry):
    importer_type = ImporterType.PYPI
    default_image = "python:alpine"
    credential_parameters = ("username",)
    credentials_message = "PyPI credentials require a token and a username in authenticated registries"

    def scripts(self) -> List[str]:
        return [
            self._install_script(),
            "cd pkgs",
            "python -m pip install twine",
            self._push_script(),
        ]

    def _install_script(self) -> str:
        index_url = full_url(self.pkgs_import.source)
        return (
            'python -m pip download "$PACKAGE_NAME==$PACKAGE_VERSION" '
            f"-d pkgs --no-cache-dir --no-deps -i {index_url}"
        )

    def _push_script(self) -> str:
        cmd = f"python -m twine upload --repository-url {self.pkgs_import.destination.url} "
        user, password = username_and_password(self.pkgs_import.destination.credentials)
        if user:
            cmd += f'-u "{user}" '
        if password:
            cmd += f'-p "{password}" '
        return cmd + "./*"


def username_and_password(credentials: Credentials) -> Tuple[str, str]:
    return credentials.parameter("username"), credentials.token


def full_url(registry: Registry) -> str:
    """URL do registry com `usuário:senha@` quando ambos estão presentes."""
    user, password = username_and_password(registry.credentials)
    if not (user and password):
        return registry.url

    parts = urlsplit(registry.url)
    host = parts.netloc.rsplit("@", 1)[-1]
    netloc = f"{quote(user, safe='')}:{quote(password, safe='')}@{host}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
