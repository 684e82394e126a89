# src/pkgs_importer/core/config/schema.py
"""
Schema canônico da configuração de imports.

Este módulo converte o mapa bruto carregado do arquivo de configuração
em estruturas explícitas e imutáveis:

    Configuration
      └── imports: nome -> Import
            ├── type: ImporterType (npm | maven | nuget | pypi)
            ├── image: imagem opcional que substitui a do ecossistema
            ├── source: Registry
            └── destination: Registry
                  ├── url
                  └── credentials: Credentials (token + parâmetros adicionais)

Validação em duas camadas:
    - campo a campo (`parse_configuration`): obrigatórios, URL absoluta,
      enum de tipo, tipos de valores → `ConfigValidationError`
    - cruzada por import (`Import.validate`): URLs de origem e destino
      distintas, token de destino presente → `ImportValidationError`

Limites explícitos:
    - Não resolve pacotes/versões (ver `packages.py`)
    - Não valida credenciais específicas de ecossistema (ver `registries`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from pkgs_importer.core.exceptions import ImportValidationError

from .errors import ConfigValidationError


# Parâmetro adicional reservado: "1" indica que o token já está em base64.
BASE64_TOKEN_KEY = "_base64_token"

# Chaves do import que pertencem a outros componentes (não ao schema).
_NON_SCHEMA_IMPORT_KEYS = {"packages"}


class ImporterType(str, Enum):
    """
    Ecossistemas de pacotes suportados.

    Os valores são strings para facilitar a leitura direta do arquivo
    de configuração e a serialização em mensagens de erro.
    """
    NPM = "npm"
    MAVEN = "maven"
    NUGET = "nuget"
    PYPI = "pypi"

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]


@dataclass(frozen=True)
class Credentials:
    """Credenciais de acesso a um registry.

    `token` é o segredo principal; qualquer outra chave declarada em
    `credentials` é preservada em `additional_parameters` (ex.: `username`,
    `header_name`), sempre como string.
    """

    token: str = ""
    additional_parameters: Dict[str, str] = field(default_factory=dict)

    @property
    def use_base64_token(self) -> bool:
        return self.additional_parameters.get(BASE64_TOKEN_KEY) == "1"

    def parameter(self, name: str) -> str:
        return self.additional_parameters.get(name, "")

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, **dict(self.additional_parameters)}


@dataclass(frozen=True)
class Registry:
    """Endpoint de um registry de pacotes e suas credenciais."""

    url: str
    credentials: Credentials = field(default_factory=Credentials)

    def require_credentials_token(self, registry_label: str, import_name: str) -> None:
        if not self.credentials.token:
            raise ImportValidationError(
                f"credentials token for {registry_label} in import {import_name!r} is required",
                details={"import": import_name, "registry": registry_label},
                hint=f"Declare {registry_label}.credentials.token no import {import_name!r}.",
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "credentials": self.credentials.to_dict()}


@dataclass(frozen=True)
class Import:
    """Uma operação de cópia de pacotes: registry de origem -> registry de destino."""

    type: str
    source: Registry
    destination: Registry
    image: str = ""

    def validate(self, import_name: str) -> None:
        """Validação cruzada do import (independente do ecossistema)."""
        if self.source.url == self.destination.url:
            raise ImportValidationError(
                f"import {import_name!r} has the same url for the source and the destination",
                details={"import": import_name, "url": self.source.url},
                hint="Origem e destino precisam ser registries diferentes.",
            )
        self.destination.require_credentials_token("destination", import_name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "image": self.image,
            "source": self.source.to_dict(),
            "destination": self.destination.to_dict(),
        }


@dataclass(frozen=True)
class Configuration:
    """Conjunto de imports indexado por nome (chave única)."""

    imports: Dict[str, Import] = field(default_factory=dict)

    def validate(self) -> None:
        for name in sorted(self.imports):
            self.imports[name].validate(name)

    def to_dict(self) -> Dict[str, Any]:
        return {name: self.imports[name].to_dict() for name in sorted(self.imports)}


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigValidationError(msg)


def _as_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_absolute_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def _parse_credentials(data: Any, where: str) -> Credentials:
    if data is None:
        return Credentials()
    _expect(isinstance(data, Mapping), f"{where}.credentials must be a mapping")

    token: Optional[str] = None
    additional: Dict[str, str] = {}
    for key, value in data.items():
        key = str(key)
        _expect(
            not isinstance(value, (Mapping, list)),
            f"{where}.credentials.{key} must be a scalar value",
        )
        if value is None:
            continue
        if key == "token":
            token = _as_str(value)
        else:
            additional[key] = _as_str(value)

    return Credentials(token=token or "", additional_parameters=additional)


def _parse_registry(data: Any, where: str) -> Registry:
    _expect(data is not None, f"{where} is required")
    _expect(isinstance(data, Mapping), f"{where} must be a mapping")

    url = data.get("url")
    _expect(isinstance(url, str) and bool(url.strip()), f"{where}.url is required")
    _expect(_is_absolute_url(url), f"{where}.url must be a valid absolute url, got {url!r}")

    return Registry(url=url, credentials=_parse_credentials(data.get("credentials"), where))


def _parse_import(name: str, data: Any) -> Import:
    where = f"import {name!r}"
    _expect(isinstance(data, Mapping), f"{where} must be a mapping")

    importer_type = data.get("type")
    _expect(importer_type is not None, f"{where}: type is required")
    _expect(
        importer_type in ImporterType.values(),
        f"{where}: type {importer_type!r} must be one of {ImporterType.values()}",
    )

    image = data.get("image") or ""
    _expect(isinstance(image, str), f"{where}: image must be a string")

    unknown = sorted(
        str(k)
        for k in data.keys()
        if k not in {"type", "image", "source", "destination"} | _NON_SCHEMA_IMPORT_KEYS
    )
    _expect(not unknown, f"{where}: unknown keys {unknown}")

    return Import(
        type=importer_type,
        image=image,
        source=_parse_registry(data.get("source"), f"{where} source"),
        destination=_parse_registry(data.get("destination"), f"{where} destination"),
    )


def parse_configuration(data: Mapping[str, Any], *, validate: bool = True) -> Configuration:
    """
    Converte o mapa bruto da configuração em `Configuration`.

    Cada chave raiz é o nome de um import. A conversão valida todos os
    campos e, por padrão, executa também a validação cruzada de cada
    import em ordem lexicográfica de nome (o primeiro erro interrompe).

    Args:
        data: Mapa carregado do arquivo de configuração.
        validate: Quando False, pula a validação cruzada (`Import.validate`).

    Returns:
        Configuration: Configuração tipada e imutável.

    Raises:
        ConfigValidationError: Se algum campo violar o schema.
        ImportValidationError: Se a validação cruzada de um import falhar.
    """
    if not isinstance(data, Mapping):
        raise ConfigValidationError(
            f"config root must be a mapping of imports, got {type(data).__name__}"
        )

    imports: Dict[str, Import] = {}
    for key in sorted(data.keys(), key=str):
        imports[str(key)] = _parse_import(str(key), data[key])

    configuration = Configuration(imports=imports)
    if validate:
        configuration.validate()
    return configuration
