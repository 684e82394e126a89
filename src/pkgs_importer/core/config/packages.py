# src/pkgs_importer/core/config/packages.py
"""
Fonte canônica do mapa pacote -> versões de cada import.

O valor `packages` de um import pode ser:
    - um mapa `nome do pacote -> lista de versões` declarado inline
    - o caminho de um arquivo `.csv` com duas colunas (pacote, versão),
      sem cabeçalho

A ordem das versões é sempre preservada (inline: ordem da lista; CSV:
ordem das linhas). A ordem dos pacotes não é garantida aqui: quem itera
o mapa deve ordenar explicitamente.

A primeira leitura de cada import é mantida em cache durante toda a vida
da instância; leituras seguintes retornam o mesmo mapa sem reler o CSV.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from pkgs_importer.core.exceptions import PackagesSourceError

logger = logging.getLogger(__name__)

PackagesMap = Dict[str, List[str]]


def _load_csv(path: Path, import_name: str) -> PackagesMap:
    if not path.exists():
        raise PackagesSourceError(
            f"packages csv file of import {import_name!r} not found: {path}",
            details={"import": import_name, "path": str(path)},
        )

    packages: PackagesMap = {}
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        try:
            for record in reader:
                if not record:
                    continue
                if len(record) != 2:
                    raise PackagesSourceError(
                        f"line {reader.line_num} of {path} has {len(record)} field(s), expected 2 (package, version)",
                        details={"import": import_name, "path": str(path), "line": reader.line_num},
                    )
                name, version = record
                packages.setdefault(name, []).append(version)
        except csv.Error as e:
            raise PackagesSourceError(
                f"malformed packages csv file {path}: {e}",
                details={"import": import_name, "path": str(path), "line": reader.line_num},
            ) from e

    return packages


def _from_mapping(value: Mapping[Any, Any], import_name: str) -> PackagesMap:
    packages: PackagesMap = {}
    for name, versions in value.items():
        if versions is None:
            packages[str(name)] = []
        elif isinstance(versions, (list, tuple)):
            packages[str(name)] = [str(v) for v in versions]
        elif isinstance(versions, Mapping):
            raise PackagesSourceError(
                f"versions of package {name!r} in import {import_name!r} must be a list",
                details={"import": import_name, "package": str(name)},
            )
        else:
            packages[str(name)] = [str(versions)]
    return packages


@dataclass
class PackagesSource:
    """Resolve e mantém em cache o mapa pacote -> versões por import."""

    raw: Mapping[str, Any]
    _cache: Dict[str, PackagesMap] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def from_config(cls, data: Mapping[Any, Any]) -> "PackagesSource":
        raw: Dict[str, Any] = {}
        for name, value in data.items():
            if isinstance(value, Mapping):
                raw[str(name)] = value.get("packages")
        return cls(raw=raw)

    def get_packages_map(self, import_name: str) -> PackagesMap:
        if import_name in self._cache:
            return self._cache[import_name]

        packages = self._resolve(import_name)
        self._cache[import_name] = packages
        logger.debug("Packages of import %r resolved: %d package(s)", import_name, len(packages))
        return packages

    def _resolve(self, import_name: str) -> PackagesMap:
        value = self.raw.get(import_name)

        if value is None:
            return {}

        if isinstance(value, str):
            if value.endswith(".csv"):
                return _load_csv(Path(value), import_name)
            raise PackagesSourceError(
                f"packages of import {import_name!r} (value {value!r}) is not a csv file path",
                details={"import": import_name, "value": value},
            )

        if isinstance(value, Mapping):
            return _from_mapping(value, import_name)

        raise PackagesSourceError(
            f"packages of import {import_name!r} must be a mapping or a csv file path, got {type(value).__name__}",
            details={"import": import_name, "value_type": type(value).__name__},
        )
