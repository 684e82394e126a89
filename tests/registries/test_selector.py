# tests/registries/test_selector.py
"""Testes da seleção de registry pelo tipo declarado no import."""

import pytest

from pkgs_importer.core.exceptions import UnknownRegistryTypeError
from pkgs_importer.registries import get_registry, supported_types
from pkgs_importer.registries.base import ScriptBuilder
from pkgs_importer.registries.maven import MavenRegistry
from pkgs_importer.registries.npm import NpmRegistry
from pkgs_importer.registries.nuget import NugetRegistry
from pkgs_importer.registries.pypi import PypiRegistry


@pytest.mark.parametrize(
    "importer_type, registry_cls",
    [
        ("npm", NpmRegistry),
        ("maven", MavenRegistry),
        ("nuget", NugetRegistry),
        ("pypi", PypiRegistry),
    ],
)
def test_get_registry(import_factory, importer_type, registry_cls):
    pkgs_import = import_factory(importer_type, destination_params={"username": "deployer"})
    registry = get_registry(pkgs_import, "import1")
    assert isinstance(registry, registry_cls)
    assert isinstance(registry, ScriptBuilder)


def test_unknown_type(import_factory):
    with pytest.raises(UnknownRegistryTypeError, match="no registry object for type 'cargo' in import 'import1'"):
        get_registry(import_factory("cargo"), "import1")


def test_supported_types():
    assert supported_types() == ["maven", "npm", "nuget", "pypi"]
