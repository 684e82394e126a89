# tests/registries/test_nuget_registry.py
"""Testes do registry NuGet: sources, flags adicionais e credenciais."""

import pytest

from pkgs_importer.core.config.schema import BASE64_TOKEN_KEY
from pkgs_importer.core.exceptions import InvalidCredentialsError
from pkgs_importer.registries.nuget import NugetRegistry


def test_scripts(import_factory):
    pkgs_import = import_factory("nuget", destination_params={"username": "deployer"})
    scripts = NugetRegistry(pkgs_import, "import1").scripts()

    assert scripts == [
        "nuget sources Remove -Name nuget.org",
        'nuget sources Add -Name pkgs_importer_source -Source "http://source.test"',
        "mkdir _pkg",
        "nuget install $PACKAGE_NAME -Version $PACKAGE_VERSION -NoCache -DirectDownload "
        "-NonInteractive -DependencyVersion Ignore -Source pkgs_importer_source -OutputDirectory _pkg",
        "nuget sources Remove -Name pkgs_importer_source",
        "cd _pkg && cd $(ls -d */|head -n 1)",
        'nuget sources Add -Name pkgs_importer_destination -Source "http://destination.test"'
        ' -password "dest-token" -username deployer',
        "nuget push $(ls *.nupkg | head -n 1) -Source pkgs_importer_destination",
    ]


def test_additional_flags_are_sorted_and_skip_base64_marker(import_factory):
    pkgs_import = import_factory(
        "nuget",
        destination_params={"username": "deployer", "StorePasswordInClearText": "", BASE64_TOKEN_KEY: "1"},
    )
    line = NugetRegistry(pkgs_import, "import1").scripts()[6]
    assert line.endswith(' -password "dest-token" -StorePasswordInClearText  -username deployer')
    assert BASE64_TOKEN_KEY not in line


def test_image(import_factory):
    pkgs_import = import_factory("nuget", destination_params={"username": "deployer"})
    assert NugetRegistry(pkgs_import, "import1").image_name() == "mono:6"


def test_token_without_username_is_rejected(import_factory, packages_factory):
    pkgs_import = import_factory("nuget")
    with pytest.raises(InvalidCredentialsError, match="NuGet credentials require a token and a username"):
        NugetRegistry.build(pkgs_import, "import1", packages_factory())
