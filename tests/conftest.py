# tests/conftest.py
"""
Fixtures compartilhados para testes do Packages Importer.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos de configuração YAML semelhantes ao uso real
- imports e registries já tipados (npm, Maven, NuGet, PyPI)
- fontes de pacotes inline, sem filesystem

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Imports tipados são construídos diretamente, sem passar pelo loader

Limites explícitos:
    - Não substituem testes do loader
    - Não executam scripts gerados
"""

import pytest

from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.config.schema import Credentials, Import, Registry


# =====================================================
# Config loader fixtures
# =====================================================

@pytest.fixture
def single_import_yaml() -> str:
    """
    Fixture que fornece um `config.yml` com um único import npm.

    Usado por:
        - Testes do loader de config
        - Testes da CLI
    """
    return """\
import1:
  type: npm
  source:
    url: https://registry.npmjs.org
  destination:
    url: https://destination.test/api/v4/projects/1/packages/npm/
    credentials:
      token: dest-token
  packages:
    package1:
      - 1.2.3
    "@scope/package2":
      - 3.2.1
      - 3.2.2
"""


@pytest.fixture
def multiple_imports_yaml() -> str:
    """
    Fixture que fornece um `config.yml` com imports de ecossistemas diferentes,
    declarados fora de ordem lexicográfica.
    """
    return """\
zeta_pypi:
  type: pypi
  source:
    url: https://pypi.org/simple
  destination:
    url: https://destination.test/api/v4/projects/1/packages/pypi
    credentials:
      token: dest-token
      username: deployer
  packages:
    requests:
      - 2.31.0
alpha_maven:
  type: maven
  image: maven:3-eclipse-temurin-17
  source:
    url: https://repo1.maven.org/maven2
  destination:
    url: https://destination.test/api/v4/projects/1/packages/maven
    credentials:
      token: dest-token
      header_name: Private-Token
  packages:
    org.apache.commons:commons-lang3:
      - 3.12.0
      - 3.13.0:pom
"""


# =====================================================
# Typed import fixtures
# =====================================================

def make_import(
    importer_type: str,
    *,
    source_token: str = "",
    source_params=None,
    destination_token: str = "dest-token",
    destination_params=None,
    image: str = "",
    source_url: str = "http://source.test",
    destination_url: str = "http://destination.test",
) -> Import:
    return Import(
        type=importer_type,
        image=image,
        source=Registry(
            url=source_url,
            credentials=Credentials(token=source_token, additional_parameters=dict(source_params or {})),
        ),
        destination=Registry(
            url=destination_url,
            credentials=Credentials(
                token=destination_token,
                additional_parameters=dict(destination_params or {}),
            ),
        ),
    )


@pytest.fixture
def import_factory():
    """Fábrica de `Import` tipados com defaults válidos (destino autenticado)."""
    return make_import


@pytest.fixture
def packages_factory():
    """Fábrica de `PackagesSource` inline: `packages_factory(import1={"pkg": ["1.0.0"]})`."""

    def _factory(**packages_by_import) -> PackagesSource:
        return PackagesSource(raw=packages_by_import)

    return _factory
