# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Packages Importer.

Garantem apenas que o pacote é importável e expõe sua API pública.

Limites explícitos:
    - Não testar lógica de negócio
    - Não acumular asserts funcionais
"""


def test_smoke():
    import pkgs_importer

    assert pkgs_importer.__version__
    assert set(pkgs_importer.__all__) >= {"Generator", "PackagesSource", "PipelineDocument", "get_registry"}
