from __future__ import annotations

from pathlib import Path

import pytest

from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.exceptions import PackagesSourceError


FIXTURES = Path(__file__).resolve().parents[2] / "fixtures"


@pytest.mark.parametrize(
    "packages",
    [
        {},
        {"my_pkg": ["1.2.3"]},
        {"my_pkg": ["1.2.3", "3.4.5"]},
    ],
)
def test_inline_packages_are_returned_and_cached(packages):
    source = PackagesSource(raw={"import1": packages})

    first = source.get_packages_map("import1")
    assert first == packages

    # a segunda leitura vem do cache, mesmo que a origem mude
    source.raw["import1"] = {"other": ["9.9.9"]}
    assert source.get_packages_map("import1") is first


def test_missing_packages_is_empty():
    source = PackagesSource.from_config({"import1": {"type": "npm"}})
    assert source.get_packages_map("import1") == {}
    assert source.get_packages_map("unknown") == {}


def test_inline_versions_keep_given_order_and_are_strings():
    source = PackagesSource(raw={"i": {"pkg": ["2.0.0", 1.5, "1.0.0"], "single": "3.0.0"}})
    assert source.get_packages_map("i") == {"pkg": ["2.0.0", "1.5", "1.0.0"], "single": ["3.0.0"]}


def test_simple_csv():
    source = PackagesSource(raw={"import1": str(FIXTURES / "csv" / "simple.csv")})
    assert source.get_packages_map("import1") == {
        "package1": ["1.2.3"],
        "@test/package2": ["3.2.1"],
        "package3": ["2.3.5"],
    }


def test_complex_csv_accumulates_versions_in_file_order():
    source = PackagesSource(raw={"import1": str(FIXTURES / "csv" / "complex.csv")})
    assert source.get_packages_map("import1") == {
        "package1": ["1.2.3", "9.0.1", "8.4.76"],
        "@test/package2": ["3.2.1", "6.2.3"],
        "package3": ["2.3.5"],
    }


def test_csv_is_read_once(tmp_path: Path):
    csv_path = tmp_path / "packages.csv"
    csv_path.write_text("pkg,1.0.0\n", encoding="utf-8")
    source = PackagesSource(raw={"import1": str(csv_path)})

    assert source.get_packages_map("import1") == {"pkg": ["1.0.0"]}
    csv_path.unlink()
    assert source.get_packages_map("import1") == {"pkg": ["1.0.0"]}


def test_missing_csv_file_raises(tmp_path: Path):
    source = PackagesSource(raw={"import1": str(tmp_path / "doesnt_exist.csv")})
    with pytest.raises(PackagesSourceError, match="not found"):
        source.get_packages_map("import1")


def test_csv_with_wrong_column_count_raises(tmp_path: Path):
    csv_path = tmp_path / "packages.csv"
    csv_path.write_text("pkg,1.0.0\npkg,1.1.0,extra\n", encoding="utf-8")
    source = PackagesSource(raw={"import1": str(csv_path)})
    with pytest.raises(PackagesSourceError, match="line 2"):
        source.get_packages_map("import1")


def test_non_csv_string_raises():
    source = PackagesSource(raw={"import1": "testdata/test"})
    with pytest.raises(PackagesSourceError, match="is not a csv file path"):
        source.get_packages_map("import1")


def test_unexpected_value_type_raises():
    source = PackagesSource(raw={"import1": 33})
    with pytest.raises(PackagesSourceError, match="must be a mapping or a csv file path"):
        source.get_packages_map("import1")


def test_failed_lookup_is_not_cached(tmp_path: Path):
    csv_path = tmp_path / "late.csv"
    source = PackagesSource(raw={"import1": str(csv_path)})
    with pytest.raises(PackagesSourceError):
        source.get_packages_map("import1")

    csv_path.write_text("pkg,1.0.0\n", encoding="utf-8")
    assert source.get_packages_map("import1") == {"pkg": ["1.0.0"]}
