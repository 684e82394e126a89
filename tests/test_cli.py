# tests/test_cli.py
"""
Testes da linha de comando `pkgs_importer generate`.

Invariantes:
    - Sucesso retorna 0 e escreve o arquivo de pipeline
    - Qualquer erro retorna 1 e é reportado no log, sem traceback
"""

import logging
from pathlib import Path

import pytest
import yaml

from pkgs_importer.cli import (
    DEFAULT_CONFIG_FILE_PATH,
    DEFAULT_PIPELINE_CONFIG_FILE_PATH,
    build_parser,
    main,
)


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("pkgs_importer")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_parser_defaults():
    args = build_parser().parse_args(["generate"])
    assert args.command == "generate"
    assert args.config == DEFAULT_CONFIG_FILE_PATH == "config.yml"
    assert args.pipeline_config == DEFAULT_PIPELINE_CONFIG_FILE_PATH == "child_pipeline.yml"
    assert args.verbose is False


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_generate_writes_pipeline_file(tmp_path: Path, single_import_yaml: str):
    config_path = tmp_path / "config.yml"
    config_path.write_text(single_import_yaml, encoding="utf-8")
    output_path = tmp_path / "child_pipeline.yml"

    code = main(["-c", str(config_path), "-p", str(output_path), "generate"])

    assert code == 0
    document = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert document["stages"] == ["import1"]
    assert "import1:package1:1.2.3" in document


def test_generate_with_defaults_in_working_directory(tmp_path: Path, monkeypatch, single_import_yaml: str):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yml").write_text(single_import_yaml, encoding="utf-8")

    assert main(["generate"]) == 0
    assert (tmp_path / "child_pipeline.yml").exists()


def test_missing_config_returns_error(tmp_path: Path, capsys):
    code = main(["--config", str(tmp_path / "missing.yml"), "--pipeline_config", str(tmp_path / "out.yml"), "generate"])

    assert code == 1
    assert not (tmp_path / "out.yml").exists()
    assert "Error while generating the pipeline config" in capsys.readouterr().err


def test_invalid_import_returns_error(tmp_path: Path):
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "import1:\n"
        "  type: maven\n"
        "  source:\n"
        "    url: https://repo.test/maven2\n"
        "  destination:\n"
        "    url: https://destination.test/maven\n"
        "    credentials:\n"
        "      token: t\n",
        encoding="utf-8",
    )
    output_path = tmp_path / "out.yml"

    assert main(["-c", str(config_path), "-p", str(output_path), "generate"]) == 1


def test_options_are_accepted_after_the_command(tmp_path: Path, single_import_yaml: str):
    config_path = tmp_path / "config.yml"
    config_path.write_text(single_import_yaml, encoding="utf-8")
    output_path = tmp_path / "out.yml"

    code = main(["generate", "-c", str(config_path), "-p", str(output_path)])

    assert code == 0
    assert yaml.safe_load(output_path.read_text(encoding="utf-8"))["stages"] == ["import1"]


def test_options_after_the_command_override_global_ones():
    args = build_parser().parse_args(["-c", "global.yml", "generate", "--pipeline_config", "out.yml", "-v"])
    assert args.config == "global.yml"
    assert args.pipeline_config == "out.yml"
    assert args.verbose is True

    args = build_parser().parse_args(["-c", "global.yml", "generate", "-c", "local.yml"])
    assert args.config == "local.yml"
    assert args.pipeline_config == DEFAULT_PIPELINE_CONFIG_FILE_PATH
    assert args.verbose is False
