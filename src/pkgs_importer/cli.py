"""
Linha de comando `pkgs_importer`.

Lê um arquivo de configuração que descreve imports (um caminho de mão
única entre dois registries de pacotes, com credenciais e a lista de
pacotes a copiar) e gera o child pipeline de CI que executa a cópia.

Ecossistemas suportados: npm, maven, nuget, pypi.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .core.config import load_config_with_packages
from .core.config.errors import ConfigError
from .core.engine import Generator
from .core.errors import exception_to_error
from .core.exceptions import ImporterException

logger = logging.getLogger("pkgs_importer")

DEFAULT_CONFIG_FILE_PATH = "config.yml"
DEFAULT_PIPELINE_CONFIG_FILE_PATH = "child_pipeline.yml"


def _setup_logging(*, verbose: bool) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))

    root = logging.getLogger("pkgs_importer")
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.propagate = False


def _add_common_options(parser: argparse.ArgumentParser, *, with_defaults: bool) -> None:
    # Sem defaults no subcomando, para não sobrescrever os valores globais.
    def default(value):
        return value if with_defaults else argparse.SUPPRESS

    parser.add_argument(
        "-c",
        "--config",
        default=default(DEFAULT_CONFIG_FILE_PATH),
        help="Configuration file path.",
    )
    parser.add_argument(
        "-p",
        "--pipeline_config",
        default=default(DEFAULT_PIPELINE_CONFIG_FILE_PATH),
        help="Pipeline configuration file path.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Enable debug logging.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgs_importer",
        description=(
            "Generates the configuration of a CI child pipeline that imports "
            "packages between two registries (npm, maven, nuget, pypi)."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser, with_defaults=True)

    # Opções globais também são aceitas depois do subcomando.
    common = argparse.ArgumentParser(add_help=False)
    _add_common_options(common, with_defaults=False)

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("generate", parents=[common], help="Generates the pipeline config file.")
    return parser


def cmd_generate(args: argparse.Namespace) -> int:
    logger.info("Loading config %r", args.config)
    try:
        configuration, packages = load_config_with_packages(args.config)

        logger.info("Writing pipeline config file %r", args.pipeline_config)
        with open(args.pipeline_config, "w", encoding="utf-8") as sink:
            Generator(configuration=configuration, packages=packages).generate(sink)
    except (ConfigError, ImporterException, OSError) as exc:
        payload = exception_to_error(exc)
        logger.error("Error while generating the pipeline config: %s", payload.message)
        logger.debug("Error payload: %s", json.dumps(payload.to_dict(), ensure_ascii=False, sort_keys=True))
        return 1

    logger.info("Pipeline config generated!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    _setup_logging(verbose=args.verbose)

    if args.command == "generate":
        return cmd_generate(args)

    raise AssertionError(f"Unhandled command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
