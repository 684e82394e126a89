# src/pkgs_importer/core/engine/generator.py
"""
Generator do child pipeline de importação de pacotes.

Este módulo orquestra a conversão completa:

    Configuration + PackagesSource
        → (por import, em ordem lexicográfica de nome)
            get_registry → scripts() / image_name() → HiddenJob
            → (por pacote, em ordem lexicográfica; por versão, na ordem dada)
                additional_env_vars() → StandardJob
        → YAML → sink
        → verificação do limite de tamanho

Decisões arquiteturais:
    - Imports são validados (validação cruzada) antes de qualquer script
    - Qualquer erro interrompe a geração; não há retry nem recuperação parcial
    - A imagem declarada no import tem precedência sobre a do ecossistema
    - O documento é escrito no sink antes da verificação de tamanho: um
      documento grande demais fica escrito e a falha é reportada depois
      (quem chama decide se remove o arquivo parcial)

Invariantes:
    - Stages aparecem na ordem lexicográfica dos nomes de import
    - A mesma entrada produz exatamente os mesmos bytes
    - Cada par (import, pacote, versão) gera exatamente um StandardJob

Limites explícitos:
    - Não executa scripts
    - Não se comunica com registries
    - Não abre nem fecha o sink
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, TextIO

from pkgs_importer.core.config.hashing import compute_config_hash
from pkgs_importer.core.config.packages import PackagesSource
from pkgs_importer.core.config.schema import Configuration
from pkgs_importer.core.exceptions import OutputTooLargeError
from pkgs_importer.core.ordering import ordered_keys
from pkgs_importer.core.pipeline.document import PipelineDocument
from pkgs_importer.registries.selector import get_registry

logger = logging.getLogger(__name__)


FIVE_MEGABYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class GenerationResult:
    """Resumo de uma geração concluída."""

    stages: List[str] = field(default_factory=list)
    jobs_count: int = 0
    size_bytes: int = 0
    config_hash: str = ""


class Generator:
    """Generator canônico: configuração + pacotes -> documento de pipeline."""

    def __init__(
        self,
        *,
        configuration: Configuration,
        packages: PackagesSource,
        max_size: int = FIVE_MEGABYTES,
    ):
        self.configuration = configuration
        self.packages = packages
        self.max_size = max_size

    def build_pipeline(self) -> PipelineDocument:
        """
        Constrói o documento em memória, sem serializar.

        Raises:
            ImportValidationError: Import inválido (validação cruzada ou do ecossistema).
            UnknownRegistryTypeError: Tipo de import sem registry.
            PackagesSourceError: Falha ao obter pacotes/versões de um import.
            PipelineStructureError: Violação estrutural do documento.
        """
        imports = self.configuration.imports
        import_names = ordered_keys(imports)

        for import_name in import_names:
            imports[import_name].validate(import_name)

        pipeline = PipelineDocument()
        for import_name in import_names:
            pkgs_import = imports[import_name]
            pipeline.add_stage(import_name)

            registry = get_registry(pkgs_import, import_name, self.packages)
            scripts = registry.scripts()
            image = pkgs_import.image or registry.image_name()
            pipeline.add_hidden_job(import_name, image, scripts)

            packages_map = self.packages.get_packages_map(import_name)
            jobs_count = 0
            for package_name in ordered_keys(packages_map):
                for package_version in packages_map[package_name]:
                    pipeline.add_job(
                        import_name,
                        image,
                        package_name,
                        package_version,
                        registry.additional_env_vars(package_name, package_version),
                    )
                    jobs_count += 1

            logger.info(
                "Import %r (%s, image %s): %d package version(s)",
                import_name,
                pkgs_import.type,
                image,
                jobs_count,
            )

        return pipeline

    def generate(self, sink: TextIO) -> GenerationResult:
        """
        Gera o documento, escreve no sink e verifica o limite de tamanho.

        Raises:
            OutputTooLargeError: Se o documento escrito atingir `max_size` bytes.
            (além das exceções de `build_pipeline`)
        """
        pipeline = self.build_pipeline()
        content = pipeline.to_yaml()
        sink.write(content)

        size = len(content.encode("utf-8"))
        self.validate_size(size)

        result = GenerationResult(
            stages=list(pipeline.stages),
            jobs_count=len(pipeline.standard_jobs()),
            size_bytes=size,
            config_hash=compute_config_hash(self.configuration.to_dict()),
        )
        logger.info(
            "Pipeline document generated: %d stage(s), %d job(s), %d bytes",
            len(result.stages),
            result.jobs_count,
            result.size_bytes,
        )
        return result

    def validate_size(self, size: int) -> None:
        if size >= self.max_size:
            raise OutputTooLargeError(
                f"the generated config file is {size} bytes which is over the limit "
                f"({self.max_size} bytes) for the CI engine",
                details={"size_bytes": size, "max_size_bytes": self.max_size},
                hint="Divida os imports em mais de uma configuração.",
            )
