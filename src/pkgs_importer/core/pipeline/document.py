# src/pkgs_importer/core/pipeline/document.py
"""
Modelo em memória do documento de pipeline gerado.

Este módulo define o `PipelineDocument`, a representação canônica do
arquivo de child pipeline produzido pelo Generator, e os dois tipos de
job que ele contém:

    - HiddenJob: template com a imagem e os scripts de um import,
      identificado por `.{stage}:scripts`; não é agendado diretamente
    - StandardJob: uma cópia de um par (pacote, versão), identificado por
      `{stage}:{pacote}:{versão}`, que estende o HiddenJob do seu stage
      e define apenas variáveis de ambiente

Formato serializado (YAML):

    stages:
      - import1
    .import1:scripts:
      image: node:alpine
      stage: import1
      needs: []
      script:
        - ...
    import1:package1:1.2.3:
      extends: .import1:scripts
      variables:
        PACKAGE_NAME: package1
        PACKAGE_VERSION: 1.2.3

Decisões arquiteturais:
    - `stages` preserva a ordem de inserção (ordem de geração)
    - Jobs são emitidos em ordem lexicográfica de label, independentemente
      da ordem de inserção
    - Variáveis são emitidas em ordem lexicográfica de nome
    - Colisão de label sobrescreve silenciosamente o job anterior: a
      unicidade é garantida por quem chama, via tuplas distintas
      (stage, pacote, versão)

Invariantes:
    - Labels de HiddenJob começam sempre por `.`
    - O mesmo conteúdo sempre produz exatamente os mesmos bytes

Limites explícitos:
    - Não conhece ecossistemas nem registries
    - Não escreve arquivos (apenas produz texto)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import yaml  # PyYAML

from pkgs_importer.core.exceptions import PipelineStructureError
from pkgs_importer.core.ordering import ordered_items


PACKAGE_NAME_VARIABLE = "PACKAGE_NAME"
PACKAGE_VERSION_VARIABLE = "PACKAGE_VERSION"


@dataclass(frozen=True)
class HiddenJob:
    """
    Job template de um import, reutilizado via `extends` pelos jobs reais.

    Campos:
        - label: identificador do job no documento (começa por `.`)
        - stage: stage ao qual o job pertence (nome do import)
        - image: imagem de container que provê as ferramentas do ecossistema
        - script: linhas de shell executadas por cada cópia de pacote
        - needs: sempre vazio (jobs do stage não dependem de outros stages)
    """

    label: str
    stage: str
    image: str
    script: List[str] = field(default_factory=list)
    needs: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.label.startswith("."):
            raise PipelineStructureError(
                f"error with label {self.label!r}: hidden jobs labels must start by a dot(.)",
                details={"label": self.label, "stage": self.stage},
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image": self.image,
            "stage": self.stage,
            "needs": list(self.needs),
            "script": list(self.script),
        }


@dataclass(frozen=True)
class StandardJob:
    """Job de cópia de um único par (pacote, versão)."""

    label: str
    extends: str
    variables: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extends": self.extends,
            "variables": dict(ordered_items(self.variables)),
        }


PipelineJob = Union[HiddenJob, StandardJob]


def hidden_job_label(stage: str) -> str:
    return f".{stage}:scripts"


def job_label(stage: str, package_name: str, package_version: str) -> str:
    return f"{stage}:{package_name}:{package_version}"


def package_variables(
    package_name: str,
    package_version: str,
    extra_env_vars: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    variables = {
        PACKAGE_NAME_VARIABLE: package_name,
        PACKAGE_VERSION_VARIABLE: package_version,
    }
    # extras podem sobrescrever PACKAGE_NAME/PACKAGE_VERSION
    variables.update(extra_env_vars or {})
    return variables


@dataclass
class PipelineDocument:
    """
    Documento de pipeline em construção.

    A construção é incremental (`add_stage`, `add_hidden_job`, `add_job`)
    e a serialização (`to_dict`, `to_yaml`) é pura: pode ser chamada
    quantas vezes for necessário, sempre com o mesmo resultado.
    """

    stages: List[str] = field(default_factory=list)
    jobs: Dict[str, PipelineJob] = field(default_factory=dict)

    def add_stage(self, stage: str) -> None:
        self.stages.append(stage)

    def add_hidden_job(self, stage: str, image: str, scripts: Sequence[str]) -> HiddenJob:
        job = HiddenJob(
            label=hidden_job_label(stage),
            stage=stage,
            image=image,
            script=list(scripts),
        )
        self._add(job)
        return job

    def add_job(
        self,
        stage: str,
        image: str,
        package_name: str,
        package_version: str,
        extra_env_vars: Optional[Mapping[str, str]] = None,
    ) -> StandardJob:
        """Adiciona o job de um par (pacote, versão).

        `image` não é emitido no job: a imagem efetiva é herdada do
        hidden job do stage via `extends`.
        """
        job = StandardJob(
            label=job_label(stage, package_name, package_version),
            extends=hidden_job_label(stage),
            variables=package_variables(package_name, package_version, extra_env_vars),
        )
        self._add(job)
        return job

    def _add(self, job: PipelineJob) -> None:
        self.jobs[job.label] = job

    def standard_jobs(self) -> List[StandardJob]:
        """Jobs por (pacote, versão) na ordem em que foram adicionados."""
        return [job for job in self.jobs.values() if isinstance(job, StandardJob)]

    def to_dict(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {"stages": list(self.stages)}
        for label, job in ordered_items(self.jobs):
            document[label] = job.to_dict()
        return document

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_dict(),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
