# src/pkgs_importer/core/pipeline/__init__.py
"""
# Pipeline Document - Packages Importer

Este pacote define o modelo do documento de child pipeline:

- **document**
  - `PipelineDocument`: stages ordenados + mapa label -> job
  - `HiddenJob`: template de scripts por import (label `.{stage}:scripts`)
  - `StandardJob`: job por (pacote, versão) que estende o HiddenJob

## Invariantes

- Labels são derivados deterministicamente de import, pacote e versão
- Labels de HiddenJob começam por `.`
- A serialização é estável: a mesma entrada produz os mesmos bytes
"""

from .document import (
    HiddenJob,
    PipelineDocument,
    PipelineJob,
    StandardJob,
    hidden_job_label,
    job_label,
)

__all__ = [
    "HiddenJob",
    "PipelineDocument",
    "PipelineJob",
    "StandardJob",
    "hidden_job_label",
    "job_label",
]
