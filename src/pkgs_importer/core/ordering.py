"""
Ordenação determinística de coleções indexadas por nome.

Todo container indexado por nome (imports, pacotes, parâmetros adicionais
de credenciais, variáveis de job) é percorrido através de `ordered_keys`,
nunca pela ordem nativa de iteração do dict. Empates não existem: as
chaves são comparadas como strings, em ordem lexicográfica.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple


def ordered_keys(mapping: Mapping[str, Any], *, exclude: Iterable[str] = ()) -> List[str]:
    excluded = set(exclude)
    return sorted(k for k in mapping if k not in excluded)


def ordered_items(mapping: Mapping[str, Any], *, exclude: Iterable[str] = ()) -> List[Tuple[str, Any]]:
    return [(k, mapping[k]) for k in ordered_keys(mapping, exclude=exclude)]
