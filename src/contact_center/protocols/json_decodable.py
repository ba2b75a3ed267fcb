"""Contrato dos tipos de domínio construídos a partir de JSON."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class JsonDecodable(Protocol[T_co]):
    """Tipo com construtor falível a partir de uma árvore JSON.

    from_json deve levantar ValueError (pydantic.ValidationError incluso)
    quando campos obrigatórios estão ausentes ou com tipo errado.
    """

    def from_json(self, data: Any) -> T_co: ...
