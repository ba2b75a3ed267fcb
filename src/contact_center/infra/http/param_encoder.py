"""Serialização de parâmetros para o corpo JSON da requisição."""

from __future__ import annotations

import json
from collections.abc import Mapping

from contact_center.infra.http.errors import InvalidParameters


def encode_params(params: Mapping[str, str]) -> bytes:
    """Serializa o mapa de parâmetros como objeto JSON em UTF-8.

    A saída é canônica: chaves ordenadas e separadores compactos, então o
    mesmo mapa sempre gera os mesmos bytes.

    Args:
        params: Mapa chave → valor, ambos strings.

    Returns:
        Corpo da requisição (ex: b'{"mobile_api_key":"k","user_name":"ana"}').

    Raises:
        InvalidParameters: Se alguma chave/valor não é str ou o texto não
            pode ser codificado em UTF-8 (ex: surrogate isolado).
    """
    for key, value in params.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidParameters("params_must_be_strings")

    try:
        text = json.dumps(
            dict(params),
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
        )
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        # UnicodeEncodeError é subclasse de ValueError
        raise InvalidParameters("params_not_serializable") from exc
