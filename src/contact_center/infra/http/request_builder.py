"""Montagem da requisição HTTP (sem IO).

build_request valida a URL, serializa os parâmetros e devolve um
RequestDescriptor imutável, pronto para o transporte.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import httpx

from contact_center.infra.http.errors import InvalidParameters
from contact_center.infra.http.param_encoder import encode_params

logger = logging.getLogger(__name__)

REQUEST_METHOD = "POST"
JSON_CONTENT_TYPE = "application/json"
_ALLOWED_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Requisição completa: URL, método, headers e corpo."""

    url: str
    method: str
    headers: Mapping[str, str]
    body: bytes


def parse_url(url_string: str) -> httpx.URL | None:
    """Retorna a URL parseada ou None se não for http(s) absoluta com host."""
    try:
        url = httpx.URL(url_string)
    except (httpx.InvalidURL, TypeError):
        return None
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        return None
    return url


def build_request(url_string: str, params: Mapping[str, str]) -> RequestDescriptor | None:
    """Monta a requisição POST JSON para o endpoint.

    Args:
        url_string: URL absoluta do endpoint.
        params: Parâmetros do corpo (str → str).

    Returns:
        RequestDescriptor, ou None se a URL for inválida ou os parâmetros
        não puderem ser serializados.
    """
    url = parse_url(url_string)
    if url is None:
        logger.warning("request_url_invalid")
        return None

    try:
        body = encode_params(params)
    except InvalidParameters:
        logger.warning("request_params_invalid", extra={"endpoint": url.path})
        return None

    # Content-Length em bytes: difere da contagem de caracteres fora do ASCII
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Content-Length": str(len(body)),
    }
    return RequestDescriptor(
        url=str(url),
        method=REQUEST_METHOD,
        headers=MappingProxyType(headers),
        body=body,
    )
