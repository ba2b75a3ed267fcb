"""Settings da API do Contact Center.

Base URL do servidor, chave mobile e timeout das requisições.
A chave nunca deve aparecer em logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from urllib.parse import urlsplit

JWT_PATH: str = "/api/jwt"
WHISPER_PATH: str = "/api/whisper"
QUEUE_PATH: str = "/api/queue"

DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class ContactCenterSettings:
    """Configurações do servidor do Contact Center.

    Attributes:
        api_server_url: URL base do servidor (ex: https://cc.example.com)
        mobile_api_key: Chave enviada em toda requisição (mobile_api_key)
        request_timeout_seconds: Timeout por requisição HTTP
    """

    api_server_url: str = ""
    mobile_api_key: str = field(default="", repr=False)
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def base_url(self) -> str:
        """URL base sem barra final (vazia se tiver query ou fragment)."""
        if _has_query_or_fragment(self.api_server_url):
            return ""
        return self.api_server_url.rstrip("/")

    @property
    def jwt_endpoint(self) -> str:
        return f"{self.base_url}{JWT_PATH}"

    @property
    def whisper_endpoint(self) -> str:
        return f"{self.base_url}{WHISPER_PATH}"

    @property
    def queue_endpoint(self) -> str:
        return f"{self.base_url}{QUEUE_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_server_url:
            errors.append("CONTACT_CENTER_API_SERVER_URL não configurado")
        elif _has_query_or_fragment(self.api_server_url):
            errors.append("CONTACT_CENTER_API_SERVER_URL não pode ter query nem fragment")

        if not self.mobile_api_key:
            errors.append("CONTACT_CENTER_MOBILE_API_KEY não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("CONTACT_CENTER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _has_query_or_fragment(url: str) -> bool:
    parts = urlsplit(url)
    return bool(parts.query or parts.fragment or url.rstrip("/").endswith(("?", "#")))


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT_SECONDS


def _load_contact_center_from_env() -> ContactCenterSettings:
    return ContactCenterSettings(
        api_server_url=os.getenv("CONTACT_CENTER_API_SERVER_URL", ""),
        mobile_api_key=os.getenv("CONTACT_CENTER_MOBILE_API_KEY", ""),
        request_timeout_seconds=_parse_timeout(
            os.getenv("CONTACT_CENTER_REQUEST_TIMEOUT_SECONDS")
        ),
    )


@lru_cache(maxsize=1)
def get_contact_center_settings() -> ContactCenterSettings:
    """Retorna instância cacheada de ContactCenterSettings."""
    return _load_contact_center_from_env()
