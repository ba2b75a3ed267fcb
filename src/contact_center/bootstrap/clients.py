"""Factories do composition root - sessão compartilhada e ApiClient.

A aplicação cria seus ApiClient por aqui; o ApiClient em si não conhece
nenhum global.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from config.logging import configure_logging
from config.settings import get_base_settings, get_contact_center_settings
from contact_center.infra.http import SharedSession
from contact_center.observability import get_correlation_id
from contact_center.services import ApiClient

if TYPE_CHECKING:
    from config.settings import BaseSettings, ContactCenterSettings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_shared_session() -> SharedSession:
    """Dono da sessão HTTP da aplicação (singleton).

    A sessão em si só é aberta no primeiro ApiClient criado.
    """
    settings = get_contact_center_settings()
    owner = SharedSession(timeout_seconds=settings.request_timeout_seconds)
    logger.info(
        "shared_session_owner_created",
        extra={"timeout_seconds": settings.request_timeout_seconds},
    )
    return owner


def create_api_client(
    settings: ContactCenterSettings | None = None,
    session_owner: SharedSession | None = None,
) -> ApiClient:
    """Cria ApiClient ligado à sessão compartilhada.

    Settings incompletas não impedem a criação: as chamadas falham com
    InvalidParameters antes de qualquer IO.

    Args:
        settings: Settings opcionais. Se None, carrega do ambiente.
        session_owner: Dono da sessão. Se None, usa o da aplicação.
    """
    contact_center = settings or get_contact_center_settings()
    errors = contact_center.validate()
    if errors:
        logger.warning("contact_center_settings_invalid", extra={"errors": errors})
    return ApiClient(contact_center, session_owner or create_shared_session())


def configure_observability(settings: BaseSettings | None = None) -> None:
    """Configura logging JSON com correlation_id por chamada.

    Raises:
        ValueError: Se BaseSettings.validate() reportar erros.
    """
    base = settings or get_base_settings()
    errors = base.validate()
    if errors:
        raise ValueError(f"Settings base inválidas: {'; '.join(errors)}")
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
