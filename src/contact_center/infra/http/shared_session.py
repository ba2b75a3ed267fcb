"""Dono da sessão HTTP compartilhada (httpx.AsyncClient).

Uma única sessão atende todos os ApiClient do processo. Ela é criada na
primeira aquisição (sob lock, então duas aquisições simultâneas nunca
criam duas sessões) e fechada quando o último usuário a libera.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import httpx

from config.settings.contact_center import DEFAULT_REQUEST_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from collections.abc import Callable

    from contact_center.protocols import AsyncHttpSessionProtocol

logger = logging.getLogger(__name__)


def build_async_client(
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient padrão do gateway.

    Sem retries nem políticas extras: timeouts e pool são os do httpx,
    apenas o timeout total vem das settings.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds))


class SharedSession:
    """Sessão HTTP com contagem de referências.

    Args:
        factory: Cria a sessão na primeira aquisição. Padrão:
            build_async_client com o timeout informado.
        timeout_seconds: Timeout usado pela factory padrão.
    """

    def __init__(
        self,
        factory: Callable[[], AsyncHttpSessionProtocol] | None = None,
        *,
        timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._factory = factory or (lambda: build_async_client(timeout_seconds))
        self._lock = threading.Lock()
        self._session: AsyncHttpSessionProtocol | None = None
        self._refs = 0

    @property
    def ref_count(self) -> int:
        return self._refs

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def acquire(self) -> AsyncHttpSessionProtocol:
        """Retorna a sessão, criando-a se ainda não existe."""
        with self._lock:
            if self._session is None:
                self._session = self._factory()
                logger.info("http_session_created")
            self._refs += 1
            return self._session

    async def release(self) -> None:
        """Libera uma referência; a última fecha a sessão."""
        with self._lock:
            if self._refs == 0:
                logger.warning("http_session_release_unbalanced")
                return
            self._refs -= 1
            if self._refs > 0:
                return
            session, self._session = self._session, None

        if session is not None:
            await session.aclose()
            logger.info("http_session_closed")
