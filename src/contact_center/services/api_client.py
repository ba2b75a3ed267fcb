"""ApiClient - operações da API do Contact Center.

Cada operação é uma coroutine que resolve exatamente uma vez:
retorna o tipo de domínio ou levanta um ApiError.

Ciclo de uma chamada:
    Idle → (build_request) → Sent → (decoder) → Succeeded | Failed

Falha antes do envio (URL ou parâmetros inválidos) levanta
InvalidParameters sem IO. Falha de transporte levanta NetworkError;
payload inutilizável levanta DecodeError (ambos InvalidResponse).
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from config.settings.contact_center import JWT_PATH, QUEUE_PATH, WHISPER_PATH
from contact_center.infra.http import (
    DecodeError,
    InvalidParameters,
    NetworkError,
    build_request,
    decode_conversation_queue,
    decode_token,
    decode_whisper_info,
)
from contact_center.observability import reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from config.settings import ContactCenterSettings
    from contact_center.domain import NexmoUser, QueuedConversation, WhisperInfo
    from contact_center.infra.http import RequestDescriptor, SharedSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiClient:
    """Cliente das três operações da API sobre a sessão compartilhada.

    Adquire a sessão ao ser criado e a libera em aclose() (ou na saída
    do `async with`).

    Args:
        settings: URL do servidor, mobile_api_key e timeout.
        session_owner: Dono da sessão HTTP compartilhada.
    """

    def __init__(
        self,
        settings: ContactCenterSettings,
        session_owner: SharedSession,
    ) -> None:
        self._settings = settings
        self._session_owner = session_owner
        self._session = session_owner.acquire()
        self._closed = False

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Libera a sessão compartilhada (idempotente)."""
        if self._closed:
            return
        self._closed = True
        await self._session_owner.release()

    async def fetch_token(self, user_name: str) -> NexmoUser:
        """Emite o JWT do usuário (/api/jwt)."""
        params = {
            "user_name": user_name,
            "mobile_api_key": self._settings.mobile_api_key,
        }
        return await self._call(
            "fetch_token", self._settings.jwt_endpoint, JWT_PATH, params, decode_token
        )

    async def fetch_whisper_info(self) -> WhisperInfo:
        """Busca conversa e legs para o whisper (/api/whisper)."""
        params = {"mobile_api_key": self._settings.mobile_api_key}
        return await self._call(
            "fetch_whisper_info",
            self._settings.whisper_endpoint,
            WHISPER_PATH,
            params,
            decode_whisper_info,
        )

    async def fetch_conversation_queue(self) -> list[QueuedConversation]:
        """Lista as conversas na fila (/api/queue)."""
        params = {"mobile_api_key": self._settings.mobile_api_key}
        return await self._call(
            "fetch_conversation_queue",
            self._settings.queue_endpoint,
            QUEUE_PATH,
            params,
            decode_conversation_queue,
        )

    async def _call(
        self,
        operation: str,
        url: str,
        path: str,
        params: Mapping[str, str],
        decode: Callable[[bytes | None], T],
    ) -> T:
        token = set_correlation_id()
        log_extra: dict[str, Any] = {"operation": operation, "endpoint": path}
        try:
            if self._closed:
                logger.warning("api_client_closed", extra=log_extra)
                raise InvalidParameters("client_closed")

            request = build_request(url, params)
            if request is None:
                logger.warning("api_request_rejected", extra=log_extra)
                raise InvalidParameters(f"{operation}_request_invalid")

            start = time.perf_counter()
            try:
                payload = await self._send(request, log_extra)
                result = decode(payload)
            except (NetworkError, DecodeError) as exc:
                logger.warning(
                    "api_request_failed",
                    extra={**log_extra, "error": exc.code, "latency_ms": _elapsed_ms(start)},
                )
                raise

            logger.info(
                "api_request_succeeded",
                extra={**log_extra, "latency_ms": _elapsed_ms(start)},
            )
            return result
        finally:
            reset_correlation_id(token)

    async def _send(self, request: RequestDescriptor, log_extra: dict[str, Any]) -> bytes:
        logger.debug("api_request_sent", extra=log_extra)
        try:
            response = await self._session.request(
                request.method,
                request.url,
                content=request.body,
                headers=dict(request.headers),
            )
        except httpx.HTTPError as exc:
            raise NetworkError(f"transport_{type(exc).__name__}") from exc

        if response.status_code >= 400:
            # Status não é interpretado: o corpo ainda passa pelo decoder
            logger.warning(
                "api_response_error_status",
                extra={**log_extra, "status_code": response.status_code},
            )
        return response.content


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
