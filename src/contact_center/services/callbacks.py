"""Adaptador de callbacks sobre as coroutines do ApiClient.

Para chamadores no estilo sucesso/erro:

    deliver(
        client.fetch_whisper_info(),
        on_success=lambda info: ...,
        on_error=lambda exc: ...,
    )

Exatamente um dos callbacks roda, uma única vez, por chamada. Erro fora
da taxonomia chega ao on_error como InvalidResponse. Task cancelada não
dispara callback.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from contact_center.infra.http import ApiError, InvalidResponse

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Referências fortes às tasks em voo (o event loop guarda só referências fracas)
_pending: set[asyncio.Task[None]] = set()


def deliver(
    call: Awaitable[T],
    on_success: Callable[[T], Any],
    on_error: Callable[[ApiError], Any],
) -> asyncio.Task[None]:
    """Agenda a chamada no loop corrente e entrega o resultado via callback.

    Deve ser chamada com um event loop rodando; não bloqueia o chamador.

    Returns:
        Task que termina após o callback.
    """
    task = asyncio.get_running_loop().create_task(_resolve(call, on_success, on_error))
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task


async def _resolve(
    call: Awaitable[T],
    on_success: Callable[[T], Any],
    on_error: Callable[[ApiError], Any],
) -> None:
    try:
        result = await call
    except ApiError as exc:
        _invoke(on_error, exc)
        return
    except Exception as exc:
        logger.error("api_call_unexpected_error", extra={"error_type": type(exc).__name__})
        error = InvalidResponse("unexpected_error")
        error.__cause__ = exc
        _invoke(on_error, error)
        return
    _invoke(on_success, result)


def _invoke(callback: Callable[[Any], Any], value: Any) -> None:
    try:
        callback(value)
    except Exception:
        # Falha do callback é do chamador: registra sem trocar de callback
        logger.exception("api_callback_failed")
