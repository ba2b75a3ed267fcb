"""Contrato mínimo da sessão HTTP usada pelo ApiClient.

httpx.AsyncClient satisfaz este protocolo; testes podem injetar um
AsyncClient com httpx.MockTransport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


class AsyncHttpSessionProtocol(Protocol):
    """Sessão capaz de executar uma requisição e devolver a resposta."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...
