"""Configuração do pytest para o gateway do Contact Center."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import ContactCenterSettings  # noqa: E402
from contact_center.infra.http import SharedSession  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def contact_center_settings() -> ContactCenterSettings:
    """Settings apontando para um servidor fictício."""
    return ContactCenterSettings(
        api_server_url="https://cc.example.com/",
        mobile_api_key="test-key",
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def session_owner_factory() -> Callable[[Handler], SharedSession]:
    """Cria SharedSession cujo transporte é um httpx.MockTransport."""

    def _factory(handler: Handler) -> SharedSession:
        return SharedSession(
            lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler))
        )

    return _factory
