"""Serviços de aplicação: ApiClient e entrega via callbacks."""

from contact_center.services.api_client import ApiClient
from contact_center.services.callbacks import deliver

__all__ = [
    "ApiClient",
    "deliver",
]
