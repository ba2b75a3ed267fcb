"""Bootstrap - composition root do gateway."""

from contact_center.bootstrap.clients import (
    configure_observability,
    create_api_client,
    create_shared_session,
)

__all__ = [
    "configure_observability",
    "create_api_client",
    "create_shared_session",
]
