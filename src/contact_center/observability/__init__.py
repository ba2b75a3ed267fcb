"""Observabilidade - correlation_id por chamada à API.

Uso:
    from contact_center.observability import get_correlation_id, set_correlation_id
"""

from contact_center.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
