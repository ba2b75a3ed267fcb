"""Protocolos e contratos do gateway."""

from .http_session import AsyncHttpSessionProtocol
from .json_decodable import JsonDecodable

__all__ = [
    "AsyncHttpSessionProtocol",
    "JsonDecodable",
]
