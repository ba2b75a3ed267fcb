"""Pipeline HTTP: parâmetros → requisição → transporte → decodificação."""

from contact_center.infra.http.errors import (
    ApiError,
    DecodeError,
    InvalidParameters,
    InvalidResponse,
    NetworkError,
)
from contact_center.infra.http.param_encoder import encode_params
from contact_center.infra.http.request_builder import RequestDescriptor, build_request
from contact_center.infra.http.response_decoder import (
    decode_conversation_queue,
    decode_token,
    decode_whisper_info,
    parse_json_object,
)
from contact_center.infra.http.shared_session import SharedSession, build_async_client

__all__ = [
    "ApiError",
    "DecodeError",
    "InvalidParameters",
    "InvalidResponse",
    "NetworkError",
    "RequestDescriptor",
    "SharedSession",
    "build_async_client",
    "build_request",
    "decode_conversation_queue",
    "decode_token",
    "decode_whisper_info",
    "encode_params",
    "parse_json_object",
]
