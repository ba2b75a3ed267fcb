"""Decodificação das respostas da API em tipos de domínio.

Um perfil por operação, todos sobre o mesmo passo comum:
bytes → JSON → objeto (dict). Qualquer desvio vira DecodeError.

- decode_token: objeto inteiro → NexmoUser
- decode_whisper_info: três campos string → WhisperInfo
- decode_conversation_queue: `conversations` → list[QueuedConversation],
  descartando entradas que não formam o tipo de domínio
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from contact_center.domain import NexmoUser, QueuedConversation, WhisperInfo
from contact_center.infra.http.errors import DecodeError

if TYPE_CHECKING:
    from contact_center.protocols import JsonDecodable

logger = logging.getLogger(__name__)

T = TypeVar("T")

WHISPER_FIELDS: tuple[str, str, str] = ("conversation_id", "customer_leg_id", "agent_leg_id")
CONVERSATIONS_FIELD = "conversations"


def parse_json_object(payload: bytes | None) -> dict[str, Any]:
    """Parseia o payload e exige um objeto JSON no topo.

    Raises:
        DecodeError: Payload ausente, não-JSON ou cujo topo não é objeto.
    """
    if not payload:
        raise DecodeError("empty_payload")
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        # RecursionError: aninhamento além do limite do interpretador
        raise DecodeError("payload_not_json") from exc
    if not isinstance(data, dict):
        raise DecodeError("payload_not_object")
    return data


def decode_token(
    payload: bytes | None,
    user_type: JsonDecodable[T] = NexmoUser,  # type: ignore[assignment]
) -> T:
    """Perfil de /api/jwt: o objeto inteiro forma o usuário."""
    data = parse_json_object(payload)
    try:
        return user_type.from_json(data)
    except (ValueError, TypeError) as exc:
        raise DecodeError("user_invalid") from exc


def decode_whisper_info(payload: bytes | None) -> WhisperInfo:
    """Perfil de /api/whisper: os três IDs devem ser strings."""
    data = parse_json_object(payload)
    values = [data.get(field) for field in WHISPER_FIELDS]
    if not all(isinstance(value, str) for value in values):
        missing = [f for f, v in zip(WHISPER_FIELDS, values) if not isinstance(v, str)]
        logger.debug("whisper_fields_invalid", extra={"fields": missing})
        raise DecodeError("whisper_fields_invalid")
    return WhisperInfo(*values)


def decode_conversation_queue(
    payload: bytes | None,
    item_type: JsonDecodable[T] = QueuedConversation,  # type: ignore[assignment]
) -> list[T]:
    """Perfil de /api/queue.

    `conversations` precisa ser lista de objetos; uma entrada que não
    forma o tipo de domínio é descartada sem falhar a fila inteira.
    """
    data = parse_json_object(payload)
    entries = data.get(CONVERSATIONS_FIELD)
    if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
        raise DecodeError("conversations_invalid")

    conversations: list[T] = []
    for index, entry in enumerate(entries):
        try:
            conversations.append(item_type.from_json(entry))
        except (ValueError, TypeError):
            logger.debug("queued_conversation_dropped", extra={"index": index})

    if len(conversations) < len(entries):
        logger.info(
            "queued_conversations_filtered",
            extra={"received": len(entries), "kept": len(conversations)},
        )
    return conversations
