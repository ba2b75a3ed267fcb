"""Testes dos perfis de decodificação de resposta."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from contact_center.domain import NexmoUser, QueuedConversation, WhisperInfo
from contact_center.infra.http import (
    DecodeError,
    InvalidResponse,
    decode_conversation_queue,
    decode_token,
    decode_whisper_info,
    parse_json_object,
)


def _payload(data: Any) -> bytes:
    return json.dumps(data).encode("utf-8")


VALID_USER = {"user_name": "ana", "user_id": "USR-1", "jwt": "eyJ.a.b"}
VALID_CONVERSATION = {"conversation_id": "CON-1", "customer_name": "Maria"}


class TestParseJsonObject:
    """Passo comum a todos os perfis."""

    @pytest.mark.parametrize(
        "payload",
        [None, b"", b"not json", b"{invalid}", b"\xff\xfe\x00", b"[1, 2]", b'"text"', b"42", b"null"],
    )
    def test_rejects_non_object(self, payload: bytes | None) -> None:
        with pytest.raises(DecodeError):
            parse_json_object(payload)

    def test_accepts_object(self) -> None:
        assert parse_json_object(b'{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("payload", [b"[" * 200_000, b'{"a":' * 200_000])
    def test_deeply_nested_payload_is_decode_error(self, payload: bytes) -> None:
        """Aninhamento além do limite de recursão vira DecodeError."""
        with pytest.raises(DecodeError):
            parse_json_object(payload)

    def test_deeply_nested_payload_fails_every_profile(self) -> None:
        with pytest.raises(InvalidResponse):
            decode_whisper_info(b"[" * 200_000)


class TestNonJsonEveryProfile:
    """Bytes não-JSON falham em todos os perfis com InvalidResponse."""

    @pytest.mark.parametrize(
        "decode",
        [decode_token, decode_whisper_info, decode_conversation_queue],
    )
    def test_non_json_raises_invalid_response(self, decode: Any) -> None:
        with pytest.raises(InvalidResponse):
            decode(b"<html>502 Bad Gateway</html>")


class TestDecodeToken:
    """Perfil de /api/jwt."""

    def test_valid_user(self) -> None:
        user = decode_token(_payload(VALID_USER))

        assert isinstance(user, NexmoUser)
        assert user.user_name == "ana"
        assert user.user_id == "USR-1"
        assert user.token == "eyJ.a.b"

    def test_missing_field_raises(self) -> None:
        with pytest.raises(DecodeError):
            decode_token(_payload({"user_name": "ana", "user_id": "USR-1"}))

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(DecodeError):
            decode_token(_payload({**VALID_USER, "user_id": 12}))

    def test_custom_user_type(self) -> None:
        """Tipo injetado recebe o objeto inteiro."""

        class Echo:
            @classmethod
            def from_json(cls, data: Any) -> dict[str, Any]:
                return data

        assert decode_token(b'{"x": "y"}', Echo) == {"x": "y"}


class TestDecodeWhisperInfo:
    """Perfil de /api/whisper."""

    def test_valid_triple(self) -> None:
        payload = b'{"conversation_id":"c1","customer_leg_id":"l1","agent_leg_id":"a1"}'

        info = decode_whisper_info(payload)

        assert info == ("c1", "l1", "a1")
        assert isinstance(info, WhisperInfo)
        assert info.agent_leg_id == "a1"

    def test_missing_fields_raise(self) -> None:
        with pytest.raises(InvalidResponse):
            decode_whisper_info(b'{"conversation_id":"c1"}')

    def test_non_string_field_raises(self) -> None:
        payload = _payload({"conversation_id": "c1", "customer_leg_id": "l1", "agent_leg_id": 7})
        with pytest.raises(DecodeError):
            decode_whisper_info(payload)

    def test_extra_fields_ignored(self) -> None:
        payload = _payload(
            {"conversation_id": "c1", "customer_leg_id": "l1", "agent_leg_id": "a1", "x": 1}
        )
        assert decode_whisper_info(payload) == ("c1", "l1", "a1")


class TestDecodeConversationQueue:
    """Perfil de /api/queue."""

    def test_drops_malformed_entries(self) -> None:
        """Entrada malformada é descartada; as válidas seguem na ordem."""
        second = {"conversation_id": "CON-2"}
        payload = _payload({"conversations": [VALID_CONVERSATION, {"customer_name": "x"}, second]})

        conversations = decode_conversation_queue(payload)

        assert [c.conversation_id for c in conversations] == ["CON-1", "CON-2"]
        assert all(isinstance(c, QueuedConversation) for c in conversations)

    def test_empty_list_is_success(self) -> None:
        assert decode_conversation_queue(b'{"conversations": []}') == []

    def test_all_malformed_yields_empty_list(self) -> None:
        payload = _payload({"conversations": [{}, {"conversation_id": 5}]})
        assert decode_conversation_queue(payload) == []

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"conversations": None},
            {"conversations": {"conversation_id": "CON-1"}},
            {"conversations": "CON-1"},
            {"conversations": [VALID_CONVERSATION, "CON-2"]},
        ],
    )
    def test_wrong_shape_raises(self, data: dict[str, Any]) -> None:
        with pytest.raises(DecodeError):
            decode_conversation_queue(_payload(data))

    def test_filtering_is_logged_without_payload(self, caplog: pytest.LogCaptureFixture) -> None:
        payload = _payload({"conversations": [VALID_CONVERSATION, {"customer_name": "Maria"}]})

        with caplog.at_level(logging.DEBUG, logger="contact_center.infra.http.response_decoder"):
            decode_conversation_queue(payload)

        messages = [r.getMessage() for r in caplog.records]
        assert "queued_conversation_dropped" in messages
        assert "queued_conversations_filtered" in messages
        assert "Maria" not in caplog.text
