"""Testes do builder de requisição."""

from __future__ import annotations

import json

import pytest

from contact_center.infra.http import RequestDescriptor, build_request, encode_params

VALID_URL = "https://cc.example.com/api/jwt"


class TestBuildRequestInvalidUrl:
    """URL inválida sempre resulta em None."""

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "/api/jwt",
            "cc.example.com/api/jwt",
            "ftp://cc.example.com/api/jwt",
            "https://",
        ],
    )
    @pytest.mark.parametrize("params", [{}, {"mobile_api_key": "k"}])
    def test_invalid_url_returns_none(self, url: str, params: dict[str, str]) -> None:
        assert build_request(url, params) is None


class TestBuildRequest:
    """Testes de build_request com URL válida."""

    def test_descriptor_shape(self) -> None:
        """POST, JSON e corpo serializado."""
        params = {"user_name": "ana", "mobile_api_key": "k"}

        request = build_request(VALID_URL, params)

        assert isinstance(request, RequestDescriptor)
        assert request.method == "POST"
        assert request.url == VALID_URL
        assert request.headers["Content-Type"] == "application/json"
        assert request.body == encode_params(params)
        assert json.loads(request.body) == params

    @pytest.mark.parametrize(
        "params",
        [
            {},
            {"mobile_api_key": "k"},
            {"user_name": "José", "mobile_api_key": "k"},
            {"user_name": "🙂", "mobile_api_key": "k"},
        ],
    )
    def test_content_length_is_body_byte_length(self, params: dict[str, str]) -> None:
        """Content-Length conta bytes do corpo, inclusive fora do ASCII."""
        request = build_request(VALID_URL, params)

        assert request is not None
        assert request.headers["Content-Length"] == str(len(request.body))

    def test_content_length_differs_from_char_count_for_non_ascii(self) -> None:
        """Para 'é' o corpo tem mais bytes que caracteres."""
        request = build_request(VALID_URL, {"user_name": "é"})

        assert request is not None
        text = request.body.decode("utf-8")
        assert int(request.headers["Content-Length"]) == len(text) + 1

    def test_invalid_params_returns_none(self) -> None:
        """Falha do encoder propaga como None."""
        assert build_request(VALID_URL, {"user_name": "\ud800"}) is None

    def test_descriptor_is_immutable(self) -> None:
        """Descriptor e headers não aceitam mutação."""
        request = build_request(VALID_URL, {"mobile_api_key": "k"})
        assert request is not None

        with pytest.raises(AttributeError):
            request.body = b"{}"  # type: ignore[misc]
        with pytest.raises(TypeError):
            request.headers["Content-Type"] = "text/plain"  # type: ignore[index]

    def test_http_scheme_and_port_accepted(self) -> None:
        request = build_request("http://localhost:3000/api/queue", {})
        assert request is not None
        assert request.url == "http://localhost:3000/api/queue"
