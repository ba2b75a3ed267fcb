"""Taxonomia de erros da API do Contact Center.

Dois tipos chegam ao chamador:
- InvalidParameters: falha antes de qualquer IO (parâmetros ou URL).
- InvalidResponse: o servidor foi acionado mas não há resultado utilizável.

InvalidResponse se divide em NetworkError (transporte) e DecodeError
(payload), para quem quiser distinguir. Mensagens nunca carregam payload,
user_name ou mobile_api_key.
"""

from __future__ import annotations


class ApiError(Exception):
    """Erro base das operações do ApiClient."""

    code: str = "api_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


class InvalidParameters(ApiError):
    """Parâmetros não serializáveis ou URL inválida (nada foi enviado)."""

    code = "invalid_parameters"


class InvalidResponse(ApiError):
    """Resposta ausente, malformada ou sem os campos obrigatórios."""

    code = "invalid_response"


class NetworkError(InvalidResponse):
    """Falha de transporte (conexão, DNS, TLS, timeout)."""

    code = "network_error"


class DecodeError(InvalidResponse):
    """Payload não é JSON, não é objeto ou não forma o tipo de domínio."""

    code = "decode_error"
