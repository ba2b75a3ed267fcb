"""Formatters de logging estruturado do gateway.

Todo log sai como JSON com os campos:
- asctime
- level
- logger
- message
- correlation_id
- service

Nunca logar payloads de resposta, user_name, mobile_api_key ou JWT.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa para que o format string seja determinístico
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado pelo handler raiz.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "INFO",
            "logger": "contact_center.services.api_client",
            "message": "api_request_succeeded",
            "correlation_id": "0b8f...",
            "service": "contact_center",
            "operation": "fetch_whisper_info"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
