"""QueuedConversation - conversa aguardando agente na fila.

Uma entrada de `conversations` em /api/queue.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueuedConversation(BaseModel):
    """Conversa de cliente na fila de atendimento."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    conversation_id: str = Field(..., min_length=1, description="ID da conversa Nexmo")
    customer_leg_id: str | None = Field(None, description="Leg da chamada do cliente")
    customer_name: str | None = None
    customer_number: str | None = None
    queued_at: datetime | None = Field(None, description="Entrada na fila")

    @classmethod
    def from_json(cls, data: Any) -> QueuedConversation:
        """Constrói a partir de um elemento de `conversations`.

        Raises:
            pydantic.ValidationError: conversation_id ausente ou campos
                com tipo errado.
        """
        return cls.model_validate(data)
