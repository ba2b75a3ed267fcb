"""WhisperInfo - identificadores para o whisper de uma chamada."""

from __future__ import annotations

from typing import NamedTuple


class WhisperInfo(NamedTuple):
    """Conversa e legs (cliente e agente) devolvidos por /api/whisper."""

    conversation_id: str
    customer_leg_id: str
    agent_leg_id: str
