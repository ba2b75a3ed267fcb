"""Tipos de resultado das operações da API."""

from contact_center.domain.nexmo_user import NexmoUser
from contact_center.domain.queued_conversation import QueuedConversation
from contact_center.domain.whisper_info import WhisperInfo

__all__ = [
    "NexmoUser",
    "QueuedConversation",
    "WhisperInfo",
]
