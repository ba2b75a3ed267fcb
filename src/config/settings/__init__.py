"""Agregador de settings do gateway.

Re-exporta settings e getters cacheados de cada módulo.
"""

from __future__ import annotations

from config.settings.base import BaseSettings, Environment, get_base_settings
from config.settings.contact_center import (
    JWT_PATH,
    QUEUE_PATH,
    WHISPER_PATH,
    ContactCenterSettings,
    get_contact_center_settings,
)

__all__ = [
    "JWT_PATH",
    "QUEUE_PATH",
    "WHISPER_PATH",
    "BaseSettings",
    "ContactCenterSettings",
    "Environment",
    "get_base_settings",
    "get_contact_center_settings",
]
