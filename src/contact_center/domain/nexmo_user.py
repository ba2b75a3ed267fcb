"""NexmoUser - usuário autenticado devolvido por /api/jwt.

O token (JWT) é credencial: nunca logar nem incluir em mensagens de erro.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NexmoUser(BaseModel):
    """Usuário do Client SDK com o JWT emitido pelo servidor."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    user_name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("user_name", "name"),
    )
    user_id: str = Field(..., min_length=1)
    token: str = Field(
        ...,
        min_length=1,
        repr=False,
        validation_alias=AliasChoices("jwt", "token"),
    )

    @classmethod
    def from_json(cls, data: Any) -> NexmoUser:
        """Constrói a partir do objeto JSON de /api/jwt.

        Raises:
            pydantic.ValidationError: Campos ausentes ou com tipo errado.
        """
        return cls.model_validate(data)
