"""Modelos de domínio (contratos principais)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Item de inventário.

    O `id` é atribuído pelo repositório no `save` e nunca mais muda.
    Validação de campos é responsabilidade de quem chama o repositório.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    item_name: str = Field(alias="itemName")
    price: int
    quantity: int


class Member(BaseModel):
    """Membro com credenciais em texto plano.

    Placeholder para o conceito de login; não é um mecanismo de segurança.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    login_id: str = Field(alias="loginId")
    password: str
    name: str


class MemberView(BaseModel):
    """Projeção pública de Member (sem senha)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    login_id: str = Field(alias="loginId")
    name: str

    @classmethod
    def from_member(cls, member: Member) -> MemberView:
        return cls(id=member.id, login_id=member.login_id, name=member.name)
