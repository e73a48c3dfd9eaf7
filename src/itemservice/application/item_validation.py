"""Validação manual dos formulários de item.

Os erros são acumulados em um dicionário campo -> mensagem, no formato
consumido pela camada HTTP. `globalError` guarda regras que envolvem mais
de um campo.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from itemservice.config.settings import Settings
from itemservice.domain.models import Item

GLOBAL_ERROR = "globalError"


class ItemForm(BaseModel):
    """Dados do formulário de item; campos ausentes chegam como None."""

    model_config = ConfigDict(populate_by_name=True)

    item_name: str | None = Field(default=None, alias="itemName")
    price: int | None = None
    quantity: int | None = None

    def to_item(self) -> Item:
        """Converte para Item (usar apenas depois de validar)."""
        return Item(item_name=self.item_name, price=self.price, quantity=self.quantity)


def validate_item_form(form: ItemForm, settings: Settings) -> dict[str, str]:
    """Valida o formulário e retorna os erros por campo (vazio = OK)."""
    errors: dict[str, str] = {}

    if not form.item_name or not form.item_name.strip():
        errors["itemName"] = "Nome do item é obrigatório."

    if form.price is None or not (settings.item_price_min <= form.price <= settings.item_price_max):
        errors["price"] = (
            f"Preço deve estar entre {settings.item_price_min:,} "
            f"e {settings.item_price_max:,}."
        )

    if form.quantity is None or not (0 <= form.quantity <= settings.item_quantity_max):
        errors["quantity"] = f"Quantidade máxima permitida é {settings.item_quantity_max:,}."

    # Regra combinada: só faz sentido com ambos os valores presentes
    if form.price is not None and form.quantity is not None:
        total = form.price * form.quantity
        if total < settings.item_min_total_price:
            errors[GLOBAL_ERROR] = (
                f"Preço * quantidade deve ser no mínimo {settings.item_min_total_price:,}. "
                f"Valor atual = {total}"
            )

    return errors
