"""Rotas HTTP de itens (listagem, detalhe, cadastro e edição com validação)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse, RedirectResponse

from itemservice.api.dependencies import get_item_repository, get_settings
from itemservice.application.item_validation import ItemForm, validate_item_form
from itemservice.config.settings import Settings
from itemservice.domain.models import Item
from itemservice.domain.protocols.item_repository import ItemRepositoryProtocol
from itemservice.observability.logging import get_logger

logger = get_logger(__name__)

ITEMS_PREFIX = "/validation/v1/items"

router = APIRouter(prefix=ITEMS_PREFIX, tags=["items"])


def _dump(item: Item) -> dict[str, Any]:
    return item.model_dump(by_alias=True)


def _find_or_404(items: ItemRepositoryProtocol, item_id: int) -> Item:
    item = items.find_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="item_not_found")
    return item


def _form_errors_response(form: ItemForm, errors: dict[str, str]) -> JSONResponse:
    logger.info("item_form_rejected", extra={"fields": sorted(errors)})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": errors, "item": form.model_dump(by_alias=True)},
    )


@router.get("")
def list_items(
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> dict[str, Any]:
    """Lista todos os itens."""
    return {"items": [_dump(item) for item in items.find_all()]}


@router.get("/add")
def add_form() -> dict[str, Any]:
    """Formulário vazio de cadastro."""
    return {"item": ItemForm().model_dump(by_alias=True)}


@router.post("/add", response_model=None)
def add_item(
    form: ItemForm,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
    settings: Settings = Depends(get_settings),
) -> JSONResponse | RedirectResponse:
    """Valida e cadastra item; redireciona para o detalhe com status=true."""
    errors = validate_item_form(form, settings)
    if errors:
        return _form_errors_response(form, errors)

    saved = items.save(form.to_item())
    logger.info("item_saved", extra={"item_id": saved.id})
    return RedirectResponse(
        url=f"{ITEMS_PREFIX}/{saved.id}?status=true",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("/{item_id}")
def get_item(
    item_id: int,
    status_flag: bool = Query(False, alias="status"),
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> dict[str, Any]:
    """Detalhe do item; `status` sinaliza cadastro recém concluído."""
    return {"item": _dump(_find_or_404(items, item_id)), "status": status_flag}


@router.get("/{item_id}/edit")
def edit_form(
    item_id: int,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
) -> dict[str, Any]:
    """Formulário de edição preenchido com o item atual."""
    return {"item": _dump(_find_or_404(items, item_id))}


@router.post("/{item_id}/edit", response_model=None)
def edit_item(
    item_id: int,
    form: ItemForm,
    items: ItemRepositoryProtocol = Depends(get_item_repository),
    settings: Settings = Depends(get_settings),
) -> JSONResponse | RedirectResponse:
    """Valida e atualiza o item; id inexistente é ignorado pelo repositório."""
    errors = validate_item_form(form, settings)
    if errors:
        return _form_errors_response(form, errors)

    items.update(item_id, form.to_item())
    logger.info("item_updated", extra={"item_id": item_id})
    return RedirectResponse(
        url=f"{ITEMS_PREFIX}/{item_id}",
        status_code=status.HTTP_303_SEE_OTHER,
    )
