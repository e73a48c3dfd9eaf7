"""Testes da validação manual do formulário de item."""

from __future__ import annotations

import pytest

from itemservice.application.item_validation import GLOBAL_ERROR, ItemForm, validate_item_form
from itemservice.config.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings()


def test_valid_form_has_no_errors(settings):
    form = ItemForm(item_name="itemA", price=10000, quantity=10)

    assert validate_item_form(form, settings) == {}


def test_empty_form_reports_every_field(settings):
    errors = validate_item_form(ItemForm(), settings)

    assert set(errors) == {"itemName", "price", "quantity"}


def test_blank_name_is_rejected(settings):
    errors = validate_item_form(ItemForm(item_name="   ", price=10000, quantity=10), settings)

    assert set(errors) == {"itemName"}


@pytest.mark.parametrize("price", [999, 1_000_001])
def test_price_out_of_range(settings, price):
    errors = validate_item_form(ItemForm(item_name="a", price=price, quantity=100), settings)

    assert "price" in errors


@pytest.mark.parametrize("price", [1_000, 1_000_000])
def test_price_limits_are_inclusive(settings, price):
    errors = validate_item_form(ItemForm(item_name="a", price=price, quantity=10), settings)

    assert "price" not in errors


def test_quantity_limit_is_inclusive(settings):
    errors = validate_item_form(ItemForm(item_name="a", price=1000, quantity=9_999), settings)

    assert "quantity" not in errors


@pytest.mark.parametrize("quantity", [10_000, -1])
def test_quantity_out_of_range(settings, quantity):
    errors = validate_item_form(ItemForm(item_name="a", price=1000, quantity=quantity), settings)

    assert "quantity" in errors


def test_total_below_minimum_is_global_error(settings):
    errors = validate_item_form(ItemForm(item_name="a", price=1000, quantity=9), settings)

    assert set(errors) == {GLOBAL_ERROR}
    assert "9000" in errors[GLOBAL_ERROR]


def test_limits_follow_settings():
    settings = Settings(item_price_min=1, item_min_total_price=0)

    errors = validate_item_form(ItemForm(item_name="a", price=5, quantity=1), settings)

    assert errors == {}


def test_form_accepts_camel_case_alias():
    form = ItemForm.model_validate({"itemName": "itemA", "price": 10000, "quantity": 10})

    item = form.to_item()

    assert item.item_name == "itemA"
    assert item.id is None
