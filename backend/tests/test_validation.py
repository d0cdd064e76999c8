from decimal import Decimal

import pytest
from pydantic import ValidationError

from store_admin.core.validation import MESSAGES, FieldValidator
from store_admin.schemas.color import ColorIn
from store_admin.schemas.product import ProductIn
from store_admin.schemas.size import SizeIn
from store_admin.schemas.store import StoreIn

PRODUCT = {
    "name": "Camisola",
    "price": "19.99",
    "categoryId": "c1",
    "sizeId": "s1",
    "colorId": "k1",
    "images": [{"url": "https://img"}],
}


def first_message(model, data, locale="en"):
    with pytest.raises(ValidationError) as ctx:
        model.model_validate(data)
    return FieldValidator.for_locale(locale).describe_request_error(ctx.value.errors()[0])


def test_first_failing_field_wins():
    message = first_message(SizeIn, {"name": "ab", "value": "blue!"})

    assert message == "name must contain at least 3 character(s)"


def test_accented_text_is_allowed():
    size = SizeIn.model_validate({"name": "Médio açúcar", "value": "M"})

    assert size.name == "Médio açúcar"


@pytest.mark.parametrize(
    "name, message",
    [
        (None, "name is required"),
        ("", "name is required"),
        (42, "name is invalid"),
        ("x" * 31, "name must contain at most 30 character(s)"),
        ("Médio_", "name must contain only letters and numbers"),
        ("Médio\n", "name must contain only letters and numbers"),
        ("Médio ", "name cannot start or end with whitespace"),
    ],
)
def test_size_name_violations(name, message):
    assert first_message(SizeIn, {"name": name, "value": "M"}) == message


def test_hex_pattern_has_its_own_message():
    message = first_message(ColorIn, {"name": "Azul", "value": "#add6e"})

    assert message == "value must be a valid HEX code (#add6e8)"


@pytest.mark.parametrize(
    "price, message",
    [
        (0, "price must be greater than 0"),
        (-1, "price must be greater than 0"),
        ("abc", "price is invalid"),
        (None, "price is required"),
        (0.001, "price must have at most 2 decimal places"),
        ("12345678901", "price is too large"),
    ],
)
def test_price_violations(price, message):
    assert first_message(ProductIn, {**PRODUCT, "price": price}) == message


def test_price_with_two_places_is_kept_exactly():
    product = ProductIn.model_validate({**PRODUCT, "price": 0.01})

    assert product.price == Decimal("0.01")


@pytest.mark.parametrize(
    "images, message",
    [
        ([], "images must contain at least one item"),
        ([{"url": ""}], "images is invalid"),
        ([{}], "images is invalid"),
        ("https://img", "images is invalid"),
    ],
)
def test_image_list_violations(images, message):
    assert first_message(ProductIn, {**PRODUCT, "images": images}) == message


def test_catalogue_is_chosen_at_construction():
    message = first_message(StoreIn, {"name": " Azul"}, locale="pt")

    assert message == "name não pode conter espaços em branco no início ou no final"


def test_incomplete_catalogue_is_rejected():
    partial = dict(MESSAGES["en"])
    partial.pop("hex_color")

    with pytest.raises(ValueError):
        FieldValidator(partial)


def test_unknown_locale_is_rejected():
    with pytest.raises(ValueError):
        FieldValidator.for_locale("xx")


def test_request_errors_name_the_field():
    validator = FieldValidator.for_locale("en")

    assert validator.describe_request_error({"type": "missing", "loc": ("body", "billboardId")}) == "billboardId is required"
    assert validator.describe_request_error({"type": "decimal_parsing", "loc": ("body", "price")}) == "price is invalid"
    assert validator.describe_request_error({"type": "json_invalid", "loc": ("body", 3)}) == "Invalid request body"
