"""Unit tests for the Product transfer objects."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.product_api.entities.service.product import (
    CreateProductDto,
    Product,
    ProductDto,
    UpdateProductDto,
)


class TestCreateProductDto:
    def test_accepts_camel_and_snake_case(self):
        dto = CreateProductDto.model_validate({"name": "Widget", "price": 2.5})

        assert dto.price == Decimal("2.5")
        assert dto.stock == 0
        assert dto.description is None

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            CreateProductDto.model_validate({"price": 1})

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDto(name="")

    def test_name_over_200_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDto(name="x" * 201)

    def test_description_over_1000_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            CreateProductDto(name="Widget", description="x" * 1001)

    def test_price_precision_is_limited_to_cents(self):
        with pytest.raises(ValidationError):
            CreateProductDto(name="Widget", price=Decimal("1.999"))

    def test_negative_price_is_accepted(self):
        assert CreateProductDto(name="Widget", price=-1).price == Decimal("-1")


class TestUpdateProductDto:
    def test_only_supplied_fields_are_changes(self):
        dto = UpdateProductDto.model_validate({"stock": 3, "isActive": False})

        assert dto.changes() == {"stock": 3, "is_active": False}

    def test_empty_payload_has_no_changes(self):
        assert UpdateProductDto.model_validate({}).changes() == {}

    def test_explicit_null_description_is_a_change(self):
        dto = UpdateProductDto.model_validate({"description": None})

        assert dto.changes() == {"description": None}

    @pytest.mark.parametrize("field", ["name", "price", "stock", "isActive"])
    def test_null_for_non_nullable_field_is_ignored(self, field):
        dto = UpdateProductDto.model_validate({field: None, "description": "kept"})

        assert dto.changes() == {"description": "kept"}

    def test_null_is_ignored_alongside_real_changes(self):
        dto = UpdateProductDto.model_validate({"name": None, "stock": 5})

        assert dto.changes() == {"stock": 5}

    def test_empty_name_is_still_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDto.model_validate({"name": ""})


class TestProductDto:
    def test_from_entity_and_camel_case_json(self):
        product = Product(
            id="abc", name="Widget", price=Decimal("19.99"), stock=2, is_active=False
        )

        payload = ProductDto.from_entity(product).model_dump(mode="json", by_alias=True)

        assert payload == {
            "id": "abc",
            "name": "Widget",
            "description": None,
            "price": 19.99,
            "stock": 2,
            "isActive": False,
        }
