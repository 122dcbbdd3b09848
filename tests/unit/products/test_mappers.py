"""Unit tests for Product <-> DTO mappers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products import mappers
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestNullSafety:
    def test_to_dto_none(self):
        assert mappers.to_dto(None) is None

    def test_to_entity_none(self):
        assert mappers.to_entity(None) is None

    def test_update_entity_none_is_noop(self):
        product = Product(name="Widget", price=Decimal("1.00"), stock=1)
        mappers.update_entity(None, product)
        mappers.update_entity(UpdateProductDTO(name="X"), None)
        assert product.name == "Widget"


class TestToDto:
    def test_copies_every_field(self):
        product = Product.objects.create(
            name="Widget", description="Blue", price=Decimal("19.99"), stock=7
        )

        dto = mappers.to_dto(product)

        assert dto.id == product.id
        assert dto.name == "Widget"
        assert dto.description == "Blue"
        assert dto.price == Decimal("19.99")
        assert dto.stock == 7
        assert dto.created_at == product.created_at
        assert dto.updated_at == product.updated_at


class TestToEntity:
    def test_builds_unsaved_product(self):
        product = mappers.to_entity(
            CreateProductDTO(name="Widget", price=Decimal("5.00"), stock=2)
        )
        assert product.id is None
        assert product.name == "Widget"
        assert product.description == ""

    def test_ignores_id_of_output_dto(self):
        saved = Product.objects.create(name="Widget", price=Decimal("5.00"), stock=2)

        product = mappers.to_entity(mappers.to_dto(saved))

        assert product.id is None
        assert product.name == saved.name
        assert product.price == saved.price


class TestUpdateEntity:
    def test_null_fields_keep_current_values(self):
        product = Product(name="Widget", description="Old", price=Decimal("1.00"), stock=1)

        mappers.update_entity(UpdateProductDTO(price=Decimal("2.50")), product)

        assert product.price == Decimal("2.50")
        assert product.name == "Widget"
        assert product.description == "Old"
        assert product.stock == 1
