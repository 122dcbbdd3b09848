"""Unit tests for the abstract BaseModel timestamp bookkeeping."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import models

from modules.core.models import BaseModel
from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestBaseModel:
    def test_is_abstract(self):
        assert BaseModel._meta.abstract is True

    def test_update_fields_gets_updated_at(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"), stock=1)

        with patch.object(models.Model, "save") as parent_save:
            product.save(update_fields=["stock"])

        assert parent_save.call_args.kwargs["update_fields"] == ["stock", "updated_at"]

    def test_update_fields_not_duplicated(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"), stock=1)

        with patch.object(models.Model, "save") as parent_save:
            product.save(update_fields=["stock", "updated_at"])

        assert parent_save.call_args.kwargs["update_fields"] == ["stock", "updated_at"]
