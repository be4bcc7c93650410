"""Tests for the native driver product service with a mocked collection."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from services.product_service.schemas import ProductCreate, ProductUpdate
from services.product_service.service import ProductService


class TestProductService:

    @pytest.mark.asyncio
    async def test_create_product(self, mock_db, mock_collection):
        oid = ObjectId()
        mock_collection.insert_one.return_value = MagicMock(inserted_id=oid)

        product = await ProductService.create_product(
            mock_db, ProductCreate(name="Hoodie", stock=30, price=34.99)
        )

        mock_db.__getitem__.assert_called_with("products")
        doc = mock_collection.insert_one.await_args.args[0]
        assert doc["name"] == "Hoodie"
        assert doc["stock"] == 30
        assert isinstance(doc["created_at"], datetime)
        assert "tags" not in doc
        assert product.id == str(oid)

    @pytest.mark.asyncio
    async def test_create_duplicate_raises_value_error(self, mock_db, mock_collection):
        mock_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(ValueError, match="already exists"):
            await ProductService.create_product(
                mock_db, ProductCreate(name="Hoodie", stock=30, price=34.99)
            )

    @pytest.mark.asyncio
    async def test_list_products(self, mock_db, mock_collection):
        mock_collection.find.return_value.to_list.return_value = [
            {"_id": ObjectId(), "name": "Cap", "stock": 100, "price": 14.99},
            {"_id": ObjectId(), "name": "Sneakers", "stock": 20, "price": 59.99, "tags": ["shoes"]},
        ]

        products = await ProductService.list_products(mock_db)

        assert [p.name for p in products] == ["Cap", "Sneakers"]
        assert products[1].tags == ["shoes"]

    @pytest.mark.asyncio
    async def test_get_product_missing(self, mock_db, mock_collection):
        mock_collection.find_one.return_value = None

        assert await ProductService.get_product(mock_db, "Nope") is None
        mock_collection.find_one.assert_awaited_once_with({"name": "Nope"})

    @pytest.mark.asyncio
    async def test_update_product_sets_fields(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = MagicMock(matched_count=1)

        updated = await ProductService.update_product(
            mock_db, "Cap", ProductUpdate(new_name="Beanie", stock=5, price=9.5)
        )

        assert updated is True
        query, update = mock_collection.update_one.await_args.args
        assert query == {"name": "Cap"}
        assert update["$set"]["name"] == "Beanie"
        assert update["$set"]["stock"] == 5
        assert isinstance(update["$set"]["updated_at"], datetime)

    @pytest.mark.asyncio
    async def test_update_product_not_found(self, mock_db, mock_collection):
        mock_collection.update_one.return_value = MagicMock(matched_count=0)

        assert await ProductService.update_product(
            mock_db, "Nope", ProductUpdate(new_name="X", stock=1, price=1)
        ) is False

    @pytest.mark.asyncio
    async def test_delete_product(self, mock_db, mock_collection):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=1)
        assert await ProductService.delete_product(mock_db, "Cap") is True

        mock_collection.delete_one.return_value = MagicMock(deleted_count=0)
        assert await ProductService.delete_product(mock_db, "Cap") is False


def test_schema_rejects_negative_stock():
    with pytest.raises(ValueError):
        ProductCreate(name="Cap", stock=-1, price=1.0)
