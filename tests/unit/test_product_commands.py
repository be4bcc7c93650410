from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

import pytest

from services.product_service.main import lifespan, product_app
from services.product_service.schemas import ProductResponse
from shared.config.database import DatabaseConnectionError


@pytest.fixture
def service(fake_lifespan):
    with patch("services.product_service.commands.lifespan", fake_lifespan), patch(
        "services.product_service.commands.ProductService"
    ) as mock_service:
        yield mock_service


class TestProductCommands:

    def test_add(self, runner, service):
        service.create_product = AsyncMock()

        result = runner.invoke(product_app, ["add", "Hoodie", "30", "34.99", "--tag", "clothing"])

        assert result.exit_code == 0
        assert "✅ Added: Hoodie (30 pcs at $34.99)" in result.stdout
        data = service.create_product.await_args.args[1]
        assert data.tags == ["clothing"]

    def test_add_rejects_bad_stock(self, runner, service):
        result = runner.invoke(product_app, ["add", "Hoodie", "many", "34.99"])

        assert result.exit_code == 2

    def test_add_duplicate_exits_with_error(self, runner, service):
        service.create_product = AsyncMock(side_effect=ValueError("Product Hoodie already exists"))

        result = runner.invoke(product_app, ["add", "Hoodie", "30", "34.99"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_list(self, runner, service):
        service.list_products = AsyncMock(
            return_value=[
                ProductResponse(id="1", name="Cap", stock=100, price=14.99),
                ProductResponse(id="2", name="Sneakers", stock=20, price=59.99),
            ]
        )

        result = runner.invoke(product_app, ["list"])

        assert result.stdout.splitlines() == [
            "📦 Products:",
            "1. Cap - 100 pcs - $14.99",
            "2. Sneakers - 20 pcs - $59.99",
        ]

    def test_update(self, runner, service):
        service.update_product = AsyncMock(return_value=True)

        result = runner.invoke(product_app, ["update", "Cap", "Beanie", "5", "9.5"])

        assert "🔁 Updated: Cap => Beanie (5 pcs at $9.50)" in result.stdout
        name, data = service.update_product.await_args.args[1:]
        assert name == "Cap"
        assert data.new_name == "Beanie"

    def test_update_not_found(self, runner, service):
        service.update_product = AsyncMock(return_value=False)

        result = runner.invoke(product_app, ["update", "Nope", "X", "1", "1"])

        assert result.exit_code == 0
        assert "⚠️  Product not found." in result.stdout

    def test_delete(self, runner, service):
        service.delete_product = AsyncMock(side_effect=[True, False])

        assert "🗑️  Deleted: Cap" in runner.invoke(product_app, ["delete", "Cap"]).stdout
        assert "Product not found" in runner.invoke(product_app, ["delete", "Cap"]).stdout

    def test_get(self, runner, service):
        service.get_product = AsyncMock(
            return_value=ProductResponse(id="1", name="Cap", stock=100, price=14.99)
        )

        result = runner.invoke(product_app, ["get", "Cap"])

        assert "🔍 Found:" in result.stdout
        assert '"name":"Cap"' in result.stdout


def test_connection_error_exits_non_zero(runner):
    with patch(
        "services.product_service.main.get_db",
        side_effect=DatabaseConnectionError("connection refused"),
    ):
        result = runner.invoke(product_app, ["list"])

    assert result.exit_code == 1
    assert "❌ MongoDB connection error: connection refused" in result.output


def test_invalid_input_names_the_field(runner, service):
    result = runner.invoke(product_app, ["add", "--", "Cap", "-5", "14.99"])

    assert result.exit_code == 1
    assert "❌ Invalid stock:" in result.output
    assert "pydantic.dev" not in result.output
    assert "Traceback" not in result.output
    service.create_product.assert_not_called()


@pytest.mark.asyncio
async def test_lifespan_ensures_indexes(mock_db):
    @asynccontextmanager
    async def fake_get_db():
        yield mock_db

    with patch("services.product_service.main.get_db", fake_get_db), patch(
        "services.product_service.main.ProductRepository.ensure_indexes", AsyncMock()
    ) as mock_ensure:
        async with lifespan() as db:
            assert db is mock_db

    mock_ensure.assert_awaited_once_with(mock_db)
