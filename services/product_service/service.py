import structlog
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from .models import new_product_document
from .repository import ProductRepository
from .schemas import ProductCreate, ProductResponse, ProductUpdate

logger = structlog.get_logger(__name__)


class ProductService:

    @staticmethod
    async def create_product(db: AsyncDatabase, data: ProductCreate) -> ProductResponse:
        doc = new_product_document(data.name, data.stock, data.price, data.tags)
        try:
            doc = await ProductRepository.create_product(db, doc)
        except DuplicateKeyError:
            raise ValueError(f"Product {data.name} already exists")
        logger.info("product_created", name=data.name, stock=data.stock, price=data.price)
        return ProductResponse.from_document(doc)

    @staticmethod
    async def list_products(db: AsyncDatabase) -> list[ProductResponse]:
        docs = await ProductRepository.get_all_products(db)
        return [ProductResponse.from_document(d) for d in docs]

    @staticmethod
    async def get_product(db: AsyncDatabase, name: str) -> ProductResponse | None:
        doc = await ProductRepository.get_product_by_name(db, name)
        return ProductResponse.from_document(doc) if doc else None

    @staticmethod
    async def update_product(db: AsyncDatabase, name: str, data: ProductUpdate) -> bool:
        try:
            matched = await ProductRepository.update_product(
                db, name, data.new_name, data.stock, data.price
            )
        except DuplicateKeyError:
            raise ValueError(f"Product {data.new_name} already exists")
        if not matched:
            logger.warning("product_not_found", name=name)
            return False
        logger.info("product_updated", name=name, new_name=data.new_name)
        return True

    @staticmethod
    async def delete_product(db: AsyncDatabase, name: str) -> bool:
        deleted = await ProductRepository.delete_product(db, name)
        if not deleted:
            logger.warning("product_not_found", name=name)
            return False
        logger.info("product_deleted", name=name)
        return True
