from datetime import datetime, timezone

import structlog
from pymongo.errors import DuplicateKeyError

from .models import Book, Product
from .repository import BookRepository, ProductRepository
from .schemas import BookCreate, ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)


class CatalogService:

    # CREATE
    @staticmethod
    async def add_product(data: ProductCreate) -> Product:
        product = Product(name=data.name, stock=data.stock, price=data.price, tags=data.tags)
        try:
            product = await ProductRepository.create_product(product)
        except DuplicateKeyError:
            raise ValueError(f"Product {data.name} already exists")
        logger.info("product_created", name=data.name, stock=data.stock, price=data.price)
        return product

    # READ
    @staticmethod
    async def list_products() -> list[Product]:
        return await ProductRepository.find()

    # UPDATE
    @staticmethod
    async def update_product(name: str, data: ProductUpdate) -> Product | None:
        changes = {
            "stock": data.stock,
            "price": data.price,
            "updated_at": datetime.now(timezone.utc),
        }
        if data.new_name:
            changes["name"] = data.new_name
        try:
            product = await ProductRepository.find_one_and_update(name, changes)
        except DuplicateKeyError:
            raise ValueError(f"Product {data.new_name} already exists")
        if not product:
            logger.warning("product_not_found", name=name)
            return None
        logger.info("product_updated", name=name, new_name=data.new_name or name)
        return product

    # DELETE
    @staticmethod
    async def delete_product(name: str) -> Product | None:
        product = await ProductRepository.find_one_and_delete(name)
        if not product:
            logger.warning("product_not_found", name=name)
            return None
        logger.info("product_deleted", name=name)
        return product


class BookService:

    @staticmethod
    async def add_book(data: BookCreate) -> Book:
        book = Book(
            title=data.title,
            author=data.author,
            year=data.year,
            cover_image=data.cover_image,
        )
        book = await BookRepository.create_book(book)
        logger.info("book_created", title=data.title)
        return book

    @staticmethod
    async def list_books() -> list[Book]:
        return await BookRepository.get_all_books()

    @staticmethod
    async def delete_book(title: str) -> bool:
        deleted = await BookRepository.delete_by_title(title)
        if not deleted:
            logger.warning("book_not_found", title=title)
            return False
        logger.info("book_deleted", title=title, count=deleted)
        return True
