from beanie.odm.operators.update.array import AddToSet

from .models import Book, Product


class ProductRepository:

    @staticmethod
    async def create_product(product: Product):
        await product.insert()
        return product

    @staticmethod
    async def create_many(products: list[Product]):
        await Product.insert_many(products)
        return products

    @staticmethod
    async def find(query: dict | None = None):
        if not query:
            return await Product.find_all().to_list()
        return await Product.find(query).to_list()

    @staticmethod
    async def get_by_name(name: str):
        return await Product.find_one({"name": name})

    @staticmethod
    async def find_one_and_update(name: str, changes: dict):
        product = await Product.find_one({"name": name})
        if not product:
            return None
        await product.set(changes)
        return product

    @staticmethod
    async def update_one(query: dict, changes: dict):
        return await Product.find_one(query).update({"$set": changes})

    @staticmethod
    async def add_tag(query: dict, tag: str):
        return await Product.find_many(query).update(AddToSet({"tags": tag}))

    @staticmethod
    async def find_one_and_delete(name: str):
        product = await Product.find_one({"name": name})
        if not product:
            return None
        await product.delete()
        return product

    @staticmethod
    async def delete_many(query: dict):
        result = await Product.find_many(query).delete()
        return result.deleted_count if result else 0


class BookRepository:

    @staticmethod
    async def create_book(book: Book):
        await book.insert()
        return book

    @staticmethod
    async def get_all_books():
        return await Book.find_all().to_list()

    @staticmethod
    async def delete_by_title(title: str):
        result = await Book.find_many({"title": title}).delete()
        return result.deleted_count if result else 0
