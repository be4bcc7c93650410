from datetime import datetime, timezone

from pymongo.asynchronous.database import AsyncDatabase

from .models import COLLECTION


class ProductRepository:

    @staticmethod
    async def ensure_indexes(db: AsyncDatabase):
        await db[COLLECTION].create_index("name", unique=True)

    @staticmethod
    async def create_product(db: AsyncDatabase, doc: dict):
        result = await db[COLLECTION].insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    @staticmethod
    async def get_all_products(db: AsyncDatabase):
        return await db[COLLECTION].find().to_list()

    @staticmethod
    async def get_product_by_name(db: AsyncDatabase, name: str):
        return await db[COLLECTION].find_one({"name": name})

    @staticmethod
    async def update_product(db: AsyncDatabase, name: str, new_name: str, stock: int, price: float):
        result = await db[COLLECTION].update_one(
            {"name": name},
            {
                "$set": {
                    "name": new_name,
                    "stock": stock,
                    "price": price,
                    "updated_at": datetime.now(timezone.utc),
                }
            },
        )
        return result.matched_count

    @staticmethod
    async def delete_product(db: AsyncDatabase, name: str):
        result = await db[COLLECTION].delete_one({"name": name})
        return result.deleted_count
