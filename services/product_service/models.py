from datetime import datetime, timezone

COLLECTION = "products"


def new_product_document(name: str, stock: int, price: float, tags: list[str] | None = None) -> dict:
    doc = {
        "name": name,
        "stock": stock,
        "price": price,
        "created_at": datetime.now(timezone.utc),
    }
    if tags:
        doc["tags"] = tags
    return doc
