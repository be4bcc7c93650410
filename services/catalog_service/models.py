from datetime import datetime, timezone
from typing import Annotated, List, Optional

from beanie import Document, Indexed
from pydantic import Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Document):
    name: Annotated[str, Indexed(unique=True)]
    stock: int
    price: float
    tags: List[str] = []
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    class Settings:
        name = "products"


class Book(Document):
    title: str
    author: str
    year: int
    cover_image: Optional[str] = None

    class Settings:
        name = "books"


DOCUMENT_MODELS = [Product, Book]
