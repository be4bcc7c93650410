from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    stock: int = Field(ge=0)
    price: float = Field(ge=0)
    tags: List[str] = []


class ProductUpdate(BaseModel):
    new_name: str = Field(min_length=1)
    stock: int = Field(ge=0)
    price: float = Field(ge=0)


class ProductResponse(BaseModel):
    id: str
    name: str
    stock: int
    price: float
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: dict) -> "ProductResponse":
        return cls(id=str(doc["_id"]), **{k: v for k, v in doc.items() if k != "_id"})
