from typing import List, Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    stock: int = Field(ge=0)
    price: float = Field(ge=0)
    tags: List[str] = []


class ProductUpdate(BaseModel):
    stock: int = Field(ge=0)
    price: float = Field(ge=0)
    new_name: Optional[str] = Field(default=None, min_length=1)


class BookCreate(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    year: int
    cover_image: Optional[str] = None
