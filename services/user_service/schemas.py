from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    age: int = Field(ge=0)


class UserUpdate(BaseModel):
    # Omitted fields keep their stored value
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=0)
