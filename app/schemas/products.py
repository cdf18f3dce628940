# app/schemas/products.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    product: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    userId: Optional[str] = None
    company: Optional[str] = None
    image: Optional[str] = ""

    @field_validator("image", mode="before")
    @classmethod
    def missing_image_is_empty(cls, value):
        return "" if value is None else value


class ProductUpdate(BaseModel):
    # Unknown fields are passed through to the update unchanged
    model_config = ConfigDict(extra="allow")

    product: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    company: Optional[str] = None
    userId: Optional[str] = None
    image: Optional[str] = None

    def to_patch(self) -> dict:
        patch = self.model_dump(exclude_unset=True)
        patch.pop("_id", None)
        patch.pop("id", None)
        return patch


class UpdateOutcome(BaseModel):
    acknowledged: bool = True
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None
    upsertedCount: int = 0


class DeleteOutcome(BaseModel):
    acknowledged: bool = True
    deletedCount: int
