"""Catalog Models - Pydantic model for products."""
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product model (immutable)."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    name: str
    price: int = Field(ge=0)  # whole currency units
    description: str = Field(default="", alias="desc")
