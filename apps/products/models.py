from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# Wire format uses camelCase (inStock, createdAt, minPrice, ...); Python code uses
# field names. Both are accepted on input, aliases are emitted by to_wire().
_wire_config = ConfigDict(populate_by_name=True)


class ProductCreate(BaseModel):
    """Fields a caller supplies when creating a product (id and created_at are store-assigned)."""
    model_config = _wire_config

    name: str
    # Non-negative by convention only; the catalog does not validate it.
    price: float
    description: str = ""
    category: str = ""
    in_stock: bool = Field(default=True, alias="inStock")


class ProductUpdate(BaseModel):
    """Partial update; only explicitly set fields are merged."""
    model_config = _wire_config

    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(default=None, alias="inStock")


class Product(BaseModel):
    """Catalog entry."""
    model_config = _wire_config

    id: int
    name: str
    price: float
    description: str = ""
    category: str = ""
    in_stock: bool = Field(default=True, alias="inStock")
    created_at: datetime = Field(alias="createdAt")


class SearchFilters(BaseModel):
    """Optional search constraints; None means no constraint."""
    model_config = _wire_config

    category: Optional[str] = None
    min_price: Optional[float] = Field(default=None, alias="minPrice")
    max_price: Optional[float] = Field(default=None, alias="maxPrice")
    in_stock: Optional[bool] = Field(default=None, alias="inStock")

    def matches(self, product: Product) -> bool:
        if self.category is not None and product.category != self.category:
            return False
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        return True


def to_wire(model: BaseModel, exclude_unset: bool = False, exclude_none: bool = False) -> dict:
    """JSON-ready dict using the camelCase wire names."""
    return model.model_dump(
        mode="json", by_alias=True, exclude_unset=exclude_unset, exclude_none=exclude_none
    )
