"""Menu provider interface."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class Category(str, Enum):
    """Product categories of the menu."""

    COFFEE = "coffee"
    TEA = "tea"
    PUNSH = "punsh"
    SEASONAL = "seasonal"
    ICE = "ice"
    FOOD = "food"
    DRINKS = "drinks"

    def __str__(self) -> str:
        """Return the string value of the category."""
        return self.value


class Product(BaseModel):
    """Catalog entry.

    A product is priced either by a flat ``price`` or by a ``sizes`` mapping
    of volume label (millilitres, e.g. ``"300"``) to price, never both.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    category: Category
    name: str
    price: Optional[int] = None
    sizes: Optional[Dict[str, int]] = None
    img: Optional[str] = None
    no_milk: bool = False
    no_syrup: bool = False
    is_juice_variant: bool = False

    @model_validator(mode="after")
    def check_price_source(self) -> "Product":
        """Exactly one price source; size labels must be integer volumes."""
        if (self.price is None) == (self.sizes is None):
            raise ValueError(
                f"product {self.id} must define exactly one of 'price' or 'sizes'"
            )
        if self.sizes is not None:
            if not self.sizes:
                raise ValueError(f"product {self.id} has an empty 'sizes' mapping")
            for label in self.sizes:
                if not label.isdecimal():
                    raise ValueError(
                        f"product {self.id} size label '{label}' is not a volume in ml"
                    )
        return self

    @property
    def has_sizes(self) -> bool:
        return self.sizes is not None

    @property
    def starting_price(self) -> int:
        """Price shown on the menu card: flat price or the first size."""
        if self.price is not None:
            return self.price
        return next(iter(self.sizes.values()))


class CategoryInfo(BaseModel):
    """Category tab shown in the menu header."""

    id: Category
    label: str


class Menu(BaseModel):
    """Menu model."""

    items: List[Product]
    categories: List[CategoryInfo] = []

    @model_validator(mode="after")
    def check_unique_ids(self) -> "Menu":
        seen = set()
        for item in self.items:
            if item.id in seen:
                raise ValueError(f"duplicate product id {item.id}")
            seen.add(item.id)
        return self


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    async def get_menu(self) -> Menu:
        """Get the full menu."""
        pass

    @abstractmethod
    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by id."""
        pass

    @abstractmethod
    async def get_products_by_category(self, category: Category) -> List[Product]:
        """Get all products of a category in catalog order."""
        pass
