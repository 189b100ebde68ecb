"""Order models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OptionField(str, Enum):
    """Customization fields of the product sheet."""

    SIZE = "size"
    TEMPERATURE = "temperature"
    MILK = "milk"
    SYRUP = "syrup"
    JUICE = "juice"
    CINNAMON = "cinnamon"
    SUGAR = "sugar"

    def __str__(self) -> str:
        """Return the string value of the field."""
        return self.value


class SizeChoice(BaseModel):
    """Selected size: the catalog label and the price for that size."""

    model_config = ConfigDict(frozen=True)

    label: str
    price: int

    @property
    def volume(self) -> int:
        """Volume in ml; catalog loading guarantees the label is numeric."""
        return int(self.label)


class SelectedOptions(BaseModel):
    """Options picked on the product sheet.

    Records are immutable; toggling produces a new record (see
    ``miniapp.services.ordering.options``).
    """

    model_config = ConfigDict(frozen=True)

    size: Optional[SizeChoice] = None
    temperature: Optional[str] = None
    milk: Optional[str] = None
    syrup: Optional[str] = None
    sugar: Optional[str] = None
    cinnamon: bool = False
    juice: Optional[str] = None


class LineItem(BaseModel):
    """Priced, described cart entry created when a product is added."""

    model_config = ConfigDict(frozen=True)

    uid: str
    product_id: int
    name: str
    base_name: str
    details: str
    price: int

    @property
    def label(self) -> str:
        """Full description used on the order payload."""
        return f"{self.name} {self.details}".strip()
