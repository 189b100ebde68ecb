"""Ordering session models."""
from typing import List, Optional

from pydantic import BaseModel, Field

from miniapp.services.menu.base import Category, Product
from miniapp.services.ordering.cart import Cart
from miniapp.services.ordering.models import LineItem, OptionField, SelectedOptions


class OrderingState(BaseModel):
    """State of one Mini App session."""

    session_id: str
    active_category: Optional[Category] = None
    selected_product_id: Optional[int] = None  # Open product sheet
    options: SelectedOptions = Field(default_factory=SelectedOptions)
    cart: Cart = Field(default_factory=Cart)
    is_admin: bool = False
    stop_list: List[int] = []
    floor: str = ""
    office: str = ""

    def open_product(self, product_id: int) -> None:
        """Open a product sheet with a fresh selection."""
        self.selected_product_id = product_id
        self.options = SelectedOptions()

    def close_product(self) -> None:
        """Close the product sheet, discarding the selection."""
        self.selected_product_id = None
        self.options = SelectedOptions()


class MenuSession:
    """Mini App session model."""

    def __init__(self, session_id: str, state: OrderingState):
        self.session_id = session_id
        self.state = state


class ProductSheet(BaseModel):
    """Product sheet as the UI renders it after each change."""

    product: Product
    options: SelectedOptions
    fields: List[OptionField]
    price: int
    can_add: bool
    alert: Optional[str] = None


class AddResult(BaseModel):
    """Outcome of "add to cart"."""

    added: bool
    item: Optional[LineItem] = None
    alert: Optional[str] = None


class CheckoutResult(BaseModel):
    """Outcome of checkout; ``payload`` is the JSON handed to the host."""

    sent: bool
    payload: Optional[str] = None
    alert: Optional[str] = None
