"""Payloads handed to the Telegram client through the host bridge."""
from typing import Iterable, List, Literal

from pydantic import BaseModel

from miniapp.services.ordering.models import LineItem


class PayloadItem(BaseModel):
    """Order line as the bot receives it."""

    label: str
    amount: int  # Minor currency units


class OrderPayload(BaseModel):
    """Order submission."""

    type: Literal["order"] = "order"
    items: List[PayloadItem]
    address: str


class AdminSyncPayload(BaseModel):
    """Stop list saved from admin mode."""

    type: Literal["admin_sync"] = "admin_sync"
    stop_list: List[int]


def format_address(floor: str, office: str) -> str:
    return f"Этаж {floor}, Офис {office}"


def build_order_payload(
    items: Iterable[LineItem], address: str, amount_multiplier: int = 100
) -> OrderPayload:
    """
    Serialize cart entries into an order payload.

    Args:
        items: Cart entries in cart order
        address: Delivery address line
        amount_multiplier: Minor units per price unit (kopecks per ruble)
    """
    return OrderPayload(
        items=[
            PayloadItem(label=item.label, amount=item.price * amount_multiplier)
            for item in items
        ],
        address=address,
    )


def build_admin_sync_payload(stop_list: Iterable[int]) -> AdminSyncPayload:
    return AdminSyncPayload(stop_list=list(stop_list))
