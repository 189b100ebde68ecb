"""Line item composition."""
import secrets
from typing import List

from miniapp.services.menu.base import Product
from miniapp.services.ordering.models import LineItem, SelectedOptions


def size_fragment(options: SelectedOptions) -> str:
    return f"{options.size.label}мл" if options.size else ""


def detail_fragments(options: SelectedOptions) -> List[str]:
    """Option fragments after the size, in display order."""
    fragments = []
    if options.temperature:
        fragments.append(f"[{options.temperature}]")
    if options.milk:
        fragments.append(f"({options.milk})")
    if options.syrup:
        fragments.append(f"+{options.syrup}")
    if options.juice:
        fragments.append(f"сок: {options.juice}")
    if options.cinnamon:
        fragments.append("+корица")
    if options.sugar:
        fragments.append(f"сахар {options.sugar}")
    return fragments


def generate_uid() -> str:
    """Random identifier for a cart entry."""
    return secrets.token_hex(6)


def compose_line_item(
    product: Product, options: SelectedOptions, price: int
) -> LineItem:
    """
    Build the cart entry for a configured product.

    Args:
        product: Product being added
        options: Complete selection for the product
        price: Price computed for this selection

    Returns:
        LineItem named after the product (plus size) with the other options as details
    """
    size = size_fragment(options)
    name = f"{product.name} {size}" if size else product.name
    return LineItem(
        uid=generate_uid(),
        product_id=product.id,
        name=name,
        base_name=product.name,
        details=" ".join(detail_fragments(options)),
        price=price,
    )
