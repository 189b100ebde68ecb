"""Price calculation for a configured product."""
from miniapp.services.menu.base import Product
from miniapp.services.ordering.constants import (
    DEFAULT_MILK,
    LARGE_SIZE_THRESHOLD_ML,
    MILK_SURCHARGE_LARGE,
    MILK_SURCHARGE_SMALL,
    SYRUP_SURCHARGE_LARGE,
    SYRUP_SURCHARGE_SMALL,
)
from miniapp.services.ordering.models import SelectedOptions


def is_large(options: SelectedOptions) -> bool:
    """Large tier: a size above the threshold. No size counts as small."""
    return options.size is not None and options.size.volume > LARGE_SIZE_THRESHOLD_ML


def base_price(product: Product, options: SelectedOptions) -> int:
    """Flat price, else the selected size price, else 0 while no size is chosen."""
    if product.price is not None:
        return product.price
    if options.size is not None:
        return options.size.price
    return 0


def compute_price(product: Product, options: SelectedOptions) -> int:
    """
    Price of ``product`` with ``options``.

    Non-plain milk and syrup add surcharges that depend on the size tier.
    Sugar and cinnamon are free.
    """
    large = is_large(options)
    price = base_price(product, options)

    if options.milk and options.milk != DEFAULT_MILK:
        price += MILK_SURCHARGE_LARGE if large else MILK_SURCHARGE_SMALL
    if options.syrup:
        price += SYRUP_SURCHARGE_LARGE if large else SYRUP_SURCHARGE_SMALL

    return price
