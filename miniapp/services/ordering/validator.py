"""Option visibility and completeness rules."""
from typing import Dict, NamedTuple, Optional, Set

from miniapp.services.menu.base import Category, Product
from miniapp.services.ordering.constants import ALERT_CHOOSE_SIZE, ALERT_CHOOSE_TEMPERATURE
from miniapp.services.ordering.models import OptionField, SelectedOptions


class CategoryRule(NamedTuple):
    """Which beverage fields a category offers before product flags apply."""

    temperature: bool
    milk: bool
    syrup: bool
    extras: bool  # cinnamon and sugar


CATEGORY_RULES: Dict[Category, CategoryRule] = {
    Category.COFFEE: CategoryRule(temperature=False, milk=True, syrup=True, extras=True),
    Category.TEA: CategoryRule(temperature=False, milk=False, syrup=True, extras=True),
    Category.PUNSH: CategoryRule(temperature=False, milk=False, syrup=False, extras=True),
    Category.SEASONAL: CategoryRule(temperature=False, milk=True, syrup=True, extras=True),
    Category.ICE: CategoryRule(temperature=True, milk=True, syrup=True, extras=True),
    # Flat items with no beverage customization
    Category.DRINKS: CategoryRule(temperature=True, milk=False, syrup=False, extras=False),
    Category.FOOD: CategoryRule(temperature=False, milk=False, syrup=False, extras=False),
}


def applicable_fields(product: Product) -> Set[OptionField]:
    """Fields the product sheet shows for ``product``."""
    rule = CATEGORY_RULES[product.category]
    fields: Set[OptionField] = set()

    if rule.temperature:
        fields.add(OptionField.TEMPERATURE)
    if product.has_sizes:
        fields.add(OptionField.SIZE)
    if rule.milk and not product.is_juice_variant and not product.no_milk:
        fields.add(OptionField.MILK)
    if product.is_juice_variant:
        fields.add(OptionField.JUICE)
    if rule.syrup and not product.no_syrup:
        fields.add(OptionField.SYRUP)
    if rule.extras:
        fields.add(OptionField.CINNAMON)
        fields.add(OptionField.SUGAR)

    return fields


def missing_requirement(product: Product, options: SelectedOptions) -> Optional[str]:
    """
    Check the mandatory fields, size first.

    Returns:
        Alert text for the first missing field, None if the selection can be added
    """
    if product.has_sizes and options.size is None:
        return ALERT_CHOOSE_SIZE
    if CATEGORY_RULES[product.category].temperature and options.temperature is None:
        return ALERT_CHOOSE_TEMPERATURE
    return None


def is_complete(product: Product, options: SelectedOptions) -> bool:
    """Whether the selection is enough to add the product to the cart."""
    return missing_requirement(product, options) is None
