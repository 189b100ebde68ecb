"""Toggle semantics for the product sheet options."""
from typing import Dict, List, Optional, Union

from miniapp.services.menu.base import Product
from miniapp.services.ordering.constants import (
    JUICE_FLAVORS,
    MILKS,
    SUGAR_AMOUNTS,
    SYRUPS,
    TEMPERATURES,
)
from miniapp.services.ordering.models import OptionField, SelectedOptions, SizeChoice
from miniapp.services.ordering.validator import applicable_fields


class InvalidOptionError(ValueError):
    """Raised when a value is not one of the choices of its field."""


class OptionNotApplicableError(InvalidOptionError):
    """Raised when the product does not offer the field."""


ALLOWED_VALUES: Dict[OptionField, List[str]] = {
    OptionField.TEMPERATURE: TEMPERATURES,
    OptionField.MILK: MILKS,
    OptionField.SYRUP: SYRUPS,
    OptionField.SUGAR: SUGAR_AMOUNTS,
    OptionField.JUICE: JUICE_FLAVORS,
}


def size_choice(product: Product, label: str) -> SizeChoice:
    """Resolve a size label of ``product`` into a label/price pair."""
    if not product.sizes or label not in product.sizes:
        raise InvalidOptionError(f"'{label}' is not a size of {product.name}")
    return SizeChoice(label=label, price=product.sizes[label])


def toggle(
    options: SelectedOptions,
    field: OptionField,
    value: Union[str, SizeChoice, None] = None,
) -> SelectedOptions:
    """
    Select ``value`` for ``field``, or clear the slot if it is already selected.

    Cinnamon is a flag and flips regardless of ``value``.

    Returns:
        A new SelectedOptions; ``options`` is left untouched
    """
    if field == OptionField.CINNAMON:
        return options.model_copy(update={"cinnamon": not options.cinnamon})

    if field == OptionField.SIZE:
        if not isinstance(value, SizeChoice):
            raise InvalidOptionError("size must be a SizeChoice")
        current_label = options.size.label if options.size else None
        new_size = None if current_label == value.label else value
        return options.model_copy(update={"size": new_size})

    allowed = ALLOWED_VALUES[field]
    if value not in allowed:
        raise InvalidOptionError(f"'{value}' is not a valid {field} choice")

    current: Optional[str] = getattr(options, field.value)
    new_value = None if current == value else value
    return options.model_copy(update={field.value: new_value})


def check_choice(
    product: Product, field: OptionField, value: Union[str, SizeChoice, None] = None
) -> None:
    """
    Check that ``product`` offers ``field`` and that ``value`` is one of its choices.

    Size values are checked against the product sizes by ``size_choice``;
    cinnamon takes no value.
    """
    if field not in applicable_fields(product):
        raise OptionNotApplicableError(f"'{field}' is not available for {product.name}")
    if field in ALLOWED_VALUES and value not in ALLOWED_VALUES[field]:
        raise InvalidOptionError(f"'{value}' is not a valid {field} choice")


def validated_options(product: Product, options: SelectedOptions) -> SelectedOptions:
    """
    Check every set slot of ``options`` against ``product``.

    Returns:
        The options with the size price taken from the catalog
    """
    if options.size is not None:
        check_choice(product, OptionField.SIZE)
        options = options.model_copy(
            update={"size": size_choice(product, options.size.label)}
        )
    if options.cinnamon:
        check_choice(product, OptionField.CINNAMON)
    for field in ALLOWED_VALUES:
        value = getattr(options, field.value)
        if value is not None:
            check_choice(product, field, value)
    return options
