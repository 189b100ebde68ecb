"""Menu API endpoints."""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from miniapp.core.dependencies import get_menu_repository
from miniapp.services.menu.base import CategoryInfo, Product
from miniapp.services.menu.repository import MenuRepository
from miniapp.services.ordering import constants
from miniapp.services.ordering.models import OptionField, SelectedOptions
from miniapp.services.ordering.options import InvalidOptionError, validated_options
from miniapp.services.ordering.pricing import compute_price
from miniapp.services.ordering.validator import applicable_fields, missing_requirement

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuResponse(BaseModel):
    """Menu response model."""
    items: List[Product]
    categories: List[CategoryInfo] = []


class ProductResponse(BaseModel):
    """Product with the fields its sheet shows."""
    product: Product
    fields: List[OptionField]


class QuoteRequest(BaseModel):
    """Price request for a product and a selection."""
    product_id: int
    options: SelectedOptions = SelectedOptions()


class QuoteResponse(BaseModel):
    """Price and completeness of a selection."""
    product_id: int
    price: int
    can_add: bool
    alert: Optional[str] = None


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(
    request: Request,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the full menu."""
    logger.info(
        f"[MENU] Request received - Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        menu = await menu_repository.get_menu()
        logger.info(f"[MENU] Menu loaded - {len(menu.items)} items, {len(menu.categories)} categories")
        return MenuResponse(items=menu.items, categories=menu.categories)

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")


@router.get("/api/menu/options")
async def get_option_choices() -> Dict[str, List[str]]:
    """Choices offered for each single-choice field."""
    return {
        OptionField.TEMPERATURE.value: constants.TEMPERATURES,
        OptionField.MILK.value: constants.MILKS,
        OptionField.SYRUP.value: constants.SYRUPS,
        OptionField.SUGAR.value: constants.SUGAR_AMOUNTS,
        OptionField.JUICE.value: constants.JUICE_FLAVORS,
    }


@router.get("/api/menu/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get a product and the customization fields it offers."""
    product = await menu_repository.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")

    fields = applicable_fields(product)
    return ProductResponse(
        product=product,
        fields=[field for field in OptionField if field in fields],
    )


@router.post("/api/quote", response_model=QuoteResponse)
async def quote(
    quote_request: QuoteRequest,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Price a selection without touching any session."""
    product = await menu_repository.get_product(quote_request.product_id)
    if product is None:
        raise HTTPException(
            status_code=404, detail=f"Product {quote_request.product_id} not found"
        )

    try:
        options = validated_options(product, quote_request.options)
    except InvalidOptionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    alert = missing_requirement(product, options)
    return QuoteResponse(
        product_id=product.id,
        price=compute_price(product, options),
        can_add=alert is None,
        alert=alert,
    )
