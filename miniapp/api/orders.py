"""Ordering session API endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from miniapp.api.errors import to_http_exception
from miniapp.core.dependencies import get_session_manager
from miniapp.services.menu.base import Category
from miniapp.services.menu.repository import MenuCard
from miniapp.services.ordering.models import LineItem, OptionField
from miniapp.services.session.errors import SessionError
from miniapp.services.session.manager import SessionManager
from miniapp.services.session.models import (
    AddResult,
    CheckoutResult,
    OrderingState,
    ProductSheet,
)

router = APIRouter()
logger = logging.getLogger(__name__)


class SessionResponse(BaseModel):
    """Session summary."""
    session_id: str
    active_category: Optional[Category] = None
    is_admin: bool = False
    stop_list: List[int] = []


class BrowseResponse(BaseModel):
    """Products of the active category."""
    category: Optional[Category] = None
    items: List[MenuCard] = []


class CartResponse(BaseModel):
    """Cart contents and delivery address."""
    items: List[LineItem]
    total: int
    floor: str = ""
    office: str = ""


class ToggleRequest(BaseModel):
    """Option toggle from the product sheet."""
    field: OptionField
    value: Optional[str] = None


class AddressRequest(BaseModel):
    """Delivery address."""
    floor: str
    office: str


def _session_response(state: OrderingState) -> SessionResponse:
    return SessionResponse(
        session_id=state.session_id,
        active_category=state.active_category,
        is_admin=state.is_admin,
        stop_list=state.stop_list,
    )


def _cart_response(state: OrderingState) -> CartResponse:
    return CartResponse(
        items=state.cart.items,
        total=state.cart.total,
        floor=state.floor,
        office=state.office,
    )


@router.post("/api/sessions", response_model=SessionResponse)
async def create_session(
    request: Request,
    stop: Optional[str] = None,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Start a session. ``stop`` is the comma-separated stop list from the bot."""
    logger.info(
        f"[SESSION] Create requested - stop: {stop!r}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        session = await session_manager.create_session(stop)
        return _session_response(session.state)

    except Exception as e:
        logger.error(
            f"[SESSION] Error creating session - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error creating session: {str(e)}")


@router.get("/api/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Get session summary."""
    try:
        session = await session_manager.get_session(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    return _session_response(session.state)


@router.delete("/api/sessions/{session_id}")
async def close_session(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Close a session. Closing an unknown session succeeds silently."""
    await session_manager.close_session(session_id)
    return {"success": True}


@router.get("/api/sessions/{session_id}/menu", response_model=BrowseResponse)
async def browse(
    session_id: str,
    category: Optional[Category] = None,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Products of a category; stopped products are hidden outside admin mode."""
    try:
        active, cards = await session_manager.browse(session_id, category)
    except SessionError as e:
        raise to_http_exception(e)
    return BrowseResponse(category=active, items=cards)


@router.post("/api/sessions/{session_id}/product/{product_id}", response_model=ProductSheet)
async def open_product(
    session_id: str,
    product_id: int,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Open the product sheet."""
    try:
        return await session_manager.open_product(session_id, product_id)
    except SessionError as e:
        raise to_http_exception(e)


@router.get("/api/sessions/{session_id}/product", response_model=ProductSheet)
async def get_product_sheet(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Current product sheet."""
    try:
        return await session_manager.get_sheet(session_id)
    except SessionError as e:
        raise to_http_exception(e)


@router.delete("/api/sessions/{session_id}/product")
async def close_product(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Close the product sheet without adding."""
    try:
        await session_manager.close_product(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    return {"success": True}


@router.post("/api/sessions/{session_id}/options", response_model=ProductSheet)
async def toggle_option(
    session_id: str,
    toggle_request: ToggleRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Toggle an option on the open product sheet and reprice it."""
    try:
        return await session_manager.toggle_option(
            session_id, toggle_request.field, toggle_request.value
        )
    except SessionError as e:
        raise to_http_exception(e)


@router.post("/api/sessions/{session_id}/cart", response_model=AddResult)
async def add_to_cart(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Add the open product to the cart, or return the alert explaining why not."""
    try:
        return await session_manager.add_to_cart(session_id)
    except SessionError as e:
        raise to_http_exception(e)


@router.get("/api/sessions/{session_id}/cart", response_model=CartResponse)
async def get_cart(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Get the cart."""
    try:
        session = await session_manager.get_session(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    return _cart_response(session.state)


@router.delete("/api/sessions/{session_id}/cart/{uid}", response_model=CartResponse)
async def remove_from_cart(
    session_id: str,
    uid: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Remove a cart entry. Unknown entries are ignored."""
    try:
        state = await session_manager.remove_from_cart(session_id, uid)
    except SessionError as e:
        raise to_http_exception(e)
    return _cart_response(state)


@router.delete("/api/sessions/{session_id}/cart", response_model=CartResponse)
async def clear_cart(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Empty the cart."""
    try:
        state = await session_manager.clear_cart(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    return _cart_response(state)


@router.put("/api/sessions/{session_id}/address", response_model=CartResponse)
async def set_address(
    session_id: str,
    address: AddressRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Set floor and office for delivery."""
    try:
        state = await session_manager.set_address(session_id, address.floor, address.office)
    except SessionError as e:
        raise to_http_exception(e)
    return _cart_response(state)


@router.post("/api/sessions/{session_id}/checkout", response_model=CheckoutResult)
async def checkout(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Hand the order to the Telegram client."""
    logger.info(f"[CHECKOUT] Checkout requested - Session: {session_id}")
    try:
        return await session_manager.checkout(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(
            f"[CHECKOUT] Error during checkout - Session: {session_id}, "
            f"Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error during checkout: {str(e)}")
