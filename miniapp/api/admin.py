"""Admin mode endpoints: stop list editing."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from miniapp.api.errors import to_http_exception
from miniapp.core.dependencies import get_session_manager
from miniapp.services.session.errors import SessionError
from miniapp.services.session.manager import SessionManager

router = APIRouter()
logger = logging.getLogger(__name__)


class LoginRequest(BaseModel):
    """Login request model."""
    password: str


class LoginResponse(BaseModel):
    """Admin mode confirmation."""
    success: bool
    alert: str


class StopListResponse(BaseModel):
    """Stop list of the session."""
    stop_list: List[int]


class SyncResponse(BaseModel):
    """Payload sent to the bot."""
    sent: bool
    payload: str


@router.post("/api/sessions/{session_id}/admin/login", response_model=LoginResponse)
async def login(
    session_id: str,
    login_req: LoginRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Enter admin mode."""
    try:
        alert = await session_manager.admin_login(session_id, login_req.password)
    except SessionError as e:
        raise to_http_exception(e)
    return LoginResponse(success=True, alert=alert)


@router.post(
    "/api/sessions/{session_id}/admin/stop-list/{product_id}",
    response_model=StopListResponse,
)
async def toggle_stop(
    session_id: str,
    product_id: int,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Put a product on the stop list or take it off."""
    try:
        stop_list = await session_manager.toggle_stop(session_id, product_id)
    except SessionError as e:
        raise to_http_exception(e)
    return StopListResponse(stop_list=stop_list)


@router.post("/api/sessions/{session_id}/admin/sync", response_model=SyncResponse)
async def sync_stop_list(
    session_id: str,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """Send the stop list to the bot."""
    try:
        payload = await session_manager.save_stop_list(session_id)
    except SessionError as e:
        raise to_http_exception(e)
    return SyncResponse(sent=True, payload=payload)
