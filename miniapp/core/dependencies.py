"""FastAPI dependencies."""
from typing import Optional

from miniapp.core.config import settings
from miniapp.services.bridge.host import OutboxBridge
from miniapp.services.menu.repository import MenuRepository
from miniapp.services.menu.in_memory_menu import InMemoryMenuProvider
from miniapp.services.session.manager import SessionManager

_menu_repository: Optional[MenuRepository] = None
_bridge: Optional[OutboxBridge] = None


def get_menu_repository() -> MenuRepository:
    """Get menu repository instance."""
    global _menu_repository
    if _menu_repository is None:
        _menu_repository = MenuRepository(
            provider=InMemoryMenuProvider(menu_file=settings.menu_file)
        )
    return _menu_repository


def get_bridge() -> OutboxBridge:
    """Get host bridge instance."""
    global _bridge
    if _bridge is None:
        _bridge = OutboxBridge()
    return _bridge


def get_session_manager() -> SessionManager:
    """Get session manager."""
    return SessionManager(
        menu_repository=get_menu_repository(),
        bridge=get_bridge(),
        admin_password=settings.admin_password,
        amount_multiplier=settings.amount_multiplier,
        clear_cart_on_checkout=settings.clear_cart_on_checkout,
    )
