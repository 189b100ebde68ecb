"""Ordering session manager."""
import hashlib
import logging
import secrets
from typing import Dict, List, Optional, Tuple

from miniapp.services.bridge.host import HostBridge, serialize_payload
from miniapp.services.bridge.payloads import (
    build_admin_sync_payload,
    build_order_payload,
    format_address,
)
from miniapp.services.menu.base import Category, Product
from miniapp.services.menu.repository import MenuCard, MenuRepository
from miniapp.services.menu.stop_list import parse_stop_param, toggle_stopped
from miniapp.services.ordering import options as option_rules
from miniapp.services.ordering.composer import compose_line_item
from miniapp.services.ordering.constants import (
    ALERT_ADDRESS_REQUIRED,
    ALERT_ADMIN_ENABLED,
    ALERT_CART_EMPTY,
)
from miniapp.services.ordering.models import OptionField
from miniapp.services.ordering.pricing import compute_price
from miniapp.services.ordering.validator import applicable_fields, missing_requirement
from miniapp.services.session.errors import (
    AdminModeError,
    AdminRequiredError,
    InvalidOptionError,
    InvalidPasswordError,
    NoProductSelectedError,
    OptionNotApplicableError,
    ProductNotFoundError,
    ProductUnavailableError,
    SessionNotFoundError,
)
from miniapp.services.session.models import (
    AddResult,
    CheckoutResult,
    MenuSession,
    OrderingState,
    ProductSheet,
)

logger = logging.getLogger(__name__)

# Module-level session storage (persists across requests)
_sessions: Dict[str, MenuSession] = {}


def create_session_id() -> str:
    """Generate a session id."""
    return secrets.token_urlsafe(16)


def hash_password(password: str) -> str:
    """Hash password for comparison."""
    return hashlib.sha256(password.encode()).hexdigest()


class SessionManager:
    """Owns Mini App sessions and runs the ordering flow against them."""

    def __init__(
        self,
        menu_repository: MenuRepository,
        bridge: HostBridge,
        admin_password: str,
        amount_multiplier: int = 100,
        clear_cart_on_checkout: bool = False,
    ):
        self.menu_repository = menu_repository
        self.bridge = bridge
        self._admin_password_hash = hash_password(admin_password)
        self.amount_multiplier = amount_multiplier
        self.clear_cart_on_checkout = clear_cart_on_checkout

    # Sessions

    async def create_session(self, stop_param: Optional[str] = None) -> MenuSession:
        """Create a session, seeding the stop list from the launch parameter."""
        session_id = create_session_id()
        state = OrderingState(
            session_id=session_id,
            active_category=await self.menu_repository.get_default_category(),
            stop_list=parse_stop_param(stop_param),
        )
        session = MenuSession(session_id=session_id, state=state)
        _sessions[session_id] = session
        logger.info(
            f"[SESSION] Created session {session_id} - "
            f"stop list: {state.stop_list or 'empty'}"
        )
        return session

    async def get_session(self, session_id: str) -> MenuSession:
        """Get an existing session."""
        session = _sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session '{session_id}' not found")
        return session

    async def close_session(self, session_id: str) -> None:
        """Forget a session. Unknown ids are ignored."""
        _sessions.pop(session_id, None)
        self.bridge.discard(session_id)
        logger.info(f"[SESSION] Closed session {session_id}")

    # Browsing

    async def browse(
        self, session_id: str, category: Optional[Category] = None
    ) -> Tuple[Optional[Category], List[MenuCard]]:
        """
        List products of a category, switching the active tab if given.

        Returns:
            Tuple of (active category, cards)
        """
        session = await self.get_session(session_id)
        state = session.state
        if category is not None:
            state.active_category = category
        if state.active_category is None:
            return None, []

        cards = await self.menu_repository.browse(
            state.active_category,
            stop_list=state.stop_list,
            include_stopped=state.is_admin,
        )
        return state.active_category, cards

    # Product sheet

    async def _get_product(self, product_id: int) -> Product:
        product = await self.menu_repository.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")
        return product

    async def _sheet(self, state: OrderingState) -> ProductSheet:
        if state.selected_product_id is None:
            raise NoProductSelectedError("No product is open")
        product = await self._get_product(state.selected_product_id)
        fields = applicable_fields(product)
        alert = missing_requirement(product, state.options)
        return ProductSheet(
            product=product,
            options=state.options,
            fields=[field for field in OptionField if field in fields],
            price=compute_price(product, state.options),
            can_add=alert is None,
            alert=alert,
        )

    async def open_product(self, session_id: str, product_id: int) -> ProductSheet:
        """Open the product sheet with an empty selection.

        In admin mode taps toggle the stop list instead, and ordinary users
        cannot open stopped products.
        """
        session = await self.get_session(session_id)
        if session.state.is_admin:
            raise AdminModeError("Product sheets are closed in admin mode")
        product = await self._get_product(product_id)
        if product.id in session.state.stop_list:
            raise ProductUnavailableError(f"Product {product.id} is unavailable")
        session.state.open_product(product.id)
        logger.debug(f"[SESSION] {session_id} opened product {product.id} ({product.name})")
        return await self._sheet(session.state)

    async def get_sheet(self, session_id: str) -> ProductSheet:
        """Current product sheet with the refreshed price."""
        session = await self.get_session(session_id)
        return await self._sheet(session.state)

    async def close_product(self, session_id: str) -> None:
        session = await self.get_session(session_id)
        session.state.close_product()

    async def toggle_option(
        self, session_id: str, field: OptionField, value: Optional[str] = None
    ) -> ProductSheet:
        """
        Toggle one option of the open product and reprice.

        Args:
            session_id: Session id
            field: Field being toggled
            value: Choice for the field (size label for sizes, ignored for cinnamon)

        Returns:
            Updated product sheet
        """
        session = await self.get_session(session_id)
        state = session.state
        if state.selected_product_id is None:
            raise NoProductSelectedError("No product is open")
        product = await self._get_product(state.selected_product_id)

        try:
            if field == OptionField.SIZE:
                option_rules.check_choice(product, field)
                choice = option_rules.size_choice(product, value or "")
                state.options = option_rules.toggle(state.options, field, choice)
            else:
                option_rules.check_choice(product, field, value)
                state.options = option_rules.toggle(state.options, field, value)
        except option_rules.OptionNotApplicableError as e:
            raise OptionNotApplicableError(str(e)) from e
        except option_rules.InvalidOptionError as e:
            raise InvalidOptionError(str(e)) from e

        return await self._sheet(state)

    async def add_to_cart(self, session_id: str) -> AddResult:
        """
        Add the open product to the cart if its selection is complete.

        Incomplete selections are not errors: the alert text is returned and
        the sheet stays open.
        """
        session = await self.get_session(session_id)
        state = session.state
        if state.selected_product_id is None:
            raise NoProductSelectedError("No product is open")
        product = await self._get_product(state.selected_product_id)

        alert = missing_requirement(product, state.options)
        if alert is not None:
            logger.debug(f"[SESSION] {session_id} add refused for {product.id}: {alert}")
            return AddResult(added=False, alert=alert)

        price = compute_price(product, state.options)
        item = compose_line_item(product, state.options, price)
        state.cart.add(item)
        state.close_product()
        logger.info(
            f"[SESSION] {session_id} added '{item.label}' for {item.price} - "
            f"cart: {len(state.cart)} items, total {state.cart.total}"
        )
        return AddResult(added=True, item=item)

    # Cart

    async def remove_from_cart(self, session_id: str, uid: str) -> OrderingState:
        session = await self.get_session(session_id)
        if not session.state.cart.remove(uid):
            logger.debug(f"[SESSION] {session_id} remove ignored, no entry {uid}")
        return session.state

    async def clear_cart(self, session_id: str) -> OrderingState:
        session = await self.get_session(session_id)
        session.state.cart.clear()
        return session.state

    async def set_address(self, session_id: str, floor: str, office: str) -> OrderingState:
        session = await self.get_session(session_id)
        session.state.floor = floor.strip()
        session.state.office = office.strip()
        return session.state

    async def checkout(self, session_id: str) -> CheckoutResult:
        """Send the cart to the host as an order payload."""
        session = await self.get_session(session_id)
        state = session.state

        if not state.cart.items:
            return CheckoutResult(sent=False, alert=ALERT_CART_EMPTY)
        if not state.floor or not state.office:
            return CheckoutResult(sent=False, alert=ALERT_ADDRESS_REQUIRED)

        payload = build_order_payload(
            state.cart.items,
            address=format_address(state.floor, state.office),
            amount_multiplier=self.amount_multiplier,
        )
        data = serialize_payload(payload)
        self.bridge.send_payload(session_id, data)
        logger.info(
            f"[CHECKOUT] {session_id} sent order - {len(payload.items)} items, "
            f"total {state.cart.total}"
        )

        if self.clear_cart_on_checkout:
            state.cart.clear()
        return CheckoutResult(sent=True, payload=data)

    # Admin

    async def admin_login(self, session_id: str, password: str) -> str:
        """Switch the session to admin mode.

        Returns:
            Alert text confirming admin mode
        """
        session = await self.get_session(session_id)
        if not secrets.compare_digest(hash_password(password), self._admin_password_hash):
            logger.warning(f"[ADMIN] {session_id} failed admin login")
            raise InvalidPasswordError("Invalid password")
        session.state.is_admin = True
        session.state.close_product()
        logger.info(f"[ADMIN] {session_id} entered admin mode")
        return ALERT_ADMIN_ENABLED

    async def _require_admin(self, session_id: str) -> MenuSession:
        session = await self.get_session(session_id)
        if not session.state.is_admin:
            raise AdminRequiredError("Admin mode required")
        return session

    async def toggle_stop(self, session_id: str, product_id: int) -> List[int]:
        """Put a product on the stop list or take it off."""
        session = await self._require_admin(session_id)
        product = await self._get_product(product_id)
        session.state.stop_list = toggle_stopped(session.state.stop_list, product.id)
        logger.info(
            f"[ADMIN] {session_id} toggled product {product.id} - "
            f"stop list: {session.state.stop_list}"
        )
        return session.state.stop_list

    async def save_stop_list(self, session_id: str) -> str:
        """Send the stop list to the host as an admin_sync payload."""
        session = await self._require_admin(session_id)
        data = serialize_payload(build_admin_sync_payload(session.state.stop_list))
        self.bridge.send_payload(session_id, data)
        logger.info(f"[ADMIN] {session_id} synced stop list {session.state.stop_list}")
        return data
