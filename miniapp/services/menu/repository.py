"""Menu repository."""
from typing import Iterable, List, Optional

from pydantic import BaseModel

from miniapp.services.menu.base import Category, CategoryInfo, Menu, MenuProvider, Product


class MenuCard(BaseModel):
    """Product as shown in the category grid."""

    product: Product
    starting_price: int
    stopped: bool = False


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self.provider.get_menu()

    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get product by id."""
        return await self.provider.get_product(product_id)

    async def get_categories(self) -> List[CategoryInfo]:
        """Get category tabs in display order."""
        menu = await self.get_menu()
        return menu.categories

    async def get_default_category(self) -> Optional[Category]:
        """First category tab, used when a session opens."""
        categories = await self.get_categories()
        return categories[0].id if categories else None

    async def browse(
        self,
        category: Category,
        stop_list: Iterable[int] = (),
        include_stopped: bool = False,
    ) -> List[MenuCard]:
        """
        List the products of a category for the menu grid.

        Args:
            category: Category tab being browsed
            stop_list: Product ids currently unavailable
            include_stopped: Admins see stopped products (flagged), users don't

        Returns:
            Cards in catalog order
        """
        stopped_ids = set(stop_list)
        cards = []
        for product in await self.provider.get_products_by_category(category):
            stopped = product.id in stopped_ids
            if stopped and not include_stopped:
                continue
            cards.append(
                MenuCard(
                    product=product,
                    starting_price=product.starting_price,
                    stopped=stopped,
                )
            )
        return cards
