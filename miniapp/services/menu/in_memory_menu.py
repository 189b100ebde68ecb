"""In-memory menu provider."""
import logging
import yaml
from pathlib import Path
from typing import List, Optional
from miniapp.services.menu.base import Category, CategoryInfo, Menu, MenuProvider, Product

logger = logging.getLogger(__name__)


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._menu: Optional[Menu] = None

    async def _load_menu(self) -> Menu:
        """Load menu from YAML file."""
        if self._menu is None:
            if not self.menu_file.exists():
                logger.warning(
                    f"[MENU] Menu file not found: {self.menu_file}, using built-in menu"
                )
                self._menu = Menu(
                    items=[
                        Product(
                            id=1,
                            category=Category.COFFEE,
                            name="Капучино",
                            sizes={"250": 190, "350": 230},
                        ),
                        Product(
                            id=2,
                            category=Category.FOOD,
                            name="Круассан",
                            price=150,
                        ),
                    ],
                    categories=[
                        CategoryInfo(id=Category.COFFEE, label="Кофе"),
                        CategoryInfo(id=Category.FOOD, label="Еда"),
                    ],
                )
            else:
                with open(self.menu_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                    items = [
                        Product(**item) for item in data.get("items", [])
                    ]
                    categories = [
                        CategoryInfo(**category)
                        for category in data.get("categories", [])
                    ]
                    self._menu = Menu(items=items, categories=categories)
                logger.info(
                    f"[MENU] Loaded {len(self._menu.items)} products from {self.menu_file}"
                )
        return self._menu

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self._load_menu()

    async def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by id."""
        menu = await self._load_menu()
        for item in menu.items:
            if item.id == product_id:
                return item
        return None

    async def get_products_by_category(self, category: Category) -> List[Product]:
        """Get all products of a category in catalog order."""
        menu = await self._load_menu()
        return [item for item in menu.items if item.category == category]
