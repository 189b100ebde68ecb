"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-pass")
os.environ.setdefault("RESTAURANT_NAME", "Test Lunch")

from miniapp.main import app
from miniapp.core.config import Settings
from miniapp.core.dependencies import get_menu_repository, get_session_manager
from miniapp.services.bridge.host import OutboxBridge
from miniapp.services.menu.repository import MenuRepository
from miniapp.services.menu.in_memory_menu import InMemoryMenuProvider
from miniapp.services.session.manager import SessionManager


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        admin_password="test-admin-pass",
        restaurant_name="Test Lunch",
        amount_multiplier=100,
        clear_cart_on_checkout=False,
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository with test data."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def bridge():
    """Bridge that keeps sent payloads."""
    return OutboxBridge()


@pytest.fixture
def session_manager(test_menu_repository, bridge, test_settings, clean_sessions):
    """Create SessionManager for testing."""
    return SessionManager(
        menu_repository=test_menu_repository,
        bridge=bridge,
        admin_password=test_settings.admin_password,
        amount_multiplier=test_settings.amount_multiplier,
        clear_cart_on_checkout=test_settings.clear_cart_on_checkout,
    )


@pytest.fixture
def override_get_menu_repository(test_menu_repository):
    """Override get_menu_repository dependency with test menu."""
    def _override_get_menu_repository():
        return test_menu_repository
    return _override_get_menu_repository


@pytest.fixture
def test_client(override_get_menu_repository, session_manager):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_menu_repository] = override_get_menu_repository
    app.dependency_overrides[get_session_manager] = lambda: session_manager

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


@pytest.fixture
def clean_sessions():
    """Clean up ordering sessions before and after tests."""
    from miniapp.services.session import manager
    manager._sessions.clear()
    yield
    manager._sessions.clear()
