import pytest

from storefront_e2e.ui_testing.framework.config_loader import SessionSettings
from storefront_e2e.ui_testing.framework.page_base import BasePage
from storefront_e2e.unit.fake_browser import FakePage


@pytest.fixture
def settings() -> SessionSettings:
    # Short budgets keep timeout paths fast.
    return SessionSettings(
        base_url="https://shop.test",
        default_timeout_ms=200,
        extended_timeout_ms=400,
        poll_interval_ms=10,
        navigation_timeout_ms=1000,
    )


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def base(fake_page: FakePage, settings: SessionSettings) -> BasePage:
    return BasePage(fake_page, settings)
