"""
Pytest fixtures for end-to-end browser testing with Playwright and Django.

Provides a StaticLiveServerTestCase base class with a Playwright browser for
class-based tests, and page fixtures for the pytest-bdd scenarios.
"""

import os

import pytest
from django.contrib.staticfiles.testing import StaticLiveServerTestCase
from playwright.sync_api import sync_playwright

from editortesting import TINYMCE

# Test password used across all E2E tests
TEST_PASSWORD = "testpass123"


class DjangoPlaywrightTestCase(StaticLiveServerTestCase):
    """
    Base test case that combines Django's live server with Playwright.

    StaticLiveServerTestCase serves the TinyMCE files bundled with
    django-tinymce, so the editor loads exactly as it does in production.

    IMPORTANT: Sets DJANGO_ALLOW_ASYNC_UNSAFE in setUpClass to allow Django ORM
    operations while Playwright's event loop is running. Do NOT run these
    tests in parallel.
    """

    @classmethod
    def setUpClass(cls):
        os.environ["DJANGO_ALLOW_ASYNC_UNSAFE"] = "true"

        super().setUpClass()
        cls.playwright = sync_playwright().start()
        cls.browser = cls.playwright.chromium.launch(headless=True)

    @classmethod
    def tearDownClass(cls):
        cls.browser.close()
        cls.playwright.stop()

        os.environ.pop("DJANGO_ALLOW_ASYNC_UNSAFE", None)

        super().tearDownClass()

    def setUp(self):
        super().setUp()
        # New browser context per test (isolated cookies, etc.)
        self.context = self.browser.new_context()
        self.page = self.context.new_page()

    def tearDown(self):
        self.page.close()
        self.context.close()
        super().tearDown()

    def create_staff_user(self, username="editor_admin"):
        from django.contrib.auth import get_user_model

        return get_user_model().objects.create_user(
            username=username,
            password=TEST_PASSWORD,
            email=f"{username}@example.com",
            is_staff=True,
        )

    def login(self, username="editor_admin", password=TEST_PASSWORD):
        """Log in through the admin login form.

        Raises:
            AssertionError: If login fails or redirect doesn't occur.
        """
        _admin_login(self.page, self.live_server_url, username, password)


def _admin_login(page, base_url, username, password):
    page.goto(f"{base_url}/admin/login/")
    page.fill('input[name="username"]', username)
    page.fill('input[name="password"]', password)
    page.click('input[type="submit"]')
    page.wait_for_url(f"{base_url}/admin/**")

    current_url = page.url
    assert "/login/" not in current_url, f"Login failed - still on login page: {current_url}"


# Pytest fixtures for the pytest-bdd scenarios


@pytest.fixture(scope="session")
def browser_type_launch_args():
    """Configure Playwright browser launch arguments."""
    return {"headless": True}


@pytest.fixture(scope="session")
def browser_context_args():
    return {"viewport": {"width": 1280, "height": 720}}


@pytest.fixture(autouse=True)
def allow_async_unsafe(monkeypatch):
    monkeypatch.setenv("DJANGO_ALLOW_ASYNC_UNSAFE", "true")


@pytest.fixture
def wysiwyg_dialect():
    """The project's own widget is TinyMCE."""
    return TINYMCE


@pytest.fixture
def admin_page(page, live_server, transactional_db, django_user_model):
    """
    Provide a Playwright page with a staff user session.

    Uses get_or_create to avoid IntegrityError when scenarios share a database.
    """
    user, created = django_user_model.objects.get_or_create(
        username="e2e_editor_admin",
        defaults={"email": "e2e_editor_admin@example.com", "is_staff": True},
    )
    if created:
        user.set_password(TEST_PASSWORD)
        user.save()

    _admin_login(page, live_server.url, "e2e_editor_admin", TEST_PASSWORD)
    return page
