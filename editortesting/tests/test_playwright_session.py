"""
Tests for the Playwright-backed browser capabilities.

The Playwright page is replaced by a MagicMock; these tests only check the
calls made on it and how its results and timeouts are translated.
"""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from editortesting.exceptions import ElementNotFound
from editortesting.session import (
    PlaywrightBrowserSession,
    PlaywrightElement,
    PlaywrightFieldLocator,
)


def _locator(count):
    locator = MagicMock()
    locator.count.return_value = count
    return locator


def test_evaluate_script_passes_argument_to_page():
    page = MagicMock()
    page.evaluate.return_value = ["edit-body"]
    session = PlaywrightBrowserSession(page)

    assert session.evaluate_script("() => ids", None) == ["edit-body"]
    page.evaluate.assert_called_once_with("() => ids", None)


def test_execute_script_discards_result():
    page = MagicMock()
    session = PlaywrightBrowserSession(page)
    assert session.execute_script("(args) => insert(args)", ["a", "b"]) is None
    page.evaluate.assert_called_once_with("(args) => insert(args)", ["a", "b"])


def test_wait_returns_true_when_condition_met():
    page = MagicMock()
    session = PlaywrightBrowserSession(page)
    assert session.wait(10000, "(id) => ready(id)", "edit-body") is True
    page.wait_for_function.assert_called_once_with(
        "(id) => ready(id)", arg="edit-body", timeout=10000
    )


def test_wait_returns_false_on_playwright_timeout():
    page = MagicMock()
    page.wait_for_function.side_effect = PlaywrightTimeoutError("Timeout 10000ms")
    session = PlaywrightBrowserSession(page)
    assert session.wait(10000, "(id) => ready(id)", "edit-body") is False


def test_wait_propagates_other_errors():
    page = MagicMock()
    page.wait_for_function.side_effect = RuntimeError("page crashed")
    session = PlaywrightBrowserSession(page)
    with pytest.raises(RuntimeError):
        session.wait(10000, "(id) => ready(id)", "edit-body")


def test_field_locator_prefers_id_match():
    page = MagicMock()
    by_id = _locator(1)
    page.locator.return_value = by_id
    element = PlaywrightFieldLocator(page).field_exists("edit-body")

    assert isinstance(element, PlaywrightElement)
    assert element.locator is by_id.first
    selector = page.locator.call_args_list[0].args[0]
    assert 'textarea[id="edit-body"]' in selector
    assert 'input[id="edit-body"]' in selector
    page.get_by_label.assert_not_called()


def test_field_locator_falls_back_to_label():
    page = MagicMock()
    page.locator.return_value = _locator(0)
    by_label = _locator(1)
    page.get_by_label.return_value.and_.return_value = by_label

    element = PlaywrightFieldLocator(page).field_exists("Body")

    assert element.locator is by_label.first
    page.get_by_label.assert_called_once_with("Body", exact=True)


def test_field_locator_quotes_locator_in_selector():
    page = MagicMock()
    page.locator.return_value = _locator(1)
    PlaywrightFieldLocator(page).field_exists('say "hi"')
    selector = page.locator.call_args_list[0].args[0]
    assert 'textarea[id="say \\"hi\\""]' in selector


def test_field_locator_raises_when_nothing_matches():
    page = MagicMock()
    page.locator.return_value = _locator(0)
    page.get_by_label.return_value.and_.return_value = _locator(0)
    page.get_by_placeholder.return_value = _locator(0)

    with pytest.raises(ElementNotFound) as excinfo:
        PlaywrightFieldLocator(page).field_exists("Missing")
    assert excinfo.value.locator == "Missing"


def test_element_reads_attribute_from_locator():
    locator = MagicMock()
    locator.get_attribute.return_value = "edit-body"
    assert PlaywrightElement(locator).get_attribute("id") == "edit-body"
    locator.get_attribute.assert_called_once_with("id")
