"""
Browser capabilities the editor test adapter talks to.

The adapter never touches a driver directly. It receives a ``BrowserSession``
for script evaluation and a ``FieldLocator`` for form lookups, so the same
adapter runs against Playwright in browser tests and against the in-memory
fakes in unit tests.
"""

import json
import logging
from typing import Any, Optional, Protocol

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import ElementNotFound

logger = logging.getLogger(__name__)

# Mink's fieldExists() only considers form controls.
FIELD_TAGS = ("input", "textarea", "select")


class BrowserSession(Protocol):
    def evaluate_script(self, script: str, arg: Any = None) -> Any: ...

    def execute_script(self, script: str, arg: Any = None) -> None: ...

    def wait(self, timeout_ms: int, condition: str, arg: Any = None) -> bool: ...


class ElementHandle(Protocol):
    def get_attribute(self, name: str) -> Optional[str]: ...


class FieldLocator(Protocol):
    def field_exists(self, locator: str) -> ElementHandle: ...


class PlaywrightBrowserSession:
    """BrowserSession backed by a Playwright sync ``Page``."""

    def __init__(self, page):
        self.page = page

    def evaluate_script(self, script, arg=None):
        return self.page.evaluate(script, arg)

    def execute_script(self, script, arg=None):
        self.page.evaluate(script, arg)

    def wait(self, timeout_ms, condition, arg=None):
        try:
            self.page.wait_for_function(condition, arg=arg, timeout=timeout_ms)
        except PlaywrightTimeoutError:
            logger.debug("Condition not met within %s ms", timeout_ms)
            return False
        return True


class PlaywrightElement:
    def __init__(self, locator):
        self.locator = locator

    def get_attribute(self, name):
        return self.locator.get_attribute(name)


def _attribute_selector(attribute, value):
    # json.dumps yields a double-quoted, escaped string CSS accepts as-is
    quoted = json.dumps(value)
    return ", ".join(f"{tag}[{attribute}={quoted}]" for tag in FIELD_TAGS)


class PlaywrightFieldLocator:
    """
    Find a form field the way Mink's ``fieldExists`` does.

    The locator is tried as an element id, then a ``name`` attribute, then a
    label text and finally a placeholder. The first form control that matches
    wins.
    """

    def __init__(self, page):
        self.page = page

    def _candidates(self, locator):
        form_controls = ", ".join(FIELD_TAGS)
        yield self.page.locator(_attribute_selector("id", locator))
        yield self.page.locator(_attribute_selector("name", locator))
        yield self.page.get_by_label(locator, exact=True).and_(
            self.page.locator(form_controls)
        )
        yield self.page.get_by_placeholder(locator, exact=True)

    def field_exists(self, locator):
        for candidate in self._candidates(locator):
            if candidate.count():
                return PlaywrightElement(candidate.first)
        raise ElementNotFound(locator)
