"""
pytest-bdd step definitions for rich-text editors.

Load the library from a root ``conftest.py``::

    pytest_plugins = ["editortesting.steps"]

The ``CKEditor`` steps always talk to CKEditor. The ``WYSIWYG`` steps use
whatever dialect the ``wysiwyg_dialect`` fixture returns, CKEditor unless a
test suite overrides it.
"""

import pytest
from pytest_bdd import given, parsers, then, when

from .adapter import DEFAULT_READY_TIMEOUT_MS, EditorTestAdapter
from .dialects import CKEDITOR
from .session import PlaywrightBrowserSession, PlaywrightFieldLocator


@pytest.fixture
def browser_session(page):
    return PlaywrightBrowserSession(page)


@pytest.fixture
def field_locator(page):
    return PlaywrightFieldLocator(page)


@pytest.fixture
def editor_ready_timeout_ms():
    return DEFAULT_READY_TIMEOUT_MS


@pytest.fixture
def wysiwyg_dialect():
    return CKEDITOR


@pytest.fixture
def ckeditor(browser_session, field_locator, editor_ready_timeout_ms):
    return EditorTestAdapter(
        browser_session,
        field_locator,
        dialect=CKEDITOR,
        ready_timeout_ms=editor_ready_timeout_ms,
    )


@pytest.fixture
def wysiwyg(browser_session, field_locator, wysiwyg_dialect, editor_ready_timeout_ms):
    return EditorTestAdapter(
        browser_session,
        field_locator,
        dialect=wysiwyg_dialect,
        ready_timeout_ms=editor_ready_timeout_ms,
    )


# CKEditor


@given(parsers.re(r'CKEditor for the "(?P<field>[^"]*)" field (?:exists|should exist)'))
@then(parsers.re(r'CKEditor for the "(?P<field>[^"]*)" field (?:exists|should exist)'))
def ckeditor_exists(ckeditor, field):
    ckeditor.resolve_editor(field)


@given(parsers.re(r'I put "(?P<text>.*)" into CKEditor(?: "(?P<field>[^"]*)"(?: field)?)?'))
@when(parsers.re(r'I put "(?P<text>.*)" into CKEditor(?: "(?P<field>[^"]*)"(?: field)?)?'))
def put_into_ckeditor(ckeditor, text, field):
    ckeditor.insert_content(text, field)


@then(parsers.re(r'CKEditor(?: "(?P<instance_id>[^"]*)")? should contain "(?P<text>.*)"'))
def ckeditor_should_contain(ckeditor, instance_id, text):
    ckeditor.assert_contains(text, instance_id)


@then(parsers.re(r'CKEditor(?: "(?P<instance_id>[^"]*)")? should match "(?P<expression>.*)"'))
def ckeditor_should_match(ckeditor, instance_id, expression):
    ckeditor.assert_matches(expression, instance_id)


@given(parsers.re(r'I execute the "(?P<command>[^"]*)" command in CKEditor(?: "(?P<instance_id>[^"]*)")?'))
@when(parsers.re(r'I execute the "(?P<command>[^"]*)" command in CKEditor(?: "(?P<instance_id>[^"]*)")?'))
def execute_ckeditor_command(ckeditor, command, instance_id):
    ckeditor.execute_command(command, instance_id)


# WYSIWYG


@given(parsers.re(r'WYSIWYG for the "(?P<field>[^"]*)" field (?:exists|should exist)'))
@then(parsers.re(r'WYSIWYG for the "(?P<field>[^"]*)" field (?:exists|should exist)'))
def wysiwyg_exists(wysiwyg, field):
    wysiwyg.resolve_editor(field)


@given(parsers.re(r'I put "(?P<text>.*)" into WYSIWYG(?: of "(?P<field>[^"]*)"(?: field)?)?'))
@when(parsers.re(r'I put "(?P<text>.*)" into WYSIWYG(?: of "(?P<field>[^"]*)"(?: field)?)?'))
def put_into_wysiwyg(wysiwyg, text, field):
    wysiwyg.insert_content(text, field)


@then(parsers.re(r'WYSIWYG(?: "(?P<instance_id>[^"]*)")? should contain "(?P<text>.*)"'))
def wysiwyg_should_contain(wysiwyg, instance_id, text):
    wysiwyg.assert_contains(text, instance_id)


@then(parsers.re(r'WYSIWYG(?: "(?P<instance_id>[^"]*)")? should match "(?P<expression>.*)"'))
def wysiwyg_should_match(wysiwyg, instance_id, expression):
    wysiwyg.assert_matches(expression, instance_id)
