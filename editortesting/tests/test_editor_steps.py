"""
Scenarios for the step library, run against the in-memory fakes.

The ``browser_session`` and ``field_locator`` fixtures from
``editortesting.steps`` are overridden here so no browser is launched.
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then

from editortesting.fakes import FakeBrowserSession, FakeEditor, FakeFieldLocator

scenarios("features/editor_steps.feature")


@pytest.fixture
def fake_session():
    return FakeBrowserSession()


@pytest.fixture
def fake_locator():
    return FakeFieldLocator()


@pytest.fixture
def browser_session(fake_session):
    return fake_session


@pytest.fixture
def field_locator(fake_locator):
    return fake_locator


@given(
    parsers.parse(
        'a ready CKEditor "{instance_id}" labelled "{label}" containing "{content}"'
    )
)
def ready_ckeditor(fake_session, fake_locator, instance_id, label, content):
    fake_session.add_editor(FakeEditor(instance_id, content=content))
    fake_locator.add_field(label, instance_id)


@given(parsers.parse('the "{command}" command of "{instance_id}" returns true'))
def command_returns_true(fake_session, command, instance_id):
    fake_session.editors[instance_id].command_results[command] = True


@then(parsers.parse('the "{command}" command was executed on "{instance_id}"'))
def command_was_executed(fake_session, command, instance_id):
    assert fake_session.editors[instance_id].executed == [(command, None)]
