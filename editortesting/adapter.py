"""
Drive a rich-text editor inside a live browser page from test steps.

Each public operation is one synchronous sequence against the browser:
resolve the editor instance, wait for it to report ready, evaluate a script
and interpret the result. Nothing is cached between calls; the browser owns
all editor state.
"""

import json
import logging
import re
from dataclasses import dataclass

from .dialects import CKEDITOR, EditorDialect
from .exceptions import (
    CommandFailed,
    ContentMismatch,
    EditorNotReady,
    NoEditorInstance,
)

logger = logging.getLogger(__name__)

DEFAULT_READY_TIMEOUT_MS = 10000


@dataclass(frozen=True)
class EditorReference:
    """Handle on one editor instance, valid only for the session that made it."""

    instance_id: str
    dialect: EditorDialect

    @property
    def expression(self):
        return self.dialect.expression(self.instance_id)


class EditorTestAdapter:
    def __init__(
        self,
        session,
        locator,
        dialect=CKEDITOR,
        ready_timeout_ms=DEFAULT_READY_TIMEOUT_MS,
    ):
        self.session = session
        self.locator = locator
        self.dialect = dialect
        self.ready_timeout_ms = ready_timeout_ms

    # -- resolution ---------------------------------------------------------

    def instance_ids(self):
        """Snapshot of the registered instance ids, in browser order."""
        return list(self.session.evaluate_script(self.dialect.instance_ids) or [])

    def default_instance_id(self):
        ids = self.instance_ids()
        if not ids:
            raise NoEditorInstance()
        return ids[0]

    def _wait_until_ready(self, instance_id):
        ready = self.session.wait(
            self.ready_timeout_ms, self.dialect.is_ready, instance_id
        )
        if not ready:
            logger.warning(
                "Editor %s not ready after %s ms", instance_id, self.ready_timeout_ms
            )
            raise EditorNotReady(instance_id, self.ready_timeout_ms)
        reference = EditorReference(instance_id, self.dialect)
        logger.debug("Resolved editor %s", reference.expression)
        return reference

    def resolve_editor(self, field=None):
        """
        Resolve the editor attached to a form field.

        ``field`` may be an id, name, label or placeholder understood by the
        field locator; the element's ``id`` is the editor instance key. Without
        a field the first registered instance is used.

        Raises:
            ElementNotFound: The named field is not on the page.
            NoEditorInstance: No field was given and no editor is registered.
            EditorNotReady: The editor did not become ready in time.
        """
        if field:
            element = self.locator.field_exists(field)
            instance_id = element.get_attribute("id") or ""
        else:
            instance_id = self.default_instance_id()
        return self._wait_until_ready(instance_id)

    def resolve_instance(self, instance_id=None):
        """Resolve an editor by its raw instance id rather than a field."""
        if not instance_id:
            instance_id = self.default_instance_id()
        return self._wait_until_ready(instance_id)

    # -- operations ---------------------------------------------------------

    def insert_content(self, text, field=None):
        editor = self.resolve_editor(field)
        self.session.execute_script(
            self.dialect.insert_html, [editor.instance_id, text]
        )

    def get_content(self, instance_id=None):
        editor = self.resolve_instance(instance_id)
        content = self.session.evaluate_script(
            self.dialect.get_data, editor.instance_id
        )
        return "" if content is None else str(content)

    def assert_contains(self, text, instance_id=None):
        content = self.get_content(instance_id)
        if text not in content:
            raise ContentMismatch(instance_id or "", text, content)

    def assert_matches(self, pattern, instance_id=None):
        content = self.get_content(instance_id)
        if re.search(pattern, content) is None:
            raise ContentMismatch(instance_id or "", pattern, content, is_pattern=True)

    def execute_command(self, command, instance_id=None, data=None):
        """
        Run a named editor command and require a truthy result.

        ``data`` travels JSON-encoded and the command's return value comes
        back the same way. ``None``, ``""``, ``0``, ``False`` and empty
        containers all count as failure.
        """
        editor = self.resolve_instance(instance_id)
        encoded = None if data is None else json.dumps(data)
        raw = self.session.evaluate_script(
            self.dialect.exec_command, [editor.instance_id, command, encoded]
        )
        result = None if raw is None else json.loads(raw)
        if not result:
            raise CommandFailed(command, result)
        return result
