"""
In-memory stand-ins for a browser page holding editor instances.

``FakeBrowserSession`` answers the scripts of one ``EditorDialect`` from a
plain registry of ``FakeEditor`` objects, so adapter behaviour can be checked
without launching a browser.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .dialects import CKEDITOR
from .exceptions import ElementNotFound


@dataclass
class FakeEditor:
    instance_id: str
    content: str = ""
    # None means the editor never becomes ready
    ready_after_ms: Optional[int] = 0
    command_results: Dict[str, Any] = field(default_factory=dict)
    executed: List[tuple] = field(default_factory=list)


class FakeBrowserSession:
    def __init__(self, editors=(), dialect=CKEDITOR):
        self.dialect = dialect
        self.editors = {editor.instance_id: editor for editor in editors}
        self.calls = []
        self.waited_ms = []

    def add_editor(self, editor):
        self.editors[editor.instance_id] = editor
        return editor

    def _editor(self, instance_id):
        try:
            return self.editors[instance_id]
        except KeyError:
            raise RuntimeError(
                f"TypeError: {self.dialect.registry}[{instance_id!r}] is undefined"
            ) from None

    def evaluate_script(self, script, arg=None):
        self.calls.append((script, arg))
        if script == self.dialect.instance_ids:
            return list(self.editors)
        if script == self.dialect.get_data:
            return self._editor(arg).content
        if script == self.dialect.exec_command:
            instance_id, command, encoded = arg
            editor = self._editor(instance_id)
            data = None if encoded is None else json.loads(encoded)
            editor.executed.append((command, data))
            result = editor.command_results.get(command)
            return None if result is None else json.dumps(result)
        if script == self.dialect.insert_html:
            instance_id, html = arg
            self._editor(instance_id).content += html
            return None
        raise NotImplementedError(f"Unexpected script: {script.strip()}")

    def execute_script(self, script, arg=None):
        self.evaluate_script(script, arg)

    def wait(self, timeout_ms, condition, arg=None):
        if condition != self.dialect.is_ready:
            raise NotImplementedError(f"Unexpected condition: {condition.strip()}")
        editor = self.editors.get(arg)
        ready_at = None if editor is None else editor.ready_after_ms
        if ready_at is None or ready_at > timeout_ms:
            self.waited_ms.append(timeout_ms)
            return False
        self.waited_ms.append(ready_at)
        return True


class FakeElement:
    def __init__(self, attributes):
        self.attributes = dict(attributes)

    def get_attribute(self, name):
        return self.attributes.get(name)


class FakeFieldLocator:
    """Maps field locators (labels, names, ids) to fake elements."""

    def __init__(self, fields=None):
        self.fields = {}
        for locator, element_id in (fields or {}).items():
            self.add_field(locator, element_id)

    def add_field(self, locator, element_id):
        self.fields[locator] = FakeElement({"id": element_id})

    def field_exists(self, locator):
        try:
            return self.fields[locator]
        except KeyError:
            raise ElementNotFound(locator) from None
