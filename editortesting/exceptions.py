"""
Failures raised by the editor test adapter.

Every error is raised where it is detected and left for the test runner to
report. The assertion failures also subclass ``AssertionError`` so pytest
renders them as ordinary failed assertions.
"""


class EditorTestError(Exception):
    """Base class for all editor test adapter failures."""


class ElementNotFound(EditorTestError, LookupError):
    def __init__(self, locator):
        self.locator = locator
        super().__init__(f'Form field "{locator}" was not found on the page')


class NoEditorInstance(EditorTestError, LookupError):
    def __init__(self):
        super().__init__("No editor instances are registered on the page")


class EditorNotReady(EditorTestError, TimeoutError):
    def __init__(self, instance_id, timeout_ms):
        self.instance_id = instance_id
        self.timeout_ms = timeout_ms
        super().__init__(
            f'Editor "{instance_id}" was not ready after {timeout_ms} ms'
        )


class ContentMismatch(EditorTestError, AssertionError):
    """The editor content does not contain or match what the step expects."""

    def __init__(self, editor_id, expected, content=None, is_pattern=False):
        self.editor_id = editor_id
        self.expected = expected
        self.content = content
        self.is_pattern = is_pattern
        what = "match the pattern" if is_pattern else "contain"
        super().__init__(f'Editor "{editor_id}" does not {what} "{expected}"')


class CommandFailed(EditorTestError, AssertionError):
    def __init__(self, command, result):
        self.command = command
        self.result = result
        super().__init__(
            f'Command "{command}" failed, the editor returned: {result!r}'
        )
