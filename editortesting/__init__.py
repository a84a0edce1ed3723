"""
Browser-test helpers for pages that embed a rich-text editor.

The adapter translates test steps such as "put text into CKEditor" into
scripts evaluated inside the page and turns the results into assertions.
"""

from .adapter import DEFAULT_READY_TIMEOUT_MS, EditorReference, EditorTestAdapter
from .dialects import CKEDITOR, TINYMCE, EditorDialect, get_dialect
from .exceptions import (
    CommandFailed,
    ContentMismatch,
    EditorNotReady,
    EditorTestError,
    ElementNotFound,
    NoEditorInstance,
)

__all__ = [
    "CKEDITOR",
    "DEFAULT_READY_TIMEOUT_MS",
    "TINYMCE",
    "CommandFailed",
    "ContentMismatch",
    "EditorDialect",
    "EditorNotReady",
    "EditorReference",
    "EditorTestAdapter",
    "EditorTestError",
    "ElementNotFound",
    "NoEditorInstance",
    "get_dialect",
]
