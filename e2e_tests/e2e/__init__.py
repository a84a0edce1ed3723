"""
End-to-end tests using Playwright against Django's live server.

These tests drive the TinyMCE editor on the preview page through the same
EditorTestAdapter and step library the unit tests exercise with fakes.

IMPORTANT: E2E tests MUST NOT be run in parallel because
DJANGO_ALLOW_ASYNC_UNSAFE affects the entire Python process. Use:
    pytest e2e_tests/ -n 0    # Explicitly disable parallel execution
    pytest e2e_tests/         # Or omit -n flag (defaults to sequential)
"""
