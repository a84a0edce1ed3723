"""
End-to-end tests package for wysiwygkit.

Browser-based E2E tests using Playwright live in the e2e/ subdirectory.
Named 'e2e_tests' rather than 'tests' to avoid clashing with the app test
directories during pytest collection.
"""
