"""
Test suite for the TaskHub backend.

This package contains:
- unit/: store, credential, repository and configuration tests
- integration/: HTTP tests through the Flask test client
"""
