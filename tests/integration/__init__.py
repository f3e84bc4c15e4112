"""
HTTP test package for TaskHub.

Tests use the Flask test client and demonstrate:
- Authentication and token enforcement testing
- Create/list operation testing
- Error handling and routing fallback testing
"""
