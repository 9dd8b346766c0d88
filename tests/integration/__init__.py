"""
API test package for the address book.

This package contains tests for the REST API endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- HTTP method safety and idempotence checks
- Error handling testing
"""
