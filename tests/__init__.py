"""
Test suite for the address book service.

This package contains:
- unit/: store and payload semantics without HTTP
- integration/: CRUD contract through the Flask test client
- contracts/: responses validated against the OpenAPI document
- smoke/: end-to-end checks against a live server
"""
